"""Prompt rendering."""

from __future__ import annotations

from confirm_cli.schemas import Answer

_OPTION_BOXES = {
    (False, Answer.RETRY): "[y/n]",
    (False, Answer.YES): "[Y/n]",
    (False, Answer.NO): "[y/N]",
    (True, Answer.RETRY): "[yes/no]",
    (True, Answer.YES): "[YES/no]",
    (True, Answer.NO): "[yes/NO]",
}


def option_box(default: Answer, full_words: bool = False) -> str:
    return _OPTION_BOXES[(full_words, default)]


def render_prompt(prompt_text: str, default: Answer = Answer.RETRY, full_words: bool = False) -> str:
    """Return ``"{prompt_text} {box}: "``; the default choice is upper-cased."""
    return f"{prompt_text} {option_box(default, full_words)}: "
