"""Tests for prompt rendering."""

import pytest

from confirm_cli.render import render_prompt
from confirm_cli.schemas import Answer


def test_no_default():
    assert render_prompt("Continue?") == "Continue? [y/n]: "


@pytest.mark.parametrize(
    "default, full_words, expected",
    [
        (Answer.YES, False, "Deploy? [Y/n]: "),
        (Answer.NO, False, "Deploy? [y/N]: "),
        (Answer.RETRY, True, "Deploy? [yes/no]: "),
        (Answer.YES, True, "Deploy? [YES/no]: "),
        (Answer.NO, True, "Deploy? [yes/NO]: "),
    ],
)
def test_option_box_highlights_default(default, full_words, expected):
    assert render_prompt("Deploy?", default, full_words=full_words) == expected


def test_prompt_text_is_kept_verbatim():
    text = "  Remove [all] files?\t"
    rendered = render_prompt(text, Answer.NO)
    assert rendered.startswith(text)
    assert text == "  Remove [all] files?\t"
