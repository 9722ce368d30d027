"""Turn raw terminal input into a verdict."""

from __future__ import annotations

from confirm_cli.schemas import Verdict

SHORT_ANSWERS = {"y": Verdict.AFFIRMATIVE, "n": Verdict.NEGATIVE}
FULL_ANSWERS = {"yes": Verdict.AFFIRMATIVE, "no": Verdict.NEGATIVE}


def classify(raw: str, full_words: bool = False) -> Verdict:
    """Classify one response.

    Surrounding whitespace is ignored, so a lone line terminator from a raw
    keystroke counts as empty. Matching is case-insensitive; with
    ``full_words`` only "yes"/"no" are accepted, otherwise only "y"/"n".
    """
    text = raw.strip()
    if not text:
        return Verdict.EMPTY
    answers = FULL_ANSWERS if full_words else SHORT_ANSWERS
    return answers.get(text.lower(), Verdict.INVALID)
