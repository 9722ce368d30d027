"""Exit statuses reported to the calling shell script."""

from enum import IntEnum

from confirm_cli.schemas import Decision


class ExitCode(IntEnum):
    CONFIRMED = 0
    """The user answered yes (or the default was yes)."""

    DENIED = 1
    """The user answered no, or every allowed attempt was used up."""

    TERMINAL_ERROR = 2
    """The terminal was unusable, or the options were invalid."""

    INTERRUPTED = 130
    """User interrupted with SIGINT (Ctrl+C)."""


def exit_code_for(decision: Decision) -> ExitCode:
    if decision is Decision.CONFIRMED:
        return ExitCode.CONFIRMED
    return ExitCode.DENIED
