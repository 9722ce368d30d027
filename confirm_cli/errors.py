"""Exceptions raised by the confirmation engine."""


class ConfirmError(Exception):
    """Base exception for confirm-cli errors."""


class TerminalIOError(ConfirmError):
    """The terminal could not be written to or read from.

    Fatal for the whole session: never retried and never counted against
    the ask budget.
    """
