"""Low-level terminal access for single-keystroke input."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Iterator

from confirm_cli.errors import TerminalIOError

if sys.platform == "win32":
    import msvcrt
else:
    import termios
    import tty


CTRL_C = "\x03"


def stdin_is_tty() -> bool:
    stdin = sys.stdin
    return bool(stdin is not None and stdin.isatty())


def raw_mode_available(stream: IO[str] | None = None) -> bool:
    """Whether keystrokes can be read without waiting for enter."""
    if sys.platform == "win32":
        return True
    stream = stream if stream is not None else sys.stdin
    try:
        return stream is not None and stream.isatty()
    except (OSError, ValueError):
        return False


@contextmanager
def cbreak(fd: int) -> Iterator[None]:
    """Disable echo and line buffering on ``fd`` for the duration of the block.

    Signal keys stay live, so Ctrl-C still interrupts. The previous terminal
    attributes are restored on every exit path.
    """
    try:
        saved = termios.tcgetattr(fd)
    except (termios.error, OSError) as exc:
        raise TerminalIOError(f"Cannot read terminal attributes: {exc}") from exc
    try:
        tty.setcbreak(fd)
        yield
    except termios.error as exc:
        _restore(fd, saved, failing=True)
        raise TerminalIOError(f"Cannot switch terminal mode: {exc}") from exc
    except BaseException:
        _restore(fd, saved, failing=True)
        raise
    else:
        _restore(fd, saved)


def _restore(fd: int, saved: list, failing: bool = False) -> None:
    # A restore failure must not mask the error that is already propagating.
    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    except termios.error as exc:
        if not failing:
            raise TerminalIOError(f"Cannot restore terminal mode: {exc}") from exc


def read_keystroke(stream: IO[str] | None = None) -> str:
    """Read exactly one character, unechoed, without waiting for enter."""
    if sys.platform == "win32":
        return _read_console_key()

    stream = stream if stream is not None else sys.stdin
    try:
        fd = stream.fileno()
    except (OSError, ValueError) as exc:
        raise TerminalIOError(f"Terminal is not readable: {exc}") from exc

    with cbreak(fd):
        try:
            ch = stream.read(1)
        except (OSError, ValueError) as exc:
            raise TerminalIOError(f"Error while reading user input: {exc}") from exc
    if not ch:
        raise TerminalIOError("Terminal closed while waiting for input")
    return ch


def _read_console_key() -> str:
    try:
        ch = msvcrt.getwch()
    except OSError as exc:
        raise TerminalIOError(f"Error while reading user input: {exc}") from exc
    # The Windows console hands Ctrl-C over as a key instead of a signal.
    if ch == CTRL_C:
        raise KeyboardInterrupt
    return ch
