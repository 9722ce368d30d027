"""Input strategies: line-buffered and single keystroke.

Both write the rendered prompt to the terminal console and return the raw
response text. Neither interprets the response; that is the classifier's job.
"""

from __future__ import annotations

import sys
from typing import IO, Callable, Optional, Protocol

from rich.console import Console

from confirm_cli.errors import TerminalIOError
from confirm_cli.schemas import ConfirmOptions
from confirm_cli.terminal import read_keystroke

Getch = Callable[[], str]


def terminal_console(file: IO[str] | None = None) -> Console:
    return Console(file=file, highlight=False)


class InputReader(Protocol):
    def read(self, prompt: str) -> str: ...


class LineReader:
    """Wait for a full line; the terminal handles editing and echo."""

    def __init__(self, console: Optional[Console] = None, stream: IO[str] | None = None):
        self.console = console or terminal_console()
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdin

    def read(self, prompt: str) -> str:
        _write(self.console, prompt)
        try:
            line = self.stream.readline()
        except (OSError, ValueError) as exc:
            raise TerminalIOError(f"Error while reading user input: {exc}") from exc
        if not line:
            raise TerminalIOError("Terminal closed while waiting for input")
        return line.rstrip("\r\n")


class RawReader:
    """Take a single keystroke without echo and without waiting for enter."""

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: IO[str] | None = None,
        getch: Optional[Getch] = None,
    ):
        self.console = console or terminal_console()
        self._stream = stream
        self._getch = getch

    def read(self, prompt: str) -> str:
        _write(self.console, prompt)
        if self._getch is not None:
            ch = self._getch()
        else:
            ch = read_keystroke(self._stream)
        # The keystroke was never echoed, so end the prompt line ourselves.
        _write(self.console, "\n")
        return ch


def make_reader(options: ConfirmOptions, console: Optional[Console] = None) -> InputReader:
    if options.raw_mode:
        return RawReader(console)
    return LineReader(console)


def _write(console: Console, prompt: str) -> None:
    # Written straight to the console file: rich rendering would expand tabs
    # and drop control characters from the prompt text.
    try:
        console.file.write(prompt)
        console.file.flush()
    except (OSError, ValueError) as exc:
        raise TerminalIOError(f"Cannot write prompt: {exc}") from exc
