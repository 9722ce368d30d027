"""Output helpers: error reporting on stderr."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, highlight=False)


def print_error(error_type: str, message: str) -> None:
    err_console.print(f"[bold red]error[/bold red] [dim]({error_type})[/dim] {escape(message)}")


def print_notice(message: str) -> None:
    err_console.print(escape(message))
