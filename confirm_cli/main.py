"""confirm CLI entry point."""

from __future__ import annotations

from importlib.metadata import version
from typing import Optional

import typer

from confirm_cli.config import load_config
from confirm_cli.engine import ConfirmSession
from confirm_cli.errors import TerminalIOError
from confirm_cli.exit_codes import ExitCode, exit_code_for
from confirm_cli.logging import get_logger, setup_logging
from confirm_cli.output import print_error, print_notice
from confirm_cli.schemas import Answer, ConfirmOptions, ShortCircuit
from confirm_cli.terminal import raw_mode_available, stdin_is_tty

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"confirm-cli {version('confirm-cli')}")
        raise typer.Exit()


app = typer.Typer(
    name="confirm",
    help="[bold]confirm[/bold] — ask a yes/no question and exit 0 for yes, 1 for no.",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.command()
def main(
    prompt: str = typer.Argument(
        "Continue?",
        metavar="PROMPT",
        help='Question to display. "Continue?" is shown as "Continue? \\[y/n]: "; the text itself is never modified.',
    ),
    full_words: bool = typer.Option(
        False,
        "--full-words",
        "-f",
        help='Require explicit "yes" or "no", not single letters. Cannot be used with --no-enter.',
    ),
    default: Optional[Answer] = typer.Option(
        None,
        "--default",
        "-d",
        envvar="CONFIRM_DEFAULT",
        show_envvar=True,
        case_sensitive=False,
        help="Answer used on empty input. With retry (the default) an empty answer asks again.",
    ),
    no_enter: bool = typer.Option(
        False,
        "--no-enter",
        help="Read a single keystroke without waiting for enter/return.",
    ),
    ask_count: Optional[int] = typer.Option(
        None,
        "--ask-count",
        "-a",
        envvar="CONFIRM_ASK_COUNT",
        show_envvar=True,
        min=0,
        max=255,
        help="Total number of times to ask (default 3). Use 0 to ask until answered.",
    ),
    always_yes: bool = typer.Option(False, "--yes", help="Don't ask anything, succeed immediately."),
    always_no: bool = typer.Option(False, "--no", help="Don't ask anything, fail immediately."),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        envvar="CONFIRM_LOG_LEVEL",
        show_envvar=True,
        help="Diagnostic log level on stderr (DEBUG, INFO, WARNING, ...).",
    ),
    _version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Get user confirmation from the terminal."""
    short_circuit = ShortCircuit.NONE
    if always_yes:
        short_circuit = ShortCircuit.YES
    elif always_no:
        short_circuit = ShortCircuit.NO

    cfg = load_config(
        ask_count_flag=ask_count,
        default_flag=default,
        full_words_flag=full_words,
        no_enter_flag=no_enter,
        log_level_flag=log_level,
    )
    setup_logging(cfg.log_level)

    if cfg.full_words and cfg.no_enter:
        print_error("validation_error", "--full-words cannot be used with --no-enter.")
        raise typer.Exit(ExitCode.TERMINAL_ERROR)

    try:
        options = ConfirmOptions.model_validate(
            {
                "prompt_text": prompt,
                "ask_count": cfg.ask_count,
                "default_answer": cfg.default,
                "full_words": cfg.full_words,
                "raw_mode": cfg.no_enter,
                "short_circuit": short_circuit,
            }
        )
    except ValueError as exc:
        print_error("validation_error", str(exc))
        raise typer.Exit(ExitCode.TERMINAL_ERROR)

    interactive = options.short_circuit is ShortCircuit.NONE
    if interactive and not stdin_is_tty():
        print_error("terminal_error", "confirm needs an interactive terminal on stdin.")
        raise typer.Exit(ExitCode.TERMINAL_ERROR)
    if interactive and options.raw_mode and not raw_mode_available():
        print_error("terminal_error", "--no-enter is not supported by this terminal.")
        raise typer.Exit(ExitCode.TERMINAL_ERROR)

    session = ConfirmSession(options)
    try:
        decision = session.run()
    except TerminalIOError as exc:
        print_error("terminal_error", str(exc))
        raise typer.Exit(ExitCode.TERMINAL_ERROR)
    except KeyboardInterrupt:
        logger.debug("interrupted", attempts=len(session.attempts))
        raise typer.Exit(ExitCode.INTERRUPTED)

    if session.exhausted:
        print_notice("Retry count exceeded.  Aborting...")
    raise typer.Exit(exit_code_for(decision))


def run() -> None:
    app()
