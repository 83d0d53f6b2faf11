"""Command-line interface for the task timer."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from .config import TimerSettings
from .display import run_display_loop, tracking_message
from .errors import TimerError
from .interrupt import SessionFinalizer, install_signal_handlers, restore_signal_handlers
from .models import Session
from .paths import get_diagnostics_path
from .prompts import resolve_code, resolve_task_name

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Time a task and log the session to ~/time_log.csv when interrupted.",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if verbose:
        handlers.append(logging.FileHandler(get_diagnostics_path(), encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=handlers,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"task-timer {__version__}")
        raise typer.Exit()


@app.command()
def main(
    task: Optional[str] = typer.Option(
        None,
        "--task",
        "-t",
        metavar="TASK_NAME",
        help="The name of the task being tracked. If omitted, you will be prompted.",
    ),
    code: Optional[str] = typer.Option(
        None,
        "--code",
        "-c",
        metavar="CODE",
        help="Code to associate with the task entry in the log. If omitted, you will be prompted.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Track time on a task until Ctrl+C, then append it to the CSV log."""
    configure_logging(verbose)
    settings = TimerSettings()
    try:
        run_session(task, code, settings)
    except TimerError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code) from exc


def run_session(task: Optional[str], code: Optional[str], settings: TimerSettings) -> None:
    task_name = resolve_task_name(task, settings.default_task)
    task_code = resolve_code(code, settings.default_code)

    session = Session.start(task_name, task_code)
    typer.echo(f"{tracking_message(session)} Press Ctrl+C to stop.")
    logger.debug("Session started: task=%r code=%r", task_name, task_code)

    finalizer = SessionFinalizer(session, log_filename=settings.log_filename)
    previous = install_signal_handlers(finalizer)
    try:
        run_display_loop(session, settings)
    finally:
        restore_signal_handlers(previous)