"""Single-line elapsed time display."""

from __future__ import annotations

import logging
import threading
from typing import Optional

import typer

from .config import TimerSettings
from .models import Session

logger = logging.getLogger(__name__)


def format_elapsed(seconds: int) -> str:
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def tracking_message(session: Session) -> str:
    return f"Tracking task '{session.task_name}' with code '{session.code}'."


def render_status_line(session: Session, elapsed_seconds: int) -> str:
    return f"\r{tracking_message(session)} Elapsed: {format_elapsed(elapsed_seconds)}"


def run_display_loop(
    session: Session,
    settings: TimerSettings,
    stop_event: Optional[threading.Event] = None,
) -> None:
    """Redraw the elapsed time every tick until ``stop_event`` is set.

    Without a stop event the loop only ends when the process is interrupted.
    """
    stop_event = stop_event or threading.Event()
    interval = settings.tick_interval.total_seconds()
    logger.debug("Display loop started; tick=%.1fs", interval)
    while not stop_event.is_set():
        typer.echo(render_status_line(session, session.elapsed_seconds()), nl=False)
        stop_event.wait(interval)
