"""Finalize a session when the process is interrupted."""

from __future__ import annotations

import logging
import signal
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

import typer

from .csvlog import append_entry, ensure_header
from .models import LogEntry, Session, split_minutes
from .paths import LOG_FILENAME, get_log_path

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS = ("SIGINT", "SIGTERM")


class SessionFinalizer:
    """Writes the session's log row and exits, at most once per process."""

    def __init__(
        self,
        session: Session,
        *,
        log_path: Optional[Path] = None,
        log_filename: str = LOG_FILENAME,
        clock: Optional[Callable[[], float]] = None,
        wall_clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.session = session
        self._log_path = log_path
        self._log_filename = log_filename
        self._clock = clock
        self._wall_clock = wall_clock
        self._once = threading.Lock()
        self.signals: tuple[int, ...] = ()

    @property
    def fired(self) -> bool:
        return self._once.locked()

    def __call__(self, signum: int, frame: Any) -> None:
        if not self._claim():
            logger.debug("Signal %s ignored; session already finalized.", signum)
            return
        for sig in self.signals:
            signal.signal(sig, signal.SIG_IGN)
        logger.debug("Signal %s received, finalizing session.", signum)
        self.finalize()
        raise SystemExit(0)

    def _claim(self) -> bool:
        # Never released; a nested delivery must not block on it.
        return self._once.acquire(blocking=False)

    def finalize(self) -> LogEntry:
        """Print the summary line and append the session's row to the log."""
        now = self._clock() if self._clock is not None else None
        elapsed = self.session.elapsed_seconds(now)
        hours, minutes = split_minutes(elapsed)
        typer.echo(
            f"\nStopped. Time spent on task '{self.session.task_name}' "
            f"(Code: {self.session.code}): {hours}h {minutes}m {elapsed % 60}s"
        )

        log_path = self._log_path or get_log_path(self._log_filename)
        ensure_header(log_path)
        entry = LogEntry.from_session(self.session, elapsed, self._wall_clock())
        append_entry(log_path, entry)
        return entry


def install_signal_handlers(
    finalizer: SessionFinalizer, names: Iterable[str] = DEFAULT_SIGNALS
) -> dict[int, Any]:
    """Route termination signals to ``finalizer``; returns the previous handlers."""
    previous: dict[int, Any] = {}
    for name in names:
        sig = getattr(signal, name, None)
        if sig is None:
            continue
        try:
            previous[sig] = signal.signal(sig, finalizer)
        except (OSError, ValueError):
            logger.debug("Cannot install handler for %s on this platform.", name)
    finalizer.signals = tuple(previous)
    return previous


def restore_signal_handlers(previous: dict[int, Any]) -> None:
    for sig, handler in previous.items():
        signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
