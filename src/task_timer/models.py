"""Domain models for a timing session and its log row."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

DATE_FMT = "%Y-%m-%d"
TIME_FMT = "%H:%M:%S"


@dataclass(frozen=True, slots=True)
class Session:
    """A single tracked task, started on the monotonic clock."""

    task_name: str
    code: str
    start_time: float

    @classmethod
    def start(
        cls, task_name: str, code: str, clock: Callable[[], float] = time.monotonic
    ) -> "Session":
        return cls(task_name=task_name, code=code, start_time=clock())

    def elapsed_seconds(self, now: Optional[float] = None) -> int:
        current = time.monotonic() if now is None else now
        return max(int(current - self.start_time), 0)


def split_minutes(elapsed_seconds: int) -> tuple[int, int]:
    """Return whole (hours, minutes) for a duration, dropping leftover seconds."""
    total_minutes = elapsed_seconds // 60
    return total_minutes // 60, total_minutes % 60


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One CSV row describing a finished session."""

    date: str
    time: str
    code: str
    task: str
    hours: int
    minutes: int

    @classmethod
    def from_session(
        cls, session: Session, elapsed_seconds: int, logged_at: datetime
    ) -> "LogEntry":
        hours, minutes = split_minutes(elapsed_seconds)
        return cls(
            date=logged_at.strftime(DATE_FMT),
            time=logged_at.strftime(TIME_FMT),
            code=session.code,
            task=session.task_name,
            hours=hours,
            minutes=minutes,
        )
