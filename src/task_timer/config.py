"""Configuration for the task timer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .paths import LOG_FILENAME


@dataclass(slots=True)
class TimerSettings:
    """Runtime configuration for a timing session."""

    tick_interval: timedelta = timedelta(seconds=1)
    log_filename: str = LOG_FILENAME
    default_task: str = "Unnamed Task"
    default_code: str = "NA"

    @classmethod
    def from_intervals(cls, tick_seconds: float) -> "TimerSettings":
        return cls(tick_interval=timedelta(seconds=tick_seconds))
