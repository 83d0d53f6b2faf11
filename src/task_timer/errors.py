"""Exceptions raised by the task timer."""

from __future__ import annotations

from pathlib import Path


class TimerError(RuntimeError):
    """Fatal error that ends the program with a diagnostic."""

    exit_code = 2


class InputReadError(TimerError):
    """Reading the task name or code from standard input failed."""


class HomeDirectoryError(TimerError):
    """The user's home directory could not be determined."""


class LogFileCreateError(TimerError):
    """The CSV log file could not be created while writing its header."""

    exit_code = 1

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Failed to create CSV file '{path}': {reason}")
        self.path = path
        self.reason = reason


class LogWriteError(TimerError):
    """Appending a row to the CSV log file failed."""
