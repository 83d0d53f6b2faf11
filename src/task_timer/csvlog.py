"""CSV log file layer for finished sessions."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import LogFileCreateError, LogWriteError
from .models import LogEntry

logger = logging.getLogger(__name__)

HEADER = "Date,Time,Code,Task,Hours,Minutes"


def needs_header(path: Path) -> bool:
    """True when the file is missing, empty, or cannot be read."""
    if not path.exists():
        return True
    try:
        with path.open("r", encoding="utf-8") as fh:
            return fh.read(1) == ""
    except (OSError, UnicodeDecodeError):
        logger.debug("Could not read %s; treating it as empty.", path, exc_info=True)
        return True


def ensure_header(path: Path) -> None:
    """Create or truncate the log file with the header line if it needs one."""
    path = Path(path)
    if not needs_header(path):
        return
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(HEADER + "\n")
    except OSError as exc:
        logger.error("Failed to create CSV file %s", path)
        raise LogFileCreateError(path, exc) from exc
    logger.debug("Initialized %s with header.", path)


def escape_field(value: str) -> str:
    """Double embedded quotes so the value can sit inside a quoted CSV field."""
    return value.replace('"', '""')


def format_entry(entry: LogEntry) -> str:
    return (
        f'{entry.date},{entry.time},"{escape_field(entry.code)}",'
        f'"{escape_field(entry.task)}",{entry.hours},{entry.minutes}\n'
    )


def append_entry(path: Path, entry: LogEntry) -> None:
    path = Path(path)
    line = format_entry(entry)
    try:
        with path.open("a", encoding="utf-8", newline="") as fh:
            fh.write(line)
    except OSError as exc:
        logger.error("Failed to write to log file %s", path)
        raise LogWriteError(f"Failed to write to log file '{path}': {exc}") from exc
    logger.debug("Appended row to %s: %s", path, line.rstrip("\n"))
