"""Helpers for locating the time log and application directories."""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import PlatformDirs

from .errors import HomeDirectoryError


APP_NAME = "TaskTimer"
APP_AUTHOR = "TaskTimer"
LOG_FILENAME = "time_log.csv"

logger = logging.getLogger(__name__)


def get_home_dir() -> Path:
    """Return the current user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        logger.error("Could not resolve home directory: %s", exc)
        raise HomeDirectoryError("Could not find home directory") from exc


def get_log_path(filename: str = LOG_FILENAME) -> Path:
    return get_home_dir() / filename


def get_diagnostics_path() -> Path:
    """Return the file used for verbose diagnostic logs."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR)
    path = Path(dirs.user_log_path)
    path.mkdir(parents=True, exist_ok=True)
    return path / "timer.log"
