# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_timer.config import TimerSettings


@pytest.fixture()
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user's home directory at a per-test temp dir."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.fixture()
def settings() -> TimerSettings:
    return TimerSettings.from_intervals(tick_seconds=0.01)
