# tests/test_display.py

from __future__ import annotations

import time

import pytest

from task_timer.config import TimerSettings
from task_timer.display import format_elapsed, render_status_line, run_display_loop
from task_timer.models import Session

from .fakes import CountingStopEvent


def test_format_elapsed_zero_pads() -> None:
    assert format_elapsed(0) == "00:00:00"
    assert format_elapsed(3725) == "01:02:05"


def test_format_elapsed_does_not_clamp_hours() -> None:
    assert format_elapsed(100 * 3600 + 1) == "100:00:01"


def test_status_line_overwrites_current_line() -> None:
    session = Session(task_name="Writing", code="W1", start_time=0.0)
    line = render_status_line(session, 65)
    assert line == "\rTracking task 'Writing' with code 'W1'. Elapsed: 00:01:05"
    assert "\n" not in line


def test_display_loop_redraws_every_tick(
    settings: TimerSettings, capsys: pytest.CaptureFixture[str]
) -> None:
    session = Session(task_name="Writing", code="W1", start_time=time.monotonic() - 3725)
    stop = CountingStopEvent(ticks=3)

    run_display_loop(session, settings, stop_event=stop)

    out = capsys.readouterr().out
    assert out.count("\rTracking task 'Writing' with code 'W1'. Elapsed: 01:02:0") == 3
    assert "\n" not in out
    assert stop.waits == [settings.tick_interval.total_seconds()] * 3
