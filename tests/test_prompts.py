# tests/test_prompts.py

from __future__ import annotations

import pytest

from task_timer.errors import InputReadError
from task_timer.prompts import resolve_code, resolve_task_name


def test_prompted_value_is_trimmed(capsys: pytest.CaptureFixture[str]) -> None:
    assert resolve_task_name(None, "Unnamed Task", read_line=lambda: "  Writing docs \n") == "Writing docs"
    assert capsys.readouterr().out == "Enter task name: "


@pytest.mark.parametrize("answer", ["\n", "   \t\n", ""])
def test_blank_answer_uses_default(answer: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert resolve_code(None, "NA", read_line=lambda: answer) == "NA"
    out = capsys.readouterr().out
    assert out.startswith("Enter code for this task: ")
    assert "Code cannot be empty, using 'NA'." in out


def test_flag_value_is_used_without_prompting(capsys: pytest.CaptureFixture[str]) -> None:
    def _unused() -> str:
        raise AssertionError("should not prompt")

    assert resolve_task_name("  Writing ", "Unnamed Task", read_line=_unused) == "  Writing "
    assert capsys.readouterr().out == ""


def test_empty_flag_value_uses_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert resolve_task_name("", "Unnamed Task") == "Unnamed Task"
    assert "Task name cannot be empty, using 'Unnamed Task'." in capsys.readouterr().out


def test_read_failure_is_fatal() -> None:
    def _broken() -> str:
        raise OSError("stdin closed")

    with pytest.raises(InputReadError) as excinfo:
        resolve_task_name(None, "Unnamed Task", read_line=_broken)
    assert excinfo.value.exit_code == 2
