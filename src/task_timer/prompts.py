"""Resolve the task name and code from flags or interactive prompts."""

from __future__ import annotations

import sys
from typing import Callable, Optional

import typer

from .errors import InputReadError

LineReader = Callable[[], str]


def read_stdin_line() -> str:
    return sys.stdin.readline()


def resolve_value(
    value: Optional[str],
    *,
    prompt: str,
    default: str,
    label: str,
    read_line: Optional[LineReader] = None,
) -> str:
    """Return ``value`` or a prompted answer, falling back to ``default`` when empty.

    Flag values are kept as given. Prompted answers are stripped, and an
    end-of-file read counts as an empty answer.
    """
    if value is None:
        typer.echo(prompt, nl=False)
        reader = read_line or read_stdin_line
        try:
            value = reader().strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Failed to read {label.lower()} from stdin: {exc}") from exc

    if not value:
        typer.echo(f"{label} cannot be empty, using '{default}'.")
        return default
    return value


def resolve_task_name(
    value: Optional[str], default: str, read_line: Optional[LineReader] = None
) -> str:
    return resolve_value(
        value,
        prompt="Enter task name: ",
        default=default,
        label="Task name",
        read_line=read_line,
    )


def resolve_code(
    value: Optional[str], default: str, read_line: Optional[LineReader] = None
) -> str:
    return resolve_value(
        value,
        prompt="Enter code for this task: ",
        default=default,
        label="Code",
        read_line=read_line,
    )
