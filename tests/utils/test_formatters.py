"""Tests for output formatters."""

import json

from focusforge.models import Priority, Task
from focusforge.models.focus import TimerState
from focusforge.utils.ui import formatters
from focusforge.utils.ui.formatters import (
    calculate_unique_suffixes,
    format_timer,
    get_progress_bar,
)


def test_unique_suffixes():
    result = calculate_unique_suffixes(["abc1", "xyz2", "abd1"])
    assert result == {"abc1": 2, "xyz2": 1, "abd1": 2}


def test_progress_bar():
    assert get_progress_bar(0) == "░" * 10
    assert get_progress_bar(55) == "▓" * 5 + "░" * 5
    assert get_progress_bar(100) == "▓" * 10


def test_format_timer():
    assert format_timer(TimerState()) == "25:00 " + "░" * 10 + " 0%"
    assert format_timer(TimerState(minutes=12, seconds=30)).startswith("12:30 ▓▓▓▓▓")


def test_format_tasks_json(capsys, monkeypatch):
    from rich.console import Console

    monkeypatch.setattr(formatters, "console", Console(force_terminal=False, width=200))
    tasks = [Task(id="t1", user_id="u1", title="Read", priority=Priority.HIGH)]

    formatters.format_tasks(tasks, "json")

    data = json.loads(capsys.readouterr().out)
    assert data[0]["title"] == "Read"
    assert data[0]["priority"] == "high"


def test_format_tasks_pretty_empty(capsys, monkeypatch):
    from rich.console import Console

    monkeypatch.setattr(formatters, "console", Console(force_terminal=False, width=200))
    formatters.format_tasks([], "pretty")
    assert "No tasks" in capsys.readouterr().out
