"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from focusforge.models.core import Priority, Task
from focusforge.models.focus.state import TimerState
from focusforge.utils.ui.console import get_console

console = get_console()

# Priority Icons & Colors
PRIORITY_ICONS = {
    Priority.HIGH: "🔴",
    Priority.MEDIUM: "🟡",
    Priority.LOW: "🔵",
}

PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "blue",
}


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data (dicts/lists) based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Format a (possibly nested) dict as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    def _rows(node: dict, path: str) -> None:
        for key, value in node.items():
            full_key = f"{path}{key}"
            if isinstance(value, dict):
                _rows(value, f"{full_key}.")
                continue
            if isinstance(value, bool):
                formatted_value = "✓" if value else "✗"
            elif value is None or value == "":
                formatted_value = "-"
            else:
                formatted_value = str(value)
            table.add_row(full_key, formatted_value)

    _rows(item, prefix)
    console.print(table)


def format_tasks(tasks: list[Task], output_format: str = "pretty") -> None:
    """Display a task list in the requested format."""
    if output_format in ("json", "yaml"):
        format_output([t.model_dump(mode="json") for t in tasks], output_format)
    elif output_format == "table":
        format_tasks_table(tasks)
    else:
        format_tasks_pretty(tasks)


def format_tasks_table(tasks: list[Task]) -> None:
    """Format tasks as a table in display order."""
    if not tasks:
        console.print("[yellow]No tasks yet. Add one to get started![/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Priority")
    table.add_column("Done", justify="center")

    for index, task in enumerate(tasks, start=1):
        table.add_row(
            str(index),
            task.id,
            task.title,
            task.priority.value,
            "✓" if task.completed else "✗",
        )

    console.print(table)


def format_tasks_pretty(tasks: list[Task]) -> None:
    """Format tasks in pretty format, one line per task in display order."""
    if not tasks:
        console.print("[yellow]No tasks yet. Add one to get started![/yellow]")
        return

    open_tasks = [t for t in tasks if not t.completed]

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(open_tasks)} open, {len(tasks) - len(open_tasks)} done)", style="dim")
    console.print(header)
    console.print()

    suffix_map = calculate_unique_suffixes([t.id for t in tasks])

    for index, task in enumerate(tasks, start=1):
        format_task_item(task, index, suffix_map.get(task.id, len(task.id)))
    console.print()


def format_task_item(task: Task, index: int, suffix_length: int) -> None:
    """Format a single task line."""
    line = Text()
    line.append(f"{index:>3}. ", style="dim")
    line.append("✓ " if task.completed else "○ ", style="green" if task.completed else "white")
    line.append(
        task.title,
        style="strike dim" if task.completed else PRIORITY_COLORS[task.priority],
    )
    line.append(f"  {PRIORITY_ICONS[task.priority]} {task.priority.value}", style="dim")
    line.append(f"  [{task.id[-suffix_length:]}]", style="dim cyan")
    console.print(line)


def format_timer(state: TimerState) -> str:
    """One-line timer face with progress bar, e.g. ``24:59 ▓░░░░░░░░░ 0%``."""
    percentage = state.progress * 100
    return f"{state.display} {get_progress_bar(percentage)} {percentage:.0f}%"


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[error]Error:[/error] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[success]Success:[/success] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[warning]Warning:[/warning] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[info]Info:[/info] {message}")
