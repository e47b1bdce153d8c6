"""Task board commands."""

import typer

from focusforge.models import Priority
from focusforge.services.dashboard import open_dashboard
from focusforge.utils.exit_codes import (
    ERROR_INVALID_ARGS,
    ERROR_NETWORK,
    ERROR_NOT_FOUND,
)
from focusforge.utils.task_helpers import resolve_task_ref
from focusforge.utils.typer_helpers import SuggestingGroup
from focusforge.utils.ui.console import get_console
from focusforge.utils.ui.formatters import format_info, format_tasks

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task board commands")
console = get_console()


def _resolve(tasks, ref: str):
    try:
        return resolve_task_ref(tasks, ref)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_NOT_FOUND) from e


@app.command("list")
@command_wrapper
async def list_tasks(
    output: str = typer.Option(
        "pretty", "--output", "-o", help="Output format (pretty/table/json/yaml)"
    ),
) -> None:
    """List tasks in board order."""
    async with open_dashboard() as dashboard:
        tasks = await dashboard.board.refresh()
        format_tasks(tasks, output)


@app.command("add")
@command_wrapper
async def add_task(
    title: str = typer.Argument(..., help="Task title"),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", help="Task priority"
    ),
) -> None:
    """Add a task to the end of the board."""
    if not title.strip():
        raise AppError("Task title cannot be empty", exit_code=ERROR_INVALID_ARGS)

    async with open_dashboard() as dashboard:
        board = dashboard.board
        await board.refresh()
        created = await board.add(title, priority)
        if created is None:
            raise typer.Exit(ERROR_NETWORK)
        console.print(f"[dim]Position {created.position}, id {created.id}[/dim]")


@app.command("done")
@command_wrapper
async def toggle_task(
    ref: str = typer.Argument(..., help="Task number, ID or ID suffix"),
) -> None:
    """Mark a task done, or open again if it is already done."""
    async with open_dashboard() as dashboard:
        board = dashboard.board
        task = _resolve(await board.refresh(), ref)
        if not await board.toggle(task):
            raise typer.Exit(ERROR_NETWORK)
        state = "reopened" if task.completed else "completed"
        format_info(f"'{task.title}' {state}")


@app.command("delete")
@command_wrapper
async def delete_task(
    ref: str = typer.Argument(..., help="Task number, ID or ID suffix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    async with open_dashboard() as dashboard:
        board = dashboard.board
        task = _resolve(await board.refresh(), ref)
        if not yes and not typer.confirm(f"Delete '{task.title}'?"):
            format_info("Cancelled")
            return
        if not await board.delete(task.id):
            raise typer.Exit(ERROR_NETWORK)


@app.command("move")
@command_wrapper
async def move_task(
    ref: str = typer.Argument(..., help="Task to move"),
    target: str = typer.Argument(..., help="Task whose slot it takes"),
) -> None:
    """Move a task into another task's slot, shifting the ones in between."""
    async with open_dashboard() as dashboard:
        board = dashboard.board
        tasks = await board.refresh()
        moved = _resolve(tasks, ref)
        onto = _resolve(tasks, target)
        if moved.id == onto.id:
            format_info("Nothing to move")
            return
        if not await board.reorder(moved.id, onto.id):
            raise typer.Exit(ERROR_NETWORK)
        format_tasks(board.tasks)
