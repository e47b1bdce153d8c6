"""Pomodoro timer commands."""

import asyncio

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn

from focusforge.models.focus.state import (
    POINTS_PER_SESSION,
    SESSION_MINUTES,
    TOTAL_SECONDS,
    TimerStatus,
)
from focusforge.services.dashboard import open_dashboard
from focusforge.services.timer_service import PomodoroTimer
from focusforge.utils.exit_codes import ERROR_INTERRUPTED, ERROR_NETWORK
from focusforge.utils.typer_helpers import SuggestingGroup
from focusforge.utils.ui.console import get_console
from focusforge.utils.ui.formatters import format_timer, format_warning

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Pomodoro timer for focus sessions")
console = get_console()

REFRESH_SECONDS = 0.2


async def run_session(timer: PomodoroTimer) -> bool:
    """Start *timer* and show a live countdown until the session completes.

    Returns:
        True if the completed session was saved
    """
    timer.start()
    waiter = asyncio.ensure_future(timer.wait_finished())
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            bar = progress.add_task(timer.state.label, total=TOTAL_SECONDS)
            while not waiter.done():
                state = timer.state
                progress.update(
                    bar,
                    completed=state.elapsed_seconds,
                    description=f"⏱️  [timer]{format_timer(state)}[/timer] {state.label}",
                )
                await asyncio.wait({waiter}, timeout=REFRESH_SECONDS)
    finally:
        waiter.cancel()

    return timer.status == TimerStatus.IDLE


@app.command("start")
@command_wrapper
def start_timer() -> None:
    """Run one 25-minute focus session and record it."""

    async def _start() -> bool:
        async with open_dashboard() as dashboard:
            await dashboard.points.refresh()
            console.print(
                f"\n[bold green]Starting focus session[/bold green] "
                f"({SESSION_MINUTES} minutes, +{POINTS_PER_SESSION} points)\n"
            )
            saved = await run_session(dashboard.timer)
            if saved:
                console.print(f"Total points: [points]{dashboard.points.value}[/points]")
            return saved

    try:
        saved = asyncio.run(_start())
    except KeyboardInterrupt:
        console.print()
        format_warning("Session interrupted, nothing was saved")
        raise typer.Exit(ERROR_INTERRUPTED) from None

    if not saved:
        raise typer.Exit(ERROR_NETWORK)
