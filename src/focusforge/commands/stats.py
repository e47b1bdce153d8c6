"""Points and rewards command."""

from rich.panel import Panel

from focusforge.services.dashboard import open_dashboard
from focusforge.services.stats_service import StatsPanel
from focusforge.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


def render_stats(stats: StatsPanel) -> None:
    """Print the points card and, once unlocked, the reward quote."""
    lines = [
        f"🏆 Total Points: [points]{stats.points}[/points]",
        f"⚡ {stats.session_count} focus sessions completed",
        f"🎯 Next reward at {stats.next_reward} points",
    ]
    console.print(Panel("\n".join(lines), title="Stats", expand=False))

    if stats.reward_unlocked:
        console.print(
            Panel(
                f'[italic]"{stats.quote}"[/italic]',
                title="🎉 Reward Unlocked!",
                expand=False,
            )
        )


@command_wrapper
async def show_stats() -> None:
    """Show points, completed sessions and rewards."""
    async with open_dashboard() as dashboard:
        await dashboard.load()
        render_stats(dashboard.stats)
