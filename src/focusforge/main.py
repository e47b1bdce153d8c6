"""Main entry point for the FocusForge CLI."""

import typer

from focusforge import __version__
from focusforge.commands import config, stats, tasks, timer
from focusforge.utils.typer_helpers import SuggestingGroup
from focusforge.utils.ui.console import get_console

app = typer.Typer(
    name="focusforge",
    cls=SuggestingGroup,
    help="Focus timer, task board and rewards in your terminal",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(tasks.app, name="tasks", help="Task board commands")
app.add_typer(timer.app, name="timer", help="Pomodoro timer for focus sessions")
app.add_typer(config.app, name="config", help="Configuration management")
app.command("stats")(stats.show_stats)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]FocusForge[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
