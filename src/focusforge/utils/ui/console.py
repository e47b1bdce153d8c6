"""Shared rich console with the FocusForge colour theme."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

FOCUS_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold blue",
        "timer": "bold cyan",
        "points": "bold magenta",
    }
)


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get the themed console; styles above are usable as markup tags."""
    return Console(highlight=highlight, theme=FOCUS_THEME)
