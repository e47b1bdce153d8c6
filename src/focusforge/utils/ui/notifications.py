"""Transient user notifications ("toasts")."""

from __future__ import annotations

from rich.console import Console

from focusforge.utils.ui.console import get_console


class Notifier:
    """Shows short success/error messages to the user.

    The component services only call :meth:`success` and :meth:`error`, so
    any object with those two methods can stand in (tests use a mock).
    """

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()

    def success(self, message: str, description: str | None = None) -> None:
        self.console.print(f"[success]{message}[/success]")
        if description:
            self.console.print(f"[dim]{description}[/dim]")

    def error(self, message: str, description: str | None = None) -> None:
        self.console.print(f"[error]{message}[/error]")
        if description:
            self.console.print(f"[dim]{description}[/dim]")
