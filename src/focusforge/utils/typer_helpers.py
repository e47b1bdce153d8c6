"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from focusforge.utils.exit_codes import ERROR_GENERAL
from focusforge.utils.ui.console import get_console


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Up to three command names close to *attempted*, best match first."""
    return get_close_matches(attempted, available, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that suggests the closest command on a typo.

    Used by the root app and every sub-app, so ``focusforge taks`` and
    ``focusforge tasks lsit`` both get a hint.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            # Only usage errors (unknown command) carry exit code 2
            if not args or getattr(e, "exit_code", None) != 2:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, list(self.commands))
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[error]Error:[/error] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[warning]Did you mean this?[/warning]")
            else:
                console.print("[warning]Did you mean one of these?[/warning]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print(f"\nRun '{ctx.command_path} --help' for usage.")
            raise typer.Exit(ERROR_GENERAL) from e
