"""Configuration management commands."""

import typer

from focusforge.services.config_service import get_config_service
from focusforge.utils.exit_codes import ERROR_INVALID_ARGS
from focusforge.utils.typer_helpers import SuggestingGroup
from focusforge.utils.ui.console import get_console
from focusforge.utils.ui.formatters import (
    format_info,
    format_output,
    format_success,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    return value


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    data = config_service.config.model_dump()
    if data["backend"]["api_key"]:
        data["backend"]["api_key"] = "********"
    format_output(data, output)

    credentials = config_service.load_credentials()
    if output not in ("json", "yaml"):
        if credentials:
            format_info(f"Signed in as {credentials.user_id}")
        else:
            format_info("Not signed in")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., backend.url)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", ERROR_INVALID_ARGS)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., backend.url)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except (KeyError, ValueError) as e:
        raise AppError(str(e).strip("'\""), ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all configuration to defaults?"):
        format_info("Cancelled")
        return
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")


@app.command("login")
@command_wrapper
def login(
    user_id: str = typer.Argument(..., help="User ID issued by the sign-in provider"),
    token: str | None = typer.Option(
        None, "--token", help="Access token (JWT) for the backend"
    ),
) -> None:
    """Store the identity of a user signed in elsewhere."""
    if not user_id.strip():
        raise AppError("User ID cannot be empty", ERROR_INVALID_ARGS)
    get_config_service().save_credentials(user_id.strip(), token)
    format_success(f"Signed in as {user_id.strip()}")


@app.command("logout")
@command_wrapper
def logout() -> None:
    """Forget the stored identity."""
    get_config_service().clear_credentials()
    format_success("Signed out")
