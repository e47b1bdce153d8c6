"""Configuration service for managing FocusForge configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dotted-key access (``backend.url``) used by the ``config`` commands
- Credential management (user id and access token from an external sign-in)
"""

from __future__ import annotations

import json
from functools import lru_cache
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from focusforge.exceptions import ConfigError
from focusforge.models.config_models import AppConfig, Credentials


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("focusforge"))
        self.config_path = self.config_dir / "config.json"
        self.credentials_path = self.config_dir / "credentials.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self):
        """Reset configuration to defaults. Credentials are kept."""
        self._config = AppConfig()
        self.save_config()

    def get(self, key: str) -> Any:
        """Get a value by dotted key, e.g. ``backend.timeout``.

        Returns None when the key does not exist.
        """
        node: Any = self.config
        for part in key.split("."):
            if isinstance(node, BaseModel) and part in type(node).model_fields:
                node = getattr(node, part)
            else:
                return None
        return node

    def set(self, key: str, value: Any) -> None:
        """Set a value by dotted key and persist the configuration.

        Raises:
            KeyError: If the key does not name a configuration field
            ValueError: If the value does not validate for that field
        """
        *parents, leaf = key.split(".")
        data = self.config.model_dump()
        node = data
        for part in parents:
            if not isinstance(node.get(part), dict):
                raise KeyError(f"Configuration key '{key}' not found")
            node = node[part]
        if leaf not in node or isinstance(node[leaf], dict):
            raise KeyError(f"Configuration key '{key}' not found")
        node[leaf] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {e}") from e
        self.save_config()

    def load_credentials(self) -> Credentials | None:
        """Load stored credentials, or None if not signed in."""
        if not self.credentials_path.exists():
            return None

        try:
            with open(self.credentials_path, encoding="utf-8") as f:
                return Credentials.model_validate(json.load(f))
        except (JSONDecodeError, ValidationError):
            return None

    def save_credentials(self, user_id: str, access_token: str | None = None):
        """Save credentials handed over by the external sign-in flow."""
        creds = Credentials(user_id=user_id, access_token=access_token)
        self.credentials_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.credentials_path, "w", encoding="utf-8") as f:
            f.write(creds.model_dump_json(indent=2))

        self.credentials_path.chmod(0o600)

    def clear_credentials(self) -> None:
        """Forget stored credentials."""
        if self.credentials_path.exists():
            self.credentials_path.unlink()

    def require_user_id(self) -> str:
        """Return the signed-in user id.

        Raises:
            ConfigError: If no credentials are stored
        """
        creds = self.load_credentials()
        if creds is None:
            raise ConfigError(
                "Not signed in. Use 'focusforge config login USER_ID' first."
            )
        return creds.user_id

    def require_backend(self) -> None:
        """Ensure the backend URL and API key are configured.

        Raises:
            ConfigError: If either is missing
        """
        backend = self.config.backend
        if not backend.url or not backend.api_key:
            raise ConfigError(
                "Backend not configured. Set backend.url and backend.api_key "
                "with 'focusforge config set'."
            )


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
