"""Configuration models.

The configuration is persisted as JSON by
:class:`focusforge.services.config_service.ConfigService`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class BackendConfig(BaseModel):
    """Hosted database (PostgREST) configuration."""

    url: str = Field(default="", description="Project URL, e.g. https://xyz.supabase.co")
    api_key: str = Field(default="", description="Public (anon) API key")
    timeout: int = Field(default=30)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @property
    def rest_url(self) -> str:
        """Base URL of the REST interface."""
        return f"{self.url}/rest/v1"


class QuotesConfig(BaseModel):
    """Public quote service configuration."""

    endpoint: str = Field(default="https://api.quotable.io/random")
    tags: str = Field(default="motivational")
    timeout: int = Field(default=10)


class Credentials(BaseModel):
    """Identity supplied by an external sign-in flow."""

    user_id: str
    access_token: str | None = None


class AppConfig(BaseModel):
    """Main FocusForge configuration."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    quotes: QuotesConfig = Field(default_factory=QuotesConfig)
