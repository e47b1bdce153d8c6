"""FocusForge domain models.

Pydantic models for the entities stored in the hosted database and for the
application configuration.
"""

from .config_models import (
    AppConfig,
    BackendConfig,
    Credentials,
    QuotesConfig,
)
from .core import (
    FocusSession,
    FocusSessionCreate,
    Priority,
    Quote,
    Task,
    TaskCreate,
    TaskUpdate,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "Priority",
    # Focus session models
    "FocusSession",
    "FocusSessionCreate",
    # Rewards
    "Quote",
    # Config models
    "AppConfig",
    "BackendConfig",
    "QuotesConfig",
    "Credentials",
]
