"""Repository implementations (adapters)."""

from .rest_api import (
    RestApiFocusSessionRepository,
    RestApiPointsRepository,
    RestApiTaskRepository,
)

__all__ = [
    "RestApiTaskRepository",
    "RestApiFocusSessionRepository",
    "RestApiPointsRepository",
]
