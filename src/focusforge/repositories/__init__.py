"""Repository interfaces for FocusForge.

Abstract base classes that define the contracts for data persistence. These
are the "Ports"; the REST implementations live in
``focusforge.adapters.rest_api``.
"""

from .repository import (
    FocusSessionRepository,
    PointsRepository,
    TaskRepository,
)

__all__ = [
    "TaskRepository",
    "FocusSessionRepository",
    "PointsRepository",
]
