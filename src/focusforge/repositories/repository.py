"""Repository abstraction layer for FocusForge.

Abstract base classes (ports) for the three kinds of persisted data. The
component services depend only on these interfaces; the REST adapters in
:mod:`focusforge.adapters.rest_api` implement them against the hosted
database.

All implementations raise :class:`focusforge.exceptions.PersistenceError`
when the backing store cannot complete an operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from focusforge.models import (
    FocusSession,
    FocusSessionCreate,
    Task,
    TaskCreate,
    TaskUpdate,
)


class TaskRepository(ABC):
    """Persistence operations for tasks."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Task]:
        """List a user's tasks ordered by position ascending.

        Args:
            user_id: Owner of the tasks

        Returns:
            Tasks sorted by ``position``
        """
        raise NotImplementedError(
            "TaskRepository.list_for_user() must be implemented by adapter"
        )

    @abstractmethod
    async def add(self, task_data: TaskCreate) -> Task:
        """Create a new task.

        Args:
            task_data: TaskCreate object with the task details

        Returns:
            Created Task with backend-generated id
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    async def update(self, task_id: str, updates: TaskUpdate) -> None:
        """Apply a partial update to one task.

        Args:
            task_id: Unique identifier for the task
            updates: Fields to change
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """Delete a task.

        Args:
            task_id: Unique identifier for the task
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )


class FocusSessionRepository(ABC):
    """Persistence operations for completed focus sessions."""

    @abstractmethod
    async def add(self, session_data: FocusSessionCreate) -> FocusSession:
        """Record a completed session."""
        raise NotImplementedError(
            "FocusSessionRepository.add() must be implemented by adapter"
        )

    @abstractmethod
    async def count_for_user(self, user_id: str) -> int:
        """Count a user's completed sessions without fetching them."""
        raise NotImplementedError(
            "FocusSessionRepository.count_for_user() must be implemented by adapter"
        )


class PointsRepository(ABC):
    """Access to a user's points total."""

    @abstractmethod
    async def get_points(self, user_id: str) -> int:
        """Read the user's current points total (0 when no profile exists)."""
        raise NotImplementedError(
            "PointsRepository.get_points() must be implemented by adapter"
        )

    @abstractmethod
    async def increment_points(self, user_id: str, amount: int) -> None:
        """Atomically add *amount* to the user's points total."""
        raise NotImplementedError(
            "PointsRepository.increment_points() must be implemented by adapter"
        )
