"""REST API adapters - Repository implementations using the hosted database.

These adapters wrap :class:`~focusforge.services.api.tables.TablesAPI` to
implement the repository interfaces, and translate HTTP and decoding failures
into :class:`~focusforge.exceptions.PersistenceError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from focusforge.exceptions import PersistenceError
from focusforge.models import (
    FocusSession,
    FocusSessionCreate,
    Task,
    TaskCreate,
    TaskUpdate,
)
from focusforge.repositories.repository import (
    FocusSessionRepository,
    PointsRepository,
    TaskRepository,
)
from focusforge.services.api.client import APIClient
from focusforge.services.api.tables import TablesAPI, eq

TASKS_TABLE = "tasks"
FOCUS_SESSIONS_TABLE = "focus_sessions"
PROFILES_TABLE = "profiles"
INCREMENT_POINTS_RPC = "increment_user_points"


@contextmanager
def _persistence_errors(action: str) -> Iterator[None]:
    """Re-raise transport, status and decoding failures as PersistenceError."""
    try:
        yield
    except httpx.HTTPStatusError as e:
        raise PersistenceError(
            f"Failed to {action}: HTTP {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        raise PersistenceError(f"Failed to {action}: {e}") from e
    except ValueError as e:
        # JSON decoding and pydantic validation errors
        raise PersistenceError(f"Failed to {action}: invalid response ({e})") from e


class _TablesAdapter:
    """Shared lazy construction of the tables API."""

    def __init__(self, client: APIClient | None = None):
        self._client = client
        self._tables_api: TablesAPI | None = None

    @property
    def tables_api(self) -> TablesAPI:
        """Get or create TablesAPI instance."""
        if self._tables_api is None:
            if self._client is None:
                self._client = APIClient()
            self._tables_api = TablesAPI(self._client)
        return self._tables_api

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()


class RestApiTaskRepository(_TablesAdapter, TaskRepository):
    """Task repository backed by the ``tasks`` table."""

    async def list_for_user(self, user_id: str) -> list[Task]:
        with _persistence_errors("fetch tasks"):
            rows = await self.tables_api.select(
                TASKS_TABLE,
                filters={"user_id": eq(user_id)},
                order="position.asc",
            )
            return [Task.model_validate(row) for row in rows]

    async def add(self, task_data: TaskCreate) -> Task:
        with _persistence_errors("add task"):
            rows = await self.tables_api.insert(
                TASKS_TABLE, task_data.model_dump(mode="json")
            )
            if not rows:
                raise PersistenceError("Failed to add task: backend returned no row")
            return Task.model_validate(rows[0])

    async def update(self, task_id: str, updates: TaskUpdate) -> None:
        payload = updates.to_payload()
        if not payload:
            return
        with _persistence_errors("update task"):
            await self.tables_api.update(
                TASKS_TABLE, payload, filters={"id": eq(task_id)}
            )

    async def delete(self, task_id: str) -> None:
        with _persistence_errors("delete task"):
            await self.tables_api.delete(TASKS_TABLE, filters={"id": eq(task_id)})


class RestApiFocusSessionRepository(_TablesAdapter, FocusSessionRepository):
    """Focus session repository backed by the ``focus_sessions`` table."""

    async def add(self, session_data: FocusSessionCreate) -> FocusSession:
        with _persistence_errors("save focus session"):
            rows = await self.tables_api.insert(
                FOCUS_SESSIONS_TABLE, session_data.model_dump(mode="json")
            )
            if rows:
                return FocusSession.model_validate(rows[0])
            return FocusSession(**session_data.model_dump())

    async def count_for_user(self, user_id: str) -> int:
        with _persistence_errors("count focus sessions"):
            return await self.tables_api.count(
                FOCUS_SESSIONS_TABLE, filters={"user_id": eq(user_id)}
            )


class RestApiPointsRepository(_TablesAdapter, PointsRepository):
    """Points stored on ``profiles.total_points``, changed through an RPC."""

    async def get_points(self, user_id: str) -> int:
        with _persistence_errors("fetch points"):
            rows = await self.tables_api.select(
                PROFILES_TABLE, filters={"id": eq(user_id)}, columns="total_points"
            )
            if not rows:
                return 0
            return int(rows[0].get("total_points") or 0)

    async def increment_points(self, user_id: str, amount: int) -> None:
        with _persistence_errors("increment points"):
            await self.tables_api.rpc(
                INCREMENT_POINTS_RPC, {"user_id": user_id, "points": amount}
            )
