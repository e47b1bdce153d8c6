"""Shared test fixtures and configuration.

Provides in-memory repositories and isolates tests from the real
log/config directories.
"""

from __future__ import annotations

import itertools
import logging
import logging.handlers
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from focusforge.exceptions import PersistenceError
from focusforge.models import (
    FocusSession,
    FocusSessionCreate,
    Quote,
    Task,
    TaskCreate,
    TaskUpdate,
)
from focusforge.repositories import (
    FocusSessionRepository,
    PointsRepository,
    TaskRepository,
)
from focusforge.services.api.quotes import QuotesAPI
from focusforge.services.dashboard import Dashboard
from focusforge.services.points_context import PointsContext
from focusforge.services.stats_service import StatsPanel
from focusforge.services.task_service import TaskBoard
from focusforge.services.timer_service import PomodoroTimer
from focusforge.utils.ui.notifications import Notifier

USER_ID = "user-1"


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryTaskRepository(TaskRepository):
    """Task store that can be told to fail specific operations.

    ``fail_on`` holds operation names ("list", "add", "update", "delete").
    ``fail_update_at`` makes only the n-th update call (1-based) fail.
    """

    def __init__(self):
        self.rows: dict[str, Task] = {}
        self.fail_on: set[str] = set()
        self.fail_update_at: int | None = None
        self.update_calls: list[tuple[str, dict]] = []
        self._ids = itertools.count(1)

    def seed(self, *titles: str, user_id: str = USER_ID) -> list[Task]:
        tasks = []
        for position, title in enumerate(titles):
            task = Task(
                id=f"task-{next(self._ids)}",
                user_id=user_id,
                title=title,
                position=position,
            )
            self.rows[task.id] = task
            tasks.append(task)
        return tasks

    def positions(self) -> dict[str, int]:
        return {task.title: task.position for task in self.rows.values()}

    async def list_for_user(self, user_id: str) -> list[Task]:
        if "list" in self.fail_on:
            raise PersistenceError("list failed")
        owned = [t for t in self.rows.values() if t.user_id == user_id]
        return sorted(owned, key=lambda t: t.position)

    async def add(self, task_data: TaskCreate) -> Task:
        if "add" in self.fail_on:
            raise PersistenceError("add failed")
        task = Task(id=f"task-{next(self._ids)}", **task_data.model_dump())
        self.rows[task.id] = task
        return task

    async def update(self, task_id: str, updates: TaskUpdate) -> None:
        payload = updates.model_dump(exclude_unset=True)
        self.update_calls.append((task_id, payload))
        if "update" in self.fail_on or self.fail_update_at == len(self.update_calls):
            raise PersistenceError("update failed")
        self.rows[task_id] = self.rows[task_id].model_copy(update=payload)

    async def delete(self, task_id: str) -> None:
        if "delete" in self.fail_on:
            raise PersistenceError("delete failed")
        self.rows.pop(task_id, None)


class InMemoryFocusSessionRepository(FocusSessionRepository):
    def __init__(self):
        self.sessions: list[FocusSession] = []
        self.fail = False

    async def add(self, session_data: FocusSessionCreate) -> FocusSession:
        if self.fail:
            raise PersistenceError("insert failed")
        session = FocusSession(id=f"s-{len(self.sessions) + 1}", **session_data.model_dump())
        self.sessions.append(session)
        return session

    async def count_for_user(self, user_id: str) -> int:
        if self.fail:
            raise PersistenceError("count failed")
        return sum(1 for s in self.sessions if s.user_id == user_id)


class InMemoryPointsRepository(PointsRepository):
    def __init__(self, points: int = 0):
        self.points = points
        self.fail = False
        self.increments: list[int] = []

    async def get_points(self, user_id: str) -> int:
        if self.fail:
            raise PersistenceError("select failed")
        return self.points

    async def increment_points(self, user_id: str, amount: int) -> None:
        if self.fail:
            raise PersistenceError("rpc failed")
        self.increments.append(amount)
        self.points += amount


@pytest.fixture()
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def session_repo() -> InMemoryFocusSessionRepository:
    return InMemoryFocusSessionRepository()


@pytest.fixture()
def points_repo() -> InMemoryPointsRepository:
    return InMemoryPointsRepository()


@pytest.fixture()
def notifier() -> MagicMock:
    return MagicMock(spec=Notifier)


@pytest.fixture()
def quotes_api() -> MagicMock:
    api = MagicMock(spec=QuotesAPI)
    api.random_quote = AsyncMock(return_value=Quote(content="Keep going.", author="Anon"))
    return api


@pytest.fixture()
def patch_dashboard(task_repo, session_repo, points_repo, notifier, quotes_api):
    """Replace ``open_dashboard`` in a command module with an in-memory one.

    Usage::

        with patch_dashboard("focusforge.commands.tasks"):
            runner.invoke(app, ["list"])

    *prepare* is called with the dashboard before it is handed out.
    """

    def _patch(module: str, prepare=None):
        @asynccontextmanager
        async def fake_open_dashboard(*args, **kwargs):
            points = PointsContext(points_repo, USER_ID)
            timer = PomodoroTimer(
                session_repo, points, USER_ID, notifier=notifier, tick_interval=0.001
            )
            dashboard = Dashboard(
                USER_ID,
                TaskBoard(task_repo, USER_ID, notifier),
                timer,
                StatsPanel(session_repo, quotes_api, USER_ID),
                points,
            )
            timer.on_complete = dashboard.on_session_complete
            if prepare is not None:
                prepare(dashboard)
            try:
                yield dashboard
            finally:
                await timer.close()

        return patch(f"{module}.open_dashboard", fake_open_dashboard)

    return _patch


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Send log output to a temporary directory and reset the singleton."""
    import focusforge.utils.logger as logger_mod

    def _reset():
        logger_mod._logger = None
        app_logger = logging.getLogger("focusforge")
        for handler in list(app_logger.handlers):
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                app_logger.removeHandler(handler)
                handler.close()

    _reset()
    with patch(
        "focusforge.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield
    _reset()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from focusforge.services.config_service import ConfigService, get_config_service

    get_config_service.cache_clear()
    with patch(
        "focusforge.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        svc = ConfigService()
        with patch(
            "focusforge.services.config_service.get_config_service", return_value=svc
        ):
            yield svc
    get_config_service.cache_clear()
