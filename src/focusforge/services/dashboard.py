"""Wiring of the dashboard components for the signed-in user.

Usage Pattern:
    from focusforge.services.dashboard import open_dashboard

    async with open_dashboard() as dashboard:
        await dashboard.board.refresh()
        dashboard.timer.start()

The three components share one API client, one user id and one
:class:`PointsContext`; they never call into each other. The timer's
completion callback refreshes the stats panel with the new points total.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from focusforge.adapters.rest_api import (
    RestApiFocusSessionRepository,
    RestApiPointsRepository,
    RestApiTaskRepository,
)
from focusforge.services.api.client import APIClient
from focusforge.services.api.quotes import QuotesAPI
from focusforge.services.config_service import ConfigService, get_config_service
from focusforge.services.points_context import PointsContext
from focusforge.services.stats_service import StatsPanel
from focusforge.services.task_service import TaskBoard
from focusforge.services.timer_service import TICK_INTERVAL, PomodoroTimer
from focusforge.utils.ui.notifications import Notifier


class Dashboard:
    """The task board, timer and stats panel of one user."""

    def __init__(
        self,
        user_id: str,
        board: TaskBoard,
        timer: PomodoroTimer,
        stats: StatsPanel,
        points: PointsContext,
    ):
        self.user_id = user_id
        self.board = board
        self.timer = timer
        self.stats = stats
        self.points = points

    async def load(self) -> None:
        """Initial fetch of points, tasks and stats."""
        await self.points.refresh()
        await self.board.refresh()
        await self.stats.sync(self.points.value, self.user_id)

    async def on_session_complete(self) -> None:
        await self.stats.sync(self.points.value, self.user_id)


@asynccontextmanager
async def open_dashboard(
    config_service: ConfigService | None = None,
    notifier: Notifier | None = None,
    tick_interval: float = TICK_INTERVAL,
) -> AsyncIterator[Dashboard]:
    """Build a dashboard from stored configuration and close it afterwards.

    Raises:
        ConfigError: If the backend or the user id is not configured
    """
    config_service = config_service or get_config_service()
    config_service.require_backend()
    user_id = config_service.require_user_id()
    credentials = config_service.load_credentials()
    notifier = notifier or Notifier()

    client = APIClient(
        config_service.config.backend,
        access_token=credentials.access_token if credentials else None,
    )
    points = PointsContext(RestApiPointsRepository(client), user_id)
    session_repository = RestApiFocusSessionRepository(client)
    stats = StatsPanel(session_repository, QuotesAPI(config_service.config.quotes), user_id)
    board = TaskBoard(RestApiTaskRepository(client), user_id, notifier)
    timer = PomodoroTimer(
        session_repository,
        points,
        user_id,
        notifier=notifier,
        tick_interval=tick_interval,
    )
    dashboard = Dashboard(user_id, board, timer, stats, points)
    timer.on_complete = dashboard.on_session_complete

    try:
        yield dashboard
    finally:
        await timer.close()
        await client.close()
