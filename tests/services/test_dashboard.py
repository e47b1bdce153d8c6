"""Tests for dashboard wiring."""

from __future__ import annotations

import pytest

from focusforge.exceptions import ConfigError
from focusforge.services.dashboard import open_dashboard
from focusforge.services.timer_service import PomodoroTimer


@pytest.fixture
def configured(tmp_config):
    tmp_config.set("backend.url", "https://db.example.com")
    tmp_config.set("backend.api_key", "anon")
    tmp_config.save_credentials("user-1", "jwt")
    return tmp_config


@pytest.mark.asyncio
async def test_open_dashboard_wires_components(configured, notifier):
    async with open_dashboard(configured, notifier=notifier) as dashboard:
        assert dashboard.user_id == "user-1"
        assert dashboard.board.user_id == "user-1"
        assert dashboard.stats.user_id == "user-1"
        assert dashboard.timer.points is dashboard.points
        assert dashboard.timer.on_complete == dashboard.on_session_complete
        assert dashboard.board.notifier is notifier


@pytest.mark.asyncio
async def test_open_dashboard_requires_sign_in(tmp_config):
    tmp_config.set("backend.url", "https://db.example.com")
    tmp_config.set("backend.api_key", "anon")

    with pytest.raises(ConfigError):
        async with open_dashboard(tmp_config):
            pass


@pytest.mark.asyncio
async def test_exit_pauses_running_timer(configured, notifier):
    async with open_dashboard(configured, notifier=notifier, tick_interval=3600) as dashboard:
        dashboard.timer.start()
        timer: PomodoroTimer = dashboard.timer

    assert timer.state.is_running is False
    assert timer._ticker is None


@pytest.mark.asyncio
async def test_load_and_session_completion(
    task_repo, session_repo, points_repo, notifier, quotes_api
):
    from focusforge.services.dashboard import Dashboard
    from focusforge.services.points_context import PointsContext
    from focusforge.services.stats_service import StatsPanel
    from focusforge.services.task_service import TaskBoard

    task_repo.seed("A", "B")
    points_repo.points = 40
    points = PointsContext(points_repo, "user-1")
    timer = PomodoroTimer(session_repo, points, "user-1", notifier=notifier)
    dashboard = Dashboard(
        "user-1",
        TaskBoard(task_repo, "user-1", notifier),
        timer,
        StatsPanel(session_repo, quotes_api, "user-1"),
        points,
    )
    timer.on_complete = dashboard.on_session_complete

    await dashboard.load()
    assert points.value == 40
    assert [t.title for t in dashboard.board.tasks] == ["A", "B"]
    assert dashboard.stats.points == 40
    assert dashboard.stats.quote is None

    timer.start()
    timer.state.minutes = 0
    await timer.tick()
    await timer.close()

    assert points.value == 50
    assert dashboard.stats.points == 50
    assert dashboard.stats.session_count == 1
    assert dashboard.stats.quote == "Keep going."
