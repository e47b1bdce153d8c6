"""Pomodoro countdown timer.

State machine::

    idle --start--> running --pause--> paused --start--> running
    running --tick at 00:00--> completing --saved--> idle
                                          --failed--> paused (at 00:00)
    any --reset--> idle

While running, a one-second tick task owned by the timer drives the
countdown. The task is created on entering ``running`` and cancelled on
leaving it or on :meth:`PomodoroTimer.close`.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

from focusforge.models import FocusSessionCreate
from focusforge.models.focus.state import (
    POINTS_PER_SESSION,
    SESSION_MINUTES,
    TimerState,
    TimerStatus,
)
from focusforge.repositories import FocusSessionRepository
from focusforge.services.points_context import PointsContext
from focusforge.utils.logger import get_logger
from focusforge.utils.ui.notifications import Notifier

TICK_INTERVAL = 1.0

CompletionCallback = Callable[[], Awaitable[None] | None]


class PomodoroTimer:
    """A single 25-minute focus countdown for one user."""

    def __init__(
        self,
        session_repository: FocusSessionRepository,
        points: PointsContext,
        user_id: str,
        notifier: Notifier | None = None,
        on_complete: CompletionCallback | None = None,
        tick_interval: float = TICK_INTERVAL,
    ):
        self.sessions = session_repository
        self.points = points
        self.user_id = user_id
        self.notifier = notifier or Notifier()
        self.on_complete = on_complete
        self.tick_interval = tick_interval
        self.state = TimerState()
        self._ticker: asyncio.Task | None = None
        self._finished = asyncio.Event()

    async def __aenter__(self) -> "PomodoroTimer":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def status(self) -> TimerStatus:
        return self.state.status

    def start(self) -> bool:
        """Start or resume the countdown. Must be called inside a running loop.

        Returns:
            False if the timer was not idle or paused
        """
        if self.state.status not in (TimerStatus.IDLE, TimerStatus.PAUSED):
            return False

        self.state.session_start = datetime.now(UTC)
        self.state.is_running = True
        self.state.status = TimerStatus.RUNNING
        self._finished.clear()
        self._ticker = asyncio.get_running_loop().create_task(self._run())
        return True

    def pause(self) -> bool:
        """Freeze the countdown.

        Returns:
            False if the timer was not running
        """
        if self.state.status != TimerStatus.RUNNING:
            return False

        self.state.is_running = False
        self.state.status = TimerStatus.PAUSED
        self._cancel_ticker()
        return True

    def toggle(self) -> bool:
        """Pause when running, otherwise start."""
        if self.state.is_running:
            return self.pause()
        return self.start()

    def reset(self) -> None:
        """Stop and put a full 25:00 back on the clock."""
        self._cancel_ticker()
        self.state = TimerState()

    async def tick(self) -> None:
        """Count down one second; on a tick at 00:00 complete the session."""
        if not self.state.is_running:
            return

        if self.state.is_at_zero:
            await self._complete()
        elif self.state.seconds == 0:
            self.state.minutes -= 1
            self.state.seconds = 59
        else:
            self.state.seconds -= 1

    async def wait_finished(self) -> None:
        """Wait until the current session's completion has been attempted."""
        await self._finished.wait()

    async def close(self) -> None:
        """Tear down: stop ticking. A running countdown is left paused."""
        ticker = self._ticker
        if self.state.is_running:
            self.state.is_running = False
            self.state.status = TimerStatus.PAUSED
        self._cancel_ticker()
        if ticker is not None and ticker is not _current_task():
            with contextlib.suppress(asyncio.CancelledError):
                await ticker

    async def _run(self) -> None:
        while self.state.is_running:
            await asyncio.sleep(self.tick_interval)
            await self.tick()

    def _cancel_ticker(self) -> None:
        ticker, self._ticker = self._ticker, None
        # Completion runs inside the tick task; it ends on its own once
        # is_running is cleared.
        if ticker is not None and not ticker.done() and ticker is not _current_task():
            ticker.cancel()

    async def _complete(self) -> bool:
        logger = get_logger("timer")
        # A reset while the save is pending replaces self.state; the
        # completion then must not touch the newer session.
        completing = self.state
        completing.status = TimerStatus.COMPLETING
        completing.is_running = False
        self._cancel_ticker()

        try:
            await self.sessions.add(
                FocusSessionCreate(
                    user_id=self.user_id,
                    duration_minutes=SESSION_MINUTES,
                    points_earned=POINTS_PER_SESSION,
                )
            )
            await self.points.increment(POINTS_PER_SESSION)
        except Exception as e:
            logger.error("Error saving session: %s", e)
            self.notifier.error("Failed to save session")
            if self.state is completing:
                completing.status = TimerStatus.PAUSED
            self._signal_finished(completing)
            return False

        logger.info("Focus session completed for user %s", self.user_id)
        self.notifier.success(
            f"🎉 Focus session complete! +{POINTS_PER_SESSION} points",
            "Time for a break!",
        )

        if self.on_complete is not None:
            try:
                result = self.on_complete()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Session completion callback failed")

        if self.state is completing:
            self.reset()
        self._signal_finished(completing)
        return True

    def _signal_finished(self, completing: TimerState) -> None:
        # A session started after a reset has its own completion to wait for.
        if self.state is completing or not self.state.is_running:
            self._finished.set()


def _current_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None
