"""Pomodoro timer state."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum

SESSION_MINUTES = 25
POINTS_PER_SESSION = 10
TOTAL_SECONDS = SESSION_MINUTES * 60


class TimerStatus(str, Enum):
    """States of the countdown state machine."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETING = "completing"


@dataclass
class TimerState:
    """Remaining time and run flag of one Pomodoro countdown."""

    minutes: int = SESSION_MINUTES
    seconds: int = 0
    is_running: bool = False
    session_start: datetime | None = None
    status: TimerStatus = TimerStatus.IDLE

    @property
    def remaining_seconds(self) -> int:
        """Seconds left on the clock."""
        return self.minutes * 60 + self.seconds

    @property
    def elapsed_seconds(self) -> int:
        """Seconds of the session already counted down."""
        return TOTAL_SECONDS - self.remaining_seconds

    @property
    def progress(self) -> float:
        """Elapsed fraction of the session, 0.0 to 1.0. Presentation only."""
        return self.elapsed_seconds / TOTAL_SECONDS

    @property
    def display(self) -> str:
        """Clock face, e.g. ``"24:59"``."""
        return f"{self.minutes:02d}:{self.seconds:02d}"

    @property
    def label(self) -> str:
        return "Focusing..." if self.is_running else "Ready to focus"

    @property
    def is_at_zero(self) -> bool:
        return self.minutes == 0 and self.seconds == 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = asdict(self)
        data["status"] = self.status.value
        data["session_start"] = (
            self.session_start.isoformat() if self.session_start else None
        )
        return data
