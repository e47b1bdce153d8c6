"""Focus timer models."""

from .state import (
    POINTS_PER_SESSION,
    SESSION_MINUTES,
    TOTAL_SECONDS,
    TimerState,
    TimerStatus,
)

__all__ = [
    "POINTS_PER_SESSION",
    "SESSION_MINUTES",
    "TOTAL_SECONDS",
    "TimerState",
    "TimerStatus",
]
