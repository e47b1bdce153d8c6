"""FocusForge: Pomodoro timer, task board and rewards backed by a hosted database."""

__version__ = "0.1.0"
