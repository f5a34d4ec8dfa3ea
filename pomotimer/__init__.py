"""PomoTimer: a Pomodoro-style interval timer."""

__version__ = "0.1.0"
