"""UI package."""

from .formatting import format_duration, format_timer
from .timer_window import TimerWindow

__all__ = [
    "format_duration",
    "format_timer",
    "TimerWindow",
]
