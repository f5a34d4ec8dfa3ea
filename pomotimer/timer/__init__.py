"""Timer package.

The pure state machine is importable without Qt.  The Qt host lives in
:mod:`pomotimer.timer.engine` and the ``QTimer`` scheduler in
:mod:`pomotimer.timer.scheduler`.
"""

from .models import (
    Timer,
    Session,
    TimerSpec,
    DEFAULT_TIMERS,
    MINUTE_MS,
    default_session,
)
from .accounting import tick_timer, tick_timers
from .transitions import (
    NUDGE_MS,
    toggle_timer,
    reset_timers,
    switch_timers,
    nudge_timer,
    increment_timer,
    decrement_timer,
)
from .dispatch import Command, Tick, Toggle, Reset, Increment, Decrement, dispatch

__all__ = [
    "Timer",
    "Session",
    "TimerSpec",
    "DEFAULT_TIMERS",
    "MINUTE_MS",
    "NUDGE_MS",
    "default_session",
    "tick_timer",
    "tick_timers",
    "toggle_timer",
    "reset_timers",
    "switch_timers",
    "nudge_timer",
    "increment_timer",
    "decrement_timer",
    "Command",
    "Tick",
    "Toggle",
    "Reset",
    "Increment",
    "Decrement",
    "dispatch",
]
