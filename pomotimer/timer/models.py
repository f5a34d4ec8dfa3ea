"""Timer and Session snapshots.

Both types are frozen dataclasses.  Every transition builds a new value
with :func:`dataclasses.replace`; nothing here is ever mutated in place.

Invariants
----------
- At most one timer in a session has ``active = True``.
- ``update_handle`` is not ``None`` iff ``timers[active_timer].active``.
- ``elapsed`` only grows while ``active``; reset is the only way back to 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple


# ── constants ─────────────────────────────────────────────────────────────

MINUTE_MS = 60 * 1000


class TimerSpec(NamedTuple):
    """A configured default: display name and duration in milliseconds."""

    name: str
    initial: int


DEFAULT_TIMERS: tuple[TimerSpec, ...] = (
    TimerSpec("Work", 25 * MINUTE_MS),
    TimerSpec("Break", 5 * MINUTE_MS),
)


# ── entities ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Timer:
    name: str = "Timer"
    initial: int = 0        # ms
    elapsed: int = 0        # ms, since last reset
    active: bool = False
    last_press: int = 0     # ms, baseline for the next tick delta

    @property
    def remaining(self) -> int:
        """Milliseconds left; negative once the timer has overrun."""
        return self.initial - self.elapsed

    @property
    def expired(self) -> bool:
        return self.elapsed >= self.initial


@dataclass(frozen=True)
class Session:
    """Ordered timers plus which one is eligible to run.

    ``update_handle`` is whatever the scheduler returned for the live
    periodic tick.  Timer logic never looks inside it.
    """

    timers: tuple[Timer, ...]
    active_timer: int = 0
    update_handle: Any = None

    @property
    def current(self) -> Timer:
        return self.timers[self.active_timer]

    @property
    def running(self) -> bool:
        """True while the timer at ``active_timer`` is counting."""
        return self.current.active


def make_timer(spec: TimerSpec, now: int) -> Timer:
    return Timer(name=spec.name, initial=max(0, int(spec.initial)), last_press=now)


def default_session(
    now: int,
    defaults: tuple[TimerSpec, ...] = DEFAULT_TIMERS,
) -> Session:
    """Fresh session: every timer at zero, nothing active, index 0."""
    if not defaults:
        raise ValueError("A session needs at least one timer")
    return Session(timers=tuple(make_timer(spec, now) for spec in defaults))
