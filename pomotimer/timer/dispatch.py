"""Command routing: ``dispatch(session, command) -> session``.

The caller owns the current snapshot and passes it in together with a
clock reading and whatever collaborators the command needs.  The return
value replaces the caller's snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .accounting import tick_timers
from .models import DEFAULT_TIMERS, Session, TimerSpec, default_session
from .transitions import (
    NUDGE_MS,
    CancelTick,
    ExpiryHook,
    ScheduleTick,
    decrement_timer,
    increment_timer,
    reset_timers,
    switch_timers,
    toggle_timer,
)

log = logging.getLogger(__name__)


# ── commands ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Toggle:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Increment:
    idx: int


@dataclass(frozen=True)
class Decrement:
    idx: int


Command = Tick | Toggle | Reset | Increment | Decrement


# ── dispatch ──────────────────────────────────────────────────────────────


def dispatch(
    session: Session | None,
    command: object,
    *,
    now: int,
    schedule_tick: ScheduleTick | None = None,
    cancel_tick: CancelTick | None = None,
    notify: ExpiryHook | None = None,
    nudge_ms: int = NUDGE_MS,
    defaults: tuple[TimerSpec, ...] = DEFAULT_TIMERS,
) -> Session:
    """Apply ``command`` to ``session`` and return the next snapshot.

    A missing session always yields the default one, whatever the
    command.  Unrecognised commands return the input unchanged.
    """
    if session is None:
        return default_session(now, defaults)

    if isinstance(command, Tick):
        nxt = tick_timers(session, now)
        if nxt.running and nxt.current.expired:
            nxt = switch_timers(nxt, notify=notify)
        return nxt

    if isinstance(command, Toggle):
        if schedule_tick is None or cancel_tick is None:
            raise TypeError("Toggle needs both schedule_tick and cancel_tick")
        return toggle_timer(session, now, schedule_tick, cancel_tick)

    if isinstance(command, Reset):
        return reset_timers(
            session, now, stop=True, cancel_tick=cancel_tick, defaults=defaults,
        )

    if isinstance(command, Increment):
        return increment_timer(session, command.idx, nudge_ms)

    if isinstance(command, Decrement):
        return decrement_timer(session, command.idx, nudge_ms)

    log.debug("Ignoring unrecognised command %r", command)
    return session
