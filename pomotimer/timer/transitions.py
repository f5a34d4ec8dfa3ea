"""Start/pause, expiry switch-over, reset and duration nudges.

Transitions
-----------
toggle      running ⇄ paused for the timer at ``active_timer``
switch      current timer expired → zero all, activate the next one
reset       stop=True  → default session, tick subscription cancelled
            stop=False → elapsed zeroed, everything else kept
nudge       ``initial += delta`` (floored at 0), only while inactive

Non-stop reset keeps each timer's ``active`` flag and its (possibly
nudged) ``initial``.  ``switch_timers`` relies on that: it resets first and
then overwrites the flags itself.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from .accounting import tick_timers
from .models import DEFAULT_TIMERS, MINUTE_MS, Session, TimerSpec, default_session

log = logging.getLogger(__name__)

NUDGE_MS = MINUTE_MS

ScheduleTick = Callable[[], Any]
CancelTick = Callable[[Any], None]
ExpiryHook = Callable[[int, int], None]


def toggle_timer(
    session: Session,
    now: int,
    schedule_tick: ScheduleTick,
    cancel_tick: CancelTick,
) -> Session:
    """Start or pause the current timer and (de)register the periodic tick.

    Time is flushed up to ``now`` first so that a pause charges exactly
    the running span and a start does not charge the idle one.
    """
    ticked = tick_timers(session, now)
    idx = ticked.active_timer
    timers = list(ticked.timers)
    timers[idx] = replace(timers[idx], active=not timers[idx].active)

    if ticked.update_handle is not None:
        cancel_tick(ticked.update_handle)
        handle = None
    else:
        handle = schedule_tick()

    log.debug(
        "Toggled timer %d (%s) -> active=%s",
        idx, timers[idx].name, timers[idx].active,
    )
    return replace(ticked, timers=tuple(timers), update_handle=handle)


def reset_timers(
    session: Session | None,
    now: int,
    stop: bool = False,
    cancel_tick: CancelTick | None = None,
    defaults: tuple[TimerSpec, ...] = DEFAULT_TIMERS,
) -> Session:
    if session is None:
        return default_session(now, defaults)

    if stop:
        if session.update_handle is not None:
            if cancel_tick is None:
                raise TypeError("Stopping a running session needs cancel_tick")
            cancel_tick(session.update_handle)
        log.debug("Full reset to %d default timer(s)", len(defaults))
        return default_session(now, defaults)

    return replace(
        session,
        timers=tuple(replace(timer, elapsed=0) for timer in session.timers),
    )


def switch_timers(session: Session, notify: ExpiryHook | None = None) -> Session:
    """Advance to the next timer after the current one expired.

    The live tick subscription, if any, is carried over unchanged and
    keeps driving the newly activated timer.
    """
    previous = session.active_timer
    cleared = reset_timers(session, now=session.current.last_press)
    nxt = (previous + 1) % len(cleared.timers)
    timers = tuple(
        replace(timer, active=(i == nxt)) for i, timer in enumerate(cleared.timers)
    )

    log.info(
        "Timer %r expired, switching to %r",
        session.timers[previous].name, timers[nxt].name,
    )
    if notify is not None:
        notify(previous, nxt)
    return replace(cleared, timers=timers, active_timer=nxt)


def nudge_timer(session: Session, idx: int, delta: int) -> Session:
    """Shift ``timers[idx].initial`` by ``delta`` ms, never below zero.

    Running timers keep their duration; the input is returned as-is.
    """
    if not 0 <= idx < len(session.timers):
        log.warning("Ignoring nudge for unknown timer index %d", idx)
        return session
    timer = session.timers[idx]
    if timer.active:
        return session

    timers = list(session.timers)
    timers[idx] = replace(timer, initial=max(0, timer.initial + delta))
    return replace(session, timers=tuple(timers))


def increment_timer(session: Session, idx: int, step: int = NUDGE_MS) -> Session:
    return nudge_timer(session, idx, abs(step))


def decrement_timer(session: Session, idx: int, step: int = NUDGE_MS) -> Session:
    return nudge_timer(session, idx, -abs(step))
