"""Elapsed-time accounting.

Every tick is applied to *all* timers with the same ``now`` so that an
idle timer's ``last_press`` stays current.  Otherwise the idle gap would
be charged to it the moment it became active.
"""

from __future__ import annotations

from dataclasses import replace

from .models import Session, Timer


def tick_timer(timer: Timer, now: int) -> Timer:
    if timer.active:
        # Clocks are expected to be monotonic; a backwards step adds nothing.
        delta = max(0, now - timer.last_press)
        return replace(timer, elapsed=timer.elapsed + delta, last_press=now)
    return replace(timer, last_press=now)


def tick_timers(session: Session, now: int) -> Session:
    """Tick every timer; index and handle pass through untouched."""
    return replace(
        session,
        timers=tuple(tick_timer(timer, now) for timer in session.timers),
    )
