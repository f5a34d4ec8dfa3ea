"""Text rendering of remaining time."""

from __future__ import annotations

import math

from ..timer.models import Timer


def format_duration(milliseconds: int, negative_ok: bool = True) -> str:
    """Render ``milliseconds`` as ``"1h 2m 3s"``, dropping leading zero units.

    Rounds half up to whole seconds.  A negative duration is prefixed with
    ``-``, or shown as ``"0s"`` when ``negative_ok`` is false.
    """
    sign = "-" if milliseconds < 0 else ""
    if sign and not negative_ok:
        return "0s"

    total = abs(math.floor(milliseconds / 1000 + 0.5))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)

    if hours:
        return f"{sign}{hours}h {minutes}m {seconds}s"
    if minutes:
        return f"{sign}{minutes}m {seconds}s"
    return f"{sign}{seconds}s"


def format_timer(timer: Timer) -> str:
    return f"{timer.name}: {format_duration(timer.remaining, negative_ok=False)}"
