"""Periodic tick subscriptions backed by ``QTimer``."""

from __future__ import annotations

import itertools
import logging
from typing import Callable

from PyQt6.QtCore import QObject, QTimer

log = logging.getLogger(__name__)


class TickScheduler(QObject):
    """Hands out opaque integer handles, one repeating ``QTimer`` each.

    Usage::

        scheduler = TickScheduler(parent=self)
        handle = scheduler.schedule(engine.tick, 100)
        ...
        scheduler.cancel(handle)
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timers: dict[int, QTimer] = {}
        self._ids = itertools.count(1)  # 0 is never a live handle

    def schedule(self, callback: Callable[[], None], period_ms: int) -> int:
        handle = next(self._ids)
        qt_timer = QTimer(self)
        qt_timer.setInterval(max(1, int(period_ms)))
        qt_timer.timeout.connect(callback)
        qt_timer.start()
        self._timers[handle] = qt_timer
        log.debug("Scheduled tick %d every %d ms", handle, qt_timer.interval())
        return handle

    def cancel(self, handle: int) -> None:
        """Stop a subscription.  Unknown or already-cancelled handles are ignored."""
        qt_timer = self._timers.pop(handle, None)
        if qt_timer is None:
            return
        qt_timer.stop()
        qt_timer.deleteLater()
        log.debug("Cancelled tick %d", handle)

    def is_live(self, handle: int) -> bool:
        qt_timer = self._timers.get(handle)
        return qt_timer is not None and qt_timer.isActive()

    @property
    def live_count(self) -> int:
        return len(self._timers)
