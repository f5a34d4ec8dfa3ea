"""Qt host for the pure timer state machine.

``TimerEngine`` owns the current :class:`Session` snapshot.  Each public
control builds a command, hands it to :func:`dispatch` together with a
clock reading and the scheduler capabilities, stores the result, and
emits ``session_changed``.

While the current timer runs, a ``QTimer`` from :class:`TickScheduler`
calls :meth:`TimerEngine.tick` every ``tick_interval_ms``.  The handle of
that subscription lives in ``Session.update_handle``.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from ..settings import Settings
from .clock import now_ms
from .dispatch import Decrement, Increment, Reset, Tick, Toggle, dispatch
from .models import Session, TimerSpec, default_session
from .scheduler import TickScheduler

log = logging.getLogger(__name__)


class TimerEngine(QObject):
    """Holds the session and routes controls through ``dispatch``.

    Signals
    -------
    session_changed(session: Session)
        Emitted after every command, including ticks.
    timer_expired(previous: int, next: int)
        Emitted when the running timer reaches zero and the next one
        takes over.
    """

    session_changed = pyqtSignal(object)
    timer_expired = pyqtSignal(int, int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: Settings | None = None,
        timers: tuple[TimerSpec, ...] | None = None,
        clock: Callable[[], int] = now_ms,
        scheduler: TickScheduler | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or Settings()
        self._clock = clock
        self._scheduler = scheduler or TickScheduler(self)
        self._defaults: tuple[TimerSpec, ...] = timers or self._settings.timer_specs()
        self._session: Session = default_session(self._clock(), self._defaults)

    # ── properties ────────────────────────────────────────────────────

    @property
    def session(self) -> Session:
        return self._session

    @property
    def defaults(self) -> tuple[TimerSpec, ...]:
        return self._defaults

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def is_running(self) -> bool:
        return self._session.running

    # ── controls ──────────────────────────────────────────────────────

    def tick(self) -> None:
        self._apply(Tick())

    def toggle(self) -> None:
        """Start or pause the current timer."""
        self._apply(Toggle())

    def reset(self) -> None:
        """Stop everything and restore the configured defaults."""
        self._apply(Reset())

    def increment(self, idx: int) -> None:
        self._apply(Increment(idx))

    def decrement(self, idx: int) -> None:
        self._apply(Decrement(idx))

    def shutdown(self) -> None:
        """Tear down any live tick before the host goes away."""
        if self._session.update_handle is not None:
            self.reset()

    # ── internal ──────────────────────────────────────────────────────

    def _apply(self, command: object) -> None:
        self._session = dispatch(
            self._session,
            command,
            now=self._clock(),
            schedule_tick=partial(
                self._scheduler.schedule, self.tick, self._settings.tick_interval_ms,
            ),
            cancel_tick=self._scheduler.cancel,
            notify=self.timer_expired.emit,
            nudge_ms=self._settings.nudge_ms,
            defaults=self._defaults,
        )
        self.session_changed.emit(self._session)
