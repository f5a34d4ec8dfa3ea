"""Tests for the Qt host: signal emission, QTimer subscription lifecycle,
settings-driven defaults, and expiry hand-off.
"""

import pytest

from pomotimer.settings import Settings
from pomotimer.timer.engine import TimerEngine
from pomotimer.timer.models import TimerSpec, default_session
from pomotimer.timer.scheduler import TickScheduler

from helpers import SHORT_TIMERS, SignalCollector


# ═══════════════════════════════════════════════════════════════════════════
#  SCHEDULER
# ═══════════════════════════════════════════════════════════════════════════


class TestTickScheduler:

    def test_schedule_returns_live_handle(self, qapp):
        sched = TickScheduler()
        handle = sched.schedule(lambda: None, 100)
        assert handle
        assert sched.is_live(handle)
        assert sched.live_count == 1
        sched.cancel(handle)

    def test_handles_are_unique(self, qapp):
        sched = TickScheduler()
        first = sched.schedule(lambda: None, 100)
        second = sched.schedule(lambda: None, 100)
        assert first != second
        sched.cancel(first)
        sched.cancel(second)

    def test_cancel_stops_subscription(self, qapp):
        sched = TickScheduler()
        handle = sched.schedule(lambda: None, 100)
        sched.cancel(handle)
        assert not sched.is_live(handle)
        assert sched.live_count == 0

    def test_cancel_unknown_handle_is_ignored(self, qapp):
        sched = TickScheduler()
        sched.cancel(12345)
        sched.cancel(None)
        assert sched.live_count == 0


# ═══════════════════════════════════════════════════════════════════════════
#  ENGINE
# ═══════════════════════════════════════════════════════════════════════════


class TestEngineState:

    def test_starts_with_settings_defaults(self, engine, clock):
        assert engine.defaults == SHORT_TIMERS
        assert engine.session == default_session(clock.now, SHORT_TIMERS)
        assert not engine.is_running

    def test_default_settings_give_pomodoro_lengths(self, qapp, clock):
        eng = TimerEngine(clock=clock)
        assert [t.initial for t in eng.session.timers] == [25 * 60_000, 5 * 60_000]

    def test_toggle_starts_qtimer(self, engine):
        engine.toggle()
        handle = engine.session.update_handle
        assert engine.is_running
        assert engine.scheduler.is_live(handle)
        assert engine.scheduler.live_count == 1

    def test_toggle_again_stops_qtimer(self, engine):
        engine.toggle()
        handle = engine.session.update_handle
        engine.toggle()
        assert not engine.is_running
        assert engine.session.update_handle is None
        assert not engine.scheduler.is_live(handle)
        assert engine.scheduler.live_count == 0

    def test_tick_interval_comes_from_settings(self, qapp, clock):
        eng = TimerEngine(settings=Settings(tick_interval_ms=900), clock=clock)
        eng.toggle()
        qt_timer = eng.scheduler._timers[eng.session.update_handle]
        assert qt_timer.interval() == 900
        eng.shutdown()

    def test_tick_accumulates_from_clock(self, engine, clock):
        engine.toggle()
        clock.advance(3000)
        engine.tick()
        assert engine.session.timers[0].elapsed == 3000

    def test_reset_tears_down_and_restores(self, engine, clock):
        engine.increment(1)
        engine.toggle()
        clock.advance(2000)
        engine.tick()
        engine.reset()
        assert engine.scheduler.live_count == 0
        assert engine.session == default_session(clock.now, SHORT_TIMERS)

    def test_nudge_step_comes_from_settings(self, qapp, clock):
        eng = TimerEngine(settings=Settings(nudge_ms=5 * 60_000), clock=clock)
        eng.increment(0)
        assert eng.session.timers[0].initial == 30 * 60_000
        eng.decrement(0)
        eng.decrement(0)
        assert eng.session.timers[0].initial == 20 * 60_000

    def test_increment_ignored_while_running(self, engine):
        engine.toggle()
        engine.increment(0)
        assert engine.session.timers[0].initial == 5000

    def test_shutdown_cancels_live_tick(self, engine):
        engine.toggle()
        engine.shutdown()
        assert engine.scheduler.live_count == 0
        assert not engine.is_running

    def test_shutdown_when_idle_keeps_session(self, engine):
        engine.increment(0)
        engine.shutdown()
        assert engine.session.timers[0].initial == 5000 + 60_000


class TestEngineSignals:

    def test_every_command_emits_session_changed(self, engine):
        c = SignalCollector()
        engine.session_changed.connect(c)

        engine.toggle()
        engine.tick()
        engine.toggle()
        engine.increment(1)
        engine.decrement(1)
        engine.reset()

        assert len(c) == 6
        assert c.last == engine.session

    def test_expiry_emits_timer_expired(self, engine, clock):
        c = SignalCollector()
        engine.timer_expired.connect(c)

        engine.toggle()
        clock.advance(3000)
        engine.tick()
        assert len(c) == 0

        clock.advance(3000)
        engine.tick()
        assert c.items == [(0, 1)]
        assert engine.session.active_timer == 1
        assert engine.session.timers[1].active
        assert engine.scheduler.live_count == 1

    @pytest.mark.parametrize("rounds", [1, 2, 4])
    def test_expiries_alternate(self, engine, clock, rounds):
        c = SignalCollector()
        engine.timer_expired.connect(c)
        engine.toggle()
        for _ in range(rounds):
            clock.advance(5000)
            engine.tick()
        assert len(c) == rounds
        assert engine.session.active_timer == rounds % 2


def test_three_timer_engine(qapp, clock):
    specs = (TimerSpec("Work", 1000), TimerSpec("Short", 1000), TimerSpec("Long", 1000))
    eng = TimerEngine(timers=specs, clock=clock)
    eng.toggle()
    for _ in range(3):
        clock.advance(1000)
        eng.tick()
    assert eng.session.active_timer == 0
    eng.shutdown()
