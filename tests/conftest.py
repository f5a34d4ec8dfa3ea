"""Shared pytest fixtures for PomoTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from pomotimer.settings import Settings  # noqa: E402
from pomotimer.timer.engine import TimerEngine  # noqa: E402
from pomotimer.timer.models import default_session  # noqa: E402

from helpers import SHORT_TIMERS, FakeClock, FakeScheduler  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app

@pytest.fixture
def clock():
    return FakeClock(start=1_000_000)

@pytest.fixture
def scheduler():
    """Records schedule/cancel calls for the pure transition tests."""
    return FakeScheduler()

@pytest.fixture
def session(clock):
    """Two 5 s timers, nothing running."""
    return default_session(clock.now, SHORT_TIMERS)

@pytest.fixture
def short_settings():
    return Settings(work_duration_ms=5000, break_duration_ms=5000)

@pytest.fixture
def engine(qapp, clock, short_settings):
    """TimerEngine on a fake clock with a real QTimer scheduler."""
    eng = TimerEngine(parent=None, settings=short_settings, clock=clock)
    yield eng
    eng.shutdown()
