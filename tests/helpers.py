"""Shared test helpers for PomoTimer."""

import itertools

from pomotimer.timer.models import TimerSpec


SHORT_TIMERS = (TimerSpec("Work", 5000), TimerSpec("Break", 5000))


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 0):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


class FakeScheduler:
    """Stand-in for TickScheduler that just tracks live handles."""

    def __init__(self):
        self._ids = itertools.count(1)
        self.live: set[int] = set()
        self.cancelled: list[int] = []

    def schedule(self, callback=None, period_ms: int = 100) -> int:
        handle = next(self._ids)
        self.live.add(handle)
        return handle

    def cancel(self, handle: int) -> None:
        self.cancelled.append(handle)
        self.live.discard(handle)
