"""Monotonic millisecond clock used by the Qt host."""

import time


def now_ms() -> int:
    return time.monotonic_ns() // 1_000_000
