"""Application settings with JSON persistence.

Settings are stored at:
    ~/.config/pomotimer/settings.json

The ``POMOTIMER_SETTINGS`` environment variable points somewhere else.

Usage::

    settings = load_settings()
    settings.nudge_ms = 5 * 60 * 1000
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.models import MINUTE_MS, TimerSpec

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "pomotimer"
SETTINGS_PATH = CONFIG_DIR / "settings.json"


def settings_path() -> Path:
    override = os.environ.get("POMOTIMER_SETTINGS")
    return Path(override) if override else SETTINGS_PATH


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timers ────────────────────────────────────────────────────────
    work_duration_ms: int = 25 * MINUTE_MS
    break_duration_ms: int = 5 * MINUTE_MS
    tick_interval_ms: int = 100            # display refresh cadence
    nudge_ms: int = MINUTE_MS              # +/- step

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive")
        if self.work_duration_ms < 0 or self.break_duration_ms < 0:
            raise ValueError("Durations must not be negative")
        if self.nudge_ms < 0:
            raise ValueError("nudge_ms must not be negative")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        self.log_level = str(self.log_level).upper()
        self.sound_volume = max(0, min(self.sound_volume, 100))

    def timer_specs(self) -> tuple[TimerSpec, ...]:
        return (
            TimerSpec("Work", self.work_duration_ms),
            TimerSpec("Break", self.break_duration_ms),
        )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or settings_path()
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError):
        log.warning("Could not read settings from '%s', using defaults", path, exc_info=True)
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
    log.info("Saved settings to '%s'", path)
