"""Alert synthesis and playback using numpy + QSoundEffect.

Sounds are generated as WAV files with sine-wave synthesis and a short
attack/release envelope, then cached to disk.

Sound names
-----------
- ``alarm``: three short beeps, played when a timer expires
- ``click``: subtle tick, played on start/pause
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

log = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = Path.home() / ".cache" / "pomotimer" / "sounds"

SOUND_NAMES = ("alarm", "click")

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _envelope(length: int, attack: int, release: int) -> np.ndarray:
    """Linear fade in/out (durations in samples) so tones don't pop."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    r = min(release, length - a)
    if r > 0:
        env[length - r:] = np.linspace(1.0, 0.0, r)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 array (-1..1) to 16-bit mono PCM WAV bytes."""
    int_samples = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_alarm(beeps: int = 3) -> bytes:
    """BEEP BEEP BEEP: 880 Hz, 150 ms each, 100 ms apart."""
    parts: list[np.ndarray] = []
    for _ in range(beeps):
        tone = _sine(880.0, 0.15) * 0.5
        parts.append(tone * _envelope(len(tone), attack=220, release=660))
        parts.append(_silence(0.10))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_click() -> bytes:
    tone = _sine(1200.0, 0.015) * 0.2
    padded = np.concatenate([tone * _envelope(len(tone), attack=20, release=300), _silence(0.03)])
    return _to_wav_bytes(padded)


_GENERATORS: dict[str, Callable[[], bytes]] = {
    "alarm": _generate_alarm,
    "click": _generate_click,
}


def ensure_wav_files(sounds_dir: Path) -> list[Path]:
    """Generate any missing WAV files; returns the paths that were written."""
    sounds_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, gen_fn in _GENERATORS.items():
        path = sounds_dir / f"{name}.wav"
        if not path.exists():
            path.write_bytes(gen_fn())
            written.append(path)
    if written:
        log.debug("Generated %d sound file(s) in '%s'", len(written), sounds_dir)
    return written


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Plays the cached alerts.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        engine.timer_expired.connect(lambda *_: mgr.play("alarm"))
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        ensure_wav_files(self._sounds_dir)
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    @property
    def volume(self) -> int:
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _load_effects(self) -> None:
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
