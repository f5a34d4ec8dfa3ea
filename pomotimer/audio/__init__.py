"""Audio package."""

from .sounds import SoundManager, SOUND_NAMES, ensure_wav_files

__all__ = ["SoundManager", "SOUND_NAMES", "ensure_wav_files"]
