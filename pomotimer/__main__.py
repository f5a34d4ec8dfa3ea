"""Allow running PomoTimer as a module: python -m pomotimer."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .audio.sounds import SoundManager
from .log import configure_logging
from .settings import load_settings
from .timer.engine import TimerEngine
from .ui.timer_window import TimerWindow

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="pomotimer", description="Pomodoro interval timer")
    parser.add_argument("--debug", action="store_true", help="log every transition")
    parser.add_argument("--no-sound", action="store_true", help="disable alerts")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(logging.DEBUG if args.debug else settings.log_level)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("PomoTimer")

    engine = TimerEngine(settings=settings)

    sounds = SoundManager(parent=engine)
    sounds.set_volume(settings.sound_volume)
    sounds.set_enabled(settings.sound_enabled and not args.no_sound)
    engine.timer_expired.connect(lambda *_: sounds.play("alarm"))

    window = TimerWindow(engine)
    window.start_pause_button.clicked.connect(lambda: sounds.play("click"))
    window.show()

    app.aboutToQuit.connect(engine.shutdown)
    log.info("PomoTimer ready (tick every %d ms)", settings.tick_interval_ms)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
