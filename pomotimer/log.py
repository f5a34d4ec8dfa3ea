"""Logging setup for the application.

Library modules only call ``logging.getLogger(__name__)``; the entry point
calls :func:`configure_logging` once to attach a handler to the
``pomotimer`` logger.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "pomotimer"


def configure_logging(
    level: int | str = logging.INFO,
    *,
    console: bool = True,
) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    handler_name = f"{ROOT_LOGGER}:console"
    existing = [h for h in logger.handlers if h.get_name() == handler_name]
    if not console:
        for handler in existing:
            logger.removeHandler(handler)
        return logger

    if existing:
        handler = existing[0]
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        handler.set_name(handler_name)
        logger.addHandler(handler)
    handler.setLevel(level)
    return logger
