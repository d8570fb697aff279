"""Logging setup shared by the cleaning stages."""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

from src.config.settings import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOGGER_INITIALIZED = False


def _build_logger() -> None:
    global _LOGGER_INITIALIZED  # pylint: disable=global-statement
    if _LOGGER_INITIALIZED:
        return

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(root.level)
    stream_handler.setFormatter(formatter)

    file_handler = TimedRotatingFileHandler(
        LOG_DIR / "layoffs_cleaning.log", when="D", backupCount=7, encoding="utf-8"
    )
    file_handler.setLevel(root.level)
    file_handler.setFormatter(formatter)

    root.addHandler(stream_handler)
    root.addHandler(file_handler)
    _LOGGER_INITIALIZED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else __name__)
