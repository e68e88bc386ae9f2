"""Logging helpers."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config.settings import AppConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "autologo.log"
_HANDLER_TAG = "_autologo_handler"


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(config: AppConfig) -> logging.Logger:
    """Attach file and console handlers to the root logger.

    Safe to call more than once: handlers installed by an earlier call are
    replaced rather than duplicated, so the level and log directory follow
    the latest config.
    """
    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    root.addHandler(
        _tagged(RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=1_000_000, backupCount=3, encoding="utf-8"))
    )
    root.addHandler(_tagged(logging.StreamHandler()))
    root.setLevel(logging.getLevelName(config.log_level.upper()))

    # SDK request logs are noisy at INFO
    for noisy in ("httpx", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    return logging.getLogger("autologo")
