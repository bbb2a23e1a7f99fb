"""Shared console logger for the engine."""

from __future__ import annotations

import functools
import logging
import sys

LOGGER_NAME = "bitforge"
LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] %(message)s"


@functools.lru_cache(maxsize=None)
def get_logger() -> logging.Logger:
    """Return the engine's root logger, configuring its console sink once."""
    logger = logging.getLogger(LOGGER_NAME)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger


def flush_logs() -> None:
    """Flush every handler attached to the engine logger."""
    for handler in get_logger().handlers:
        handler.flush()