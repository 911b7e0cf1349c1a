"""Logging setup for the package logger; the host's root logger is left alone."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "wordtally"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set the ``wordtally`` logger level and return it.

    A stream handler is attached only when neither the package logger nor
    the root logger has one, so records still reach the host's handlers.
    Unknown level names fall back to INFO.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
