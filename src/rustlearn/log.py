"""Logging setup for the console entry point."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "rustlearn"
DEFAULT_LEVEL = logging.WARNING


def setup_logging(level: int = DEFAULT_LEVEL) -> logging.Logger:
    """Configure the package logger to write diagnostics to stderr.

    Standard output carries the menu and the lessons, so log records never
    go there.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))

    logger.addHandler(stderr_handler)
    logger.propagate = False
    return logger
