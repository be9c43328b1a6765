"""Logging setup for the wktkit command-line tools."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the ``wktkit`` logger with a single stderr handler.

    Calling it again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("wktkit")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return logger
