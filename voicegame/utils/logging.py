"""Loguru sink setup for the command line."""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a stderr handler at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
