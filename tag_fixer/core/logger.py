"""
Logger - Package logger setup for the tag fixer.

Modules log through logging.getLogger(__name__), which places them under
the "tag_fixer" logger configured here.

Log Format:
    [2026-01-01 12:00:00] INFO [tag_fixer.fixers.tag_fixer] message
"""

import logging
import sys
from typing import Optional

from .config import settings

LOGGER_NAME = "tag_fixer"
LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    A stdout handler is attached only once; later calls just update the level.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to settings.LOG_LEVEL.

    Returns:
        The configured "tag_fixer" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
