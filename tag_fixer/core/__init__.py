"""
Core - Configuration and logging for the tag fixer.
"""

from .config import Settings, settings
from .logger import configure_logging

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
]
