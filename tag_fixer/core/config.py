"""
Configuration module - centralized settings for the tag fixer.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Tag fixer settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Variables carry the TAG_FIXER_ prefix, e.g.:
        export TAG_FIXER_LOG_LEVEL=DEBUG
        export TAG_FIXER_VOID_ELEMENTS='["img", "br", "hr"]'
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="TAG_FIXER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # VALIDATION SETTINGS
    # ---------------------------------------------------------------------------
    # VOID_ELEMENTS: Tag names that never take a closing tag.
    # An opening tag with one of these names is treated as self-closing
    # even without a trailing "/>".
    VOID_ELEMENTS: List[str] = ["img", "br", "hr", "input", "meta", "link"]

    # ---------------------------------------------------------------------------
    # LOGGING SETTINGS
    # ---------------------------------------------------------------------------
    # LOG_LEVEL: Level for the "tag_fixer" package logger
    LOG_LEVEL: str = "WARNING"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from tag_fixer.core.config import settings
settings = Settings()
