"""
Tag Fixer - Tag pairing validation and repair for mixed Markdown/HTML.

Usage:
    from tag_fixer import validate, fix

    result = validate("<p>text</p></p>")
    result.is_valid              # False
    fix("<p>text</p></p>")       # "<p>text</p>"
"""

from .core import configure_logging
from .contracts import (
    DefectType,
    SuggestionType,
    FixSuggestion,
    TagToken,
    OpenTag,
    OrphanedTag,
    TagMismatch,
    ValidationResult,
    FixResult,
)
from .validators import TagValidator, validate
from .fixers import TagFixer, fix

configure_logging()

__all__ = [
    "validate",
    "fix",
    "TagValidator",
    "TagFixer",
    "DefectType",
    "SuggestionType",
    "FixSuggestion",
    "TagToken",
    "OpenTag",
    "OrphanedTag",
    "TagMismatch",
    "ValidationResult",
    "FixResult",
]
