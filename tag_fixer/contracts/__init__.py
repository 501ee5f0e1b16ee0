"""
Contracts - Data structures for the tag fixer.

Provides:
- DefectType / SuggestionType: Classification of defects and repairs
- FixSuggestion: A proposed repair
- TagToken, OpenTag, OrphanedTag, TagMismatch, Defect: Scan and defect records
- ValidationResult / FixResult: Pipeline results
"""

from .errors import DefectType, SuggestionType
from .suggestions import FixSuggestion
from .validation import (
    TagToken,
    OpenTag,
    OrphanedTag,
    TagMismatch,
    Defect,
    ValidationResult,
    FixResult,
)

__all__ = [
    "DefectType",
    "SuggestionType",
    "FixSuggestion",
    "TagToken",
    "OpenTag",
    "OrphanedTag",
    "TagMismatch",
    "Defect",
    "ValidationResult",
    "FixResult",
]
