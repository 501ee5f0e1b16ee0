"""
Validators - Tag pairing validation.

- Tokenizer: Scans tag-like substrings
- TagValidator: Stack-based nesting check
- generate_fix_suggestions: Repair suggestions for a failed check
"""

from .tokenizer import TAG_PATTERN, iter_tags, parse_tag, tokenize
from .suggestions import generate_fix_suggestions
from .tag_validator import TagValidator, validate

__all__ = [
    # Tokenizer
    "TAG_PATTERN",
    "iter_tags",
    "parse_tag",
    "tokenize",
    # Suggestions
    "generate_fix_suggestions",
    # Validator
    "TagValidator",
    "validate",
]
