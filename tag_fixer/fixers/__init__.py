"""
Fixers - Tag repair.

Usage:
    from tag_fixer.fixers import TagFixer

    result = TagFixer().repair(content)
    result.fixed
"""

from .tag_fixer import TagFixer, fix

__all__ = [
    "TagFixer",
    "fix",
]
