"""
Suggestion generation for invalid content.
"""

from typing import List

from ..contracts.errors import SuggestionType
from ..contracts.suggestions import FixSuggestion
from ..contracts.validation import OpenTag, OrphanedTag


def generate_fix_suggestions(
    unclosed_tags: List[OpenTag], orphaned_tags: List[OrphanedTag]
) -> List[FixSuggestion]:
    """
    Build repair suggestions for the defects of one validation pass.

    Closing-tag additions always come before orphan removals, whatever
    order the defects were found in.

    Args:
        unclosed_tags: Unclosed elements, outermost first
        orphaned_tags: Orphaned closing tags in scan order

    Returns:
        Ordered list of FixSuggestion
    """
    suggestions = [
        FixSuggestion(
            suggestion_type=SuggestionType.ADD_CLOSING_TAG,
            tag=unclosed.name,
            position=unclosed.position,
            message=f"Add closing tag at end of content: {unclosed.closing_tag}",
        )
        for unclosed in unclosed_tags
    ]

    suggestions.extend(
        FixSuggestion(
            suggestion_type=SuggestionType.REMOVE_ORPHANED_TAG,
            tag=orphan.tag,
            position=orphan.position,
            message=f"Remove orphaned closing tag: {orphan.tag}",
        )
        for orphan in orphaned_tags
    )

    return suggestions
