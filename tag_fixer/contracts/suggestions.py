"""
Suggestions - Data structures for proposed tag repairs.

FixSuggestion is the atomic unit of repair: either append a closing tag
for an unclosed element or remove an orphaned closing tag.
"""

from dataclasses import dataclass
from typing import Dict

from .errors import SuggestionType


@dataclass
class FixSuggestion:
    """
    A single proposed repair.

    Example:
        suggestion = FixSuggestion(
            suggestion_type=SuggestionType.ADD_CLOSING_TAG,
            tag="li",
            position=12,
            message="Add closing tag at end of content: </li>",
        )
    """

    suggestion_type: SuggestionType
    """Kind of repair."""

    tag: str
    """Element name for ADD_CLOSING_TAG, raw closing tag text for REMOVE_ORPHANED_TAG."""

    position: int
    """Offset of the defective tag in the source text."""

    message: str = ""
    """Human-readable description of the repair."""

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "type": self.suggestion_type.value,
            "tag": self.tag,
            "position": self.position,
            "message": self.message,
        }

    def describe(self) -> str:
        """Generate human-readable description of the suggestion."""
        return f"[{self.suggestion_type.value}] {self.message or self.tag} (position: {self.position})"
