"""
Defect Types - Classification of tag pairing defects.

These defect types map directly to fix strategies:
- UNCLOSED_TAG → Append the missing closing tag at the end of the content
- ORPHANED_TAG → Remove the closing tag text
- TAG_MISMATCH → Reported only, never patched
"""

from enum import Enum


class DefectType(Enum):
    """Classification of tag nesting defects found during validation."""

    UNCLOSED_TAG = "unclosed_tag"
    """Opening tag still on the stack when the scan ends."""

    ORPHANED_TAG = "orphaned_tag"
    """Closing tag scanned while no element was open."""

    TAG_MISMATCH = "tag_mismatch"
    """Closing tag whose name differs from the element it closed."""

    @classmethod
    def from_string(cls, value: str) -> "DefectType":
        """
        Convert string to DefectType.

        Raises:
            ValueError: If value names no known defect type
        """
        return cls(value.lower())

    @property
    def is_fixable(self) -> bool:
        """Check if the fixer generates a repair for this defect."""
        return self in (self.UNCLOSED_TAG, self.ORPHANED_TAG)


class SuggestionType(Enum):
    """Kinds of repair the fixer can propose."""

    ADD_CLOSING_TAG = "add_closing_tag"
    """Append </name> for an unclosed element."""

    REMOVE_ORPHANED_TAG = "remove_orphaned_tag"
    """Delete an orphaned closing tag."""
