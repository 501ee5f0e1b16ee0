"""
Validation - Data structures for tag scanning and fix results.

These structures carry information through the pipeline:
1. TagToken: A tag-like substring found by the tokenizer
2. OpenTag / OrphanedTag / TagMismatch: Defect records
3. ValidationResult: Outcome of a validation pass
4. FixResult: Outcome of a repair pass
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union

from .errors import DefectType, SuggestionType
from .suggestions import FixSuggestion


@dataclass(frozen=True)
class TagToken:
    """A tag-like substring scanned from the source text."""

    raw: str
    """Tag text exactly as it appears in the source."""

    position: int
    """Start offset in the source."""

    name: str
    """Lower-cased tag name."""

    is_closing: bool = False
    """Tag starts with '</'."""

    is_self_closing: bool = False
    """Tag ends with '/>' or names a void element."""

    @property
    def is_opening(self) -> bool:
        return not self.is_closing and not self.is_self_closing


@dataclass
class OpenTag:
    """
    An element opened but not yet closed.

    Used as the validator's stack frame; frames left on the stack after
    the scan are reported as unclosed tags.
    """

    name: str
    position: int
    tag: str
    """Raw opening tag text."""

    @property
    def closing_tag(self) -> str:
        """Closing tag that would close this element."""
        return f"</{self.name}>"

    @property
    def defect_type(self) -> DefectType:
        """Classification when reported as a defect (left open after the scan)."""
        return DefectType.UNCLOSED_TAG

    def to_dict(self) -> Dict:
        return {"name": self.name, "position": self.position, "tag": self.tag}


@dataclass
class OrphanedTag:
    """A closing tag with no open element before it."""

    tag: str
    position: int

    @property
    def defect_type(self) -> DefectType:
        return DefectType.ORPHANED_TAG

    def to_dict(self) -> Dict:
        return {"tag": self.tag, "position": self.position}


@dataclass
class TagMismatch:
    """A closing tag that closed an element with a different name."""

    expected: str
    """Name of the element that was popped."""

    found: str
    """Name of the closing tag."""

    position: int
    tag: str

    @property
    def defect_type(self) -> DefectType:
        return DefectType.TAG_MISMATCH

    def to_dict(self) -> Dict:
        return {
            "expected": self.expected,
            "found": self.found,
            "position": self.position,
            "tag": self.tag,
        }


Defect = Union[OpenTag, OrphanedTag, TagMismatch]
"""Any defect record carried by a ValidationResult."""


@dataclass
class ValidationResult:
    """
    Result of validating tag pairing in a piece of content.

    is_valid is False iff errors is non-empty.
    """

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    """Human-readable error messages in the order they were found."""

    unclosed_tags: List[OpenTag] = field(default_factory=list)
    """Unclosed elements, outermost first."""

    orphaned_tags: List[OrphanedTag] = field(default_factory=list)
    """Orphaned closing tags in scan order."""

    suggestions: List[FixSuggestion] = field(default_factory=list)
    """Closing-tag additions first, then orphan removals."""

    mismatched_tags: List[TagMismatch] = field(default_factory=list)
    """Name mismatches in scan order. Never repeated in the other defect lists."""

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def defects(self) -> List[Defect]:
        """All defect records: unclosed, then orphaned, then mismatched."""
        return [*self.unclosed_tags, *self.orphaned_tags, *self.mismatched_tags]

    def get_defects_by_type(
        self, defect_type: Union[DefectType, str]
    ) -> List[Defect]:
        """
        Get all defects of a specific type, in reported order.

        Args:
            defect_type: DefectType or its string value

        Raises:
            ValueError: If a string names no known defect type
        """
        if isinstance(defect_type, str):
            defect_type = DefectType.from_string(defect_type)
        return [d for d in self.defects if d.defect_type is defect_type]

    def get_suggestions_by_type(
        self, suggestion_type: SuggestionType
    ) -> List[FixSuggestion]:
        """Get all suggestions of a specific type."""
        return [s for s in self.suggestions if s.suggestion_type == suggestion_type]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "unclosed_tags": [t.to_dict() for t in self.unclosed_tags],
            "orphaned_tags": [t.to_dict() for t in self.orphaned_tags],
            "mismatched_tags": [t.to_dict() for t in self.mismatched_tags],
            "suggestions": [s.to_dict() for s in self.suggestions],
        }

    def describe(self) -> str:
        """Generate human-readable summary."""
        if self.is_valid:
            return "ValidationResult: VALID"

        lines = [f"ValidationResult: INVALID ({self.error_count} errors)"]
        for error in self.errors:
            lines.append(f"  - {error}")
        if self.suggestions:
            lines.append("  Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"    - {suggestion.describe()}")
        return "\n".join(lines)


@dataclass
class FixResult:
    """
    Result of repairing content.

    Tracks what was changed and whether the repaired content validates.
    """

    original: str
    """Content before repair."""

    fixed: str
    """Content after repair (same as original when nothing was fixable)."""

    validation: ValidationResult
    """Validation of the original content that drove the repair."""

    removed_tags: List[str] = field(default_factory=list)
    """Orphaned closing tags removed, in removal order."""

    appended_tags: List[str] = field(default_factory=list)
    """Closing tags appended, innermost first."""

    skipped_defects: List[Defect] = field(default_factory=list)
    """Defects whose type the fixer does not repair (tag mismatches)."""

    validation_passed: bool = False
    """Whether the fixed content validates."""

    @property
    def changed(self) -> bool:
        return self.fixed != self.original

    def describe(self) -> str:
        """Generate human-readable summary."""
        status = "PASSED" if self.validation_passed else "FAILED"
        lines = [f"FixResult: {status}"]

        if self.removed_tags:
            lines.append(f"  Removed: {' '.join(self.removed_tags)}")
        if self.appended_tags:
            lines.append(f"  Appended: {''.join(self.appended_tags)}")
        if self.skipped_defects:
            lines.append(f"  Not repaired: {len(self.skipped_defects)} defect(s)")
        if not self.changed:
            lines.append("  No changes")
        return "\n".join(lines)
