"""
Tests for tag_fixer contracts.
"""

import pytest

from tag_fixer import validate
from tag_fixer.contracts import (
    DefectType,
    FixSuggestion,
    OpenTag,
    SuggestionType,
    TagToken,
    ValidationResult,
)


class TestDefectType:
    """Unit tests for DefectType."""

    def test_from_string(self):
        """Test lookup is case-insensitive."""
        assert DefectType.from_string("ORPHANED_TAG") is DefectType.ORPHANED_TAG

    def test_from_string_unknown(self):
        """Test unknown names raise."""
        with pytest.raises(ValueError):
            DefectType.from_string("broken_attribute")

    def test_is_fixable(self):
        """Test mismatches are the only defect the fixer leaves alone."""
        assert DefectType.UNCLOSED_TAG.is_fixable
        assert DefectType.ORPHANED_TAG.is_fixable
        assert not DefectType.TAG_MISMATCH.is_fixable


class TestFixSuggestion:
    """Unit tests for FixSuggestion."""

    def test_to_dict(self):
        """Test serialization uses the suggestion type value."""
        suggestion = FixSuggestion(
            suggestion_type=SuggestionType.REMOVE_ORPHANED_TAG,
            tag="</p>",
            position=11,
            message="Remove orphaned closing tag: </p>",
        )

        assert suggestion.to_dict() == {
            "type": "remove_orphaned_tag",
            "tag": "</p>",
            "position": 11,
            "message": "Remove orphaned closing tag: </p>",
        }

    def test_describe(self):
        """Test description falls back to the tag without a message."""
        suggestion = FixSuggestion(SuggestionType.ADD_CLOSING_TAG, "li", 4)

        assert suggestion.describe() == "[add_closing_tag] li (position: 4)"


class TestRecords:
    """Unit tests for token and defect records."""

    def test_open_tag_closing_tag(self):
        """Test the closing tag uses the normalized name."""
        assert OpenTag(name="div", position=0, tag="<DIV>").closing_tag == "</div>"

    def test_tag_token_is_frozen(self):
        """Test tokens are immutable."""
        token = TagToken(raw="<p>", position=0, name="p")

        with pytest.raises(AttributeError):
            token.name = "div"


class TestValidationResult:
    """Unit tests for ValidationResult."""

    def test_get_defects_by_type(self):
        """Test filtering defect records by classification."""
        result = validate("<p>x</div></i><section>")

        assert [d.tag for d in result.get_defects_by_type(DefectType.ORPHANED_TAG)] == ["</i>"]
        assert [d.name for d in result.get_defects_by_type("unclosed_tag")] == ["section"]
        mismatches = result.get_defects_by_type(DefectType.TAG_MISMATCH)
        assert [(d.expected, d.found) for d in mismatches] == [("p", "div")]

    def test_get_defects_by_unknown_type(self):
        """Test an unknown type name raises."""
        with pytest.raises(ValueError):
            validate("<p>").get_defects_by_type("broken_attribute")

    def test_defaults(self):
        """Test a fresh result is valid and empty."""
        result = ValidationResult()

        assert result.is_valid
        assert not result.has_errors
        assert result.describe() == "ValidationResult: VALID"

    def test_get_suggestions_by_type(self):
        """Test filtering suggestions by kind."""
        result = validate("</i><p><b>")

        additions = result.get_suggestions_by_type(SuggestionType.ADD_CLOSING_TAG)
        removals = result.get_suggestions_by_type(SuggestionType.REMOVE_ORPHANED_TAG)
        assert [s.tag for s in additions] == ["p", "b"]
        assert [s.tag for s in removals] == ["</i>"]

    def test_to_dict(self):
        """Test serialization of every defect list."""
        data = validate("<p>x</div></i>").to_dict()

        assert data["is_valid"] is False
        assert data["unclosed_tags"] == []
        assert data["orphaned_tags"] == [{"tag": "</i>", "position": 10}]
        assert data["mismatched_tags"] == [
            {"expected": "p", "found": "div", "position": 4, "tag": "</div>"}
        ]
        assert data["suggestions"][0]["type"] == "remove_orphaned_tag"

    def test_describe_invalid(self):
        """Test the summary lists errors and suggestions."""
        description = validate("<p>text").describe()

        assert description.startswith("ValidationResult: INVALID (1 errors)")
        assert "Unclosed tag: <p> (position: 0)" in description
        assert "Add closing tag at end of content: </p>" in description
