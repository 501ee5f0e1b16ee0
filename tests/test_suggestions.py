"""
Tests for suggestion generation.
"""

from tag_fixer.contracts.errors import SuggestionType
from tag_fixer.contracts.validation import OpenTag, OrphanedTag
from tag_fixer.validators.suggestions import generate_fix_suggestions


class TestGenerateFixSuggestions:
    """Unit tests for generate_fix_suggestions()."""

    def test_empty(self):
        """Test no defects yields no suggestions."""
        assert generate_fix_suggestions([], []) == []

    def test_additions_then_removals(self):
        """Test additions keep unclosed order and precede removals."""
        unclosed = [
            OpenTag(name="ul", position=0, tag="<ul>"),
            OpenTag(name="li", position=14, tag="<li>"),
        ]
        orphaned = [
            OrphanedTag(tag="</p>", position=2),
            OrphanedTag(tag="</b>", position=30),
        ]

        suggestions = generate_fix_suggestions(unclosed, orphaned)

        assert [s.suggestion_type for s in suggestions] == [
            SuggestionType.ADD_CLOSING_TAG,
            SuggestionType.ADD_CLOSING_TAG,
            SuggestionType.REMOVE_ORPHANED_TAG,
            SuggestionType.REMOVE_ORPHANED_TAG,
        ]
        assert [s.tag for s in suggestions] == ["ul", "li", "</p>", "</b>"]
        assert [s.position for s in suggestions] == [0, 14, 2, 30]

    def test_messages(self):
        """Test each suggestion describes its repair."""
        suggestions = generate_fix_suggestions(
            [OpenTag(name="div", position=0, tag="<DIV>")],
            [OrphanedTag(tag="</SPAN>", position=9)],
        )

        assert suggestions[0].message == "Add closing tag at end of content: </div>"
        assert suggestions[1].message == "Remove orphaned closing tag: </SPAN>"
