"""
Tag Validator - Stack-based check of tag nesting and closing.

Scans content once, pushing opening tags and popping on closing tags.
Defects are reported as data on the ValidationResult, never raised.

Recovery policy for a closing tag whose name differs from the element on
top of the stack: the mismatch is reported and the element is popped
anyway, so scanning continues at the corrected depth. This is a
simplification of browser recovery, which is far more elaborate.
"""

import logging
from typing import Iterable, List, Optional

from ..contracts.validation import (
    OpenTag,
    OrphanedTag,
    TagMismatch,
    TagToken,
    ValidationResult,
)
from ..core.config import settings
from .suggestions import generate_fix_suggestions
from .tokenizer import iter_tags


logger = logging.getLogger(__name__)


class TagValidator:
    """
    Validates that HTML tags in mixed Markdown/HTML content are paired.

    Usage:
        validator = TagValidator()
        result = validator.validate("<ul><li>a</li><li>b")
        result.is_valid          # False
        result.unclosed_tags     # [OpenTag(name="ul", ...), OpenTag(name="li", ...)]
    """

    def __init__(self, void_elements: Optional[Iterable[str]] = None):
        """
        Initialize the validator.

        Args:
            void_elements: Names that never take a closing tag
                (defaults to settings.VOID_ELEMENTS)
        """
        if void_elements is None:
            void_elements = settings.VOID_ELEMENTS
        self.void_elements = frozenset(name.lower() for name in void_elements)

    def validate(self, content: str) -> ValidationResult:
        """
        Check tag pairing in content.

        Args:
            content: Mixed Markdown/HTML text

        Returns:
            ValidationResult; empty and valid when content has no defects
        """
        result = ValidationResult()
        stack: List[OpenTag] = []

        for token in iter_tags(content, self.void_elements):
            if token.is_self_closing:
                continue

            if token.is_opening:
                stack.append(
                    OpenTag(name=token.name, position=token.position, tag=token.raw)
                )
            else:
                self._close(token, stack, result)

        for unclosed in stack:
            result.errors.append(
                f"Unclosed tag: {unclosed.tag} (position: {unclosed.position})"
            )
            result.unclosed_tags.append(unclosed)
            logger.debug(f"Unclosed tag {unclosed.tag} at {unclosed.position}")

        result.is_valid = not result.errors
        if not result.is_valid:
            result.suggestions = generate_fix_suggestions(
                result.unclosed_tags, result.orphaned_tags
            )
            logger.info(
                f"Validation found {result.error_count} error(s): "
                f"{len(result.unclosed_tags)} unclosed, "
                f"{len(result.orphaned_tags)} orphaned, "
                f"{len(result.mismatched_tags)} mismatched"
            )

        return result

    def _close(
        self, token: TagToken, stack: List[OpenTag], result: ValidationResult
    ) -> None:
        """Handle a closing tag against the open-element stack."""
        if not stack:
            result.errors.append(
                f"Orphaned closing tag: {token.raw} (position: {token.position})"
            )
            result.orphaned_tags.append(
                OrphanedTag(tag=token.raw, position=token.position)
            )
            logger.debug(f"Orphaned closing tag {token.raw} at {token.position}")
            return

        last = stack.pop()
        if last.name != token.name:
            result.errors.append(
                f"Tag mismatch: expected closing {last.name}, "
                f"found {token.name} (position: {token.position})"
            )
            result.mismatched_tags.append(
                TagMismatch(
                    expected=last.name,
                    found=token.name,
                    position=token.position,
                    tag=token.raw,
                )
            )
            logger.debug(
                f"Tag mismatch at {token.position}: {last.name} closed by {token.raw}"
            )


def validate(content: str) -> ValidationResult:
    """
    Validate content with a TagValidator using the configured void elements.

    Convenience function for one-off checks.
    """
    return TagValidator().validate(content)
