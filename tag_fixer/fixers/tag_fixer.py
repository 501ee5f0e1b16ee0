"""
TagFixer - Applies repairs for unclosed and orphaned tags.

Repairs are textual:
1. Each orphaned closing tag is removed (first occurrence of its raw text)
2. Closing tags for unclosed elements are appended, innermost first

Name mismatches are left untouched.

Usage:
    fixer = TagFixer()
    fixer.fix("<ul><li>a</li><li>b")   # "<ul><li>a</li><li>b</li></ul>"
"""

import logging
from typing import List, Optional, Tuple

from ..contracts.errors import DefectType
from ..contracts.validation import Defect, FixResult
from ..validators.tag_validator import TagValidator


logger = logging.getLogger(__name__)


class TagFixer:
    """
    Repairs content using the defects reported by a TagValidator.

    Orphan removal matches by substring, not by recorded offset: if the
    same closing tag text appears earlier in the content, that earlier
    occurrence is the one removed.
    """

    def __init__(self, validator: Optional[TagValidator] = None):
        """
        Initialize the fixer.

        Args:
            validator: Validator to use (a default TagValidator if None)
        """
        self.validator = validator or TagValidator()

    def fix(self, content: str) -> str:
        """
        Repair content.

        Args:
            content: Mixed Markdown/HTML text

        Returns:
            Repaired text, or content itself when it is already valid
        """
        return self.repair(content).fixed

    def repair(self, content: str) -> FixResult:
        """
        Repair content and report what changed.

        Args:
            content: Mixed Markdown/HTML text

        Returns:
            FixResult with the repaired text and a re-validation verdict
        """
        validation = self.validator.validate(content)
        if validation.is_valid:
            return FixResult(
                original=content,
                fixed=content,
                validation=validation,
                validation_passed=True,
            )

        fixable = [d for d in validation.defects if d.defect_type.is_fixable]
        skipped = [d for d in validation.defects if not d.defect_type.is_fixable]

        fixed, removed = self._remove_orphans(
            content,
            [d for d in fixable if d.defect_type is DefectType.ORPHANED_TAG],
        )

        appended = [
            d.closing_tag
            for d in reversed(fixable)
            if d.defect_type is DefectType.UNCLOSED_TAG
        ]
        fixed += "".join(appended)

        if removed or appended:
            logger.info(
                f"Fixed content: removed {len(removed)} orphaned tag(s), "
                f"appended {''.join(appended) or 'nothing'}"
            )

        passed = self.validator.validate(fixed).is_valid
        if not passed:
            logger.warning(
                f"Content still invalid after fix "
                f"({len(skipped)} defect(s) not repaired)"
            )

        return FixResult(
            original=content,
            fixed=fixed,
            validation=validation,
            removed_tags=removed,
            appended_tags=appended,
            skipped_defects=skipped,
            validation_passed=passed,
        )

    def _remove_orphans(
        self, content: str, orphans: List[Defect]
    ) -> Tuple[str, List[str]]:
        """Remove the first occurrence of each orphaned tag, in recorded order."""
        removed = []
        for orphan in orphans:
            if orphan.tag in content:
                content = content.replace(orphan.tag, "", 1)
                removed.append(orphan.tag)
        return content, removed


def fix(content: str) -> str:
    """
    Repair content with a default TagFixer.

    Convenience function for one-off repairs.
    """
    return TagFixer().fix(content)
