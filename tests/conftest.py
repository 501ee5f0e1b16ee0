"""
Pytest configuration and shared fixtures for tag_fixer tests.
"""

import pytest

from tag_fixer.fixers import TagFixer
from tag_fixer.validators import TagValidator


@pytest.fixture
def validator() -> TagValidator:
    """Validator with the default void elements."""
    return TagValidator()


@pytest.fixture
def fixer(validator: TagValidator) -> TagFixer:
    """Fixer backed by the default validator."""
    return TagFixer(validator)
