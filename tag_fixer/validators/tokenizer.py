"""
Tokenizer - Single-pass scan for tag-like substrings.

A token is "<", an optional "/", a letter, any run of non-">" characters,
then ">". Markdown syntax never matches this pattern and is skipped
implicitly. There is no Markdown-aware exclusion: a literal <tag> inside
a fenced code block is still scanned as a tag.
"""

import re
from typing import Iterable, Iterator, List, Optional

from ..contracts.validation import TagToken
from ..core.config import settings


TAG_PATTERN = re.compile(r"</?[a-zA-Z][^>]*>")

# Name runs from the first letter up to whitespace, "/" or ">"
TAG_NAME_PATTERN = re.compile(r"</?([a-zA-Z][^\s/>]*)")


def parse_tag(raw: str, position: int, void_elements: Iterable[str]) -> TagToken:
    """
    Build a TagToken from the raw text of a matched tag.

    Args:
        raw: Tag text, e.g. '<p class="x">'
        position: Start offset of the tag in the source
        void_elements: Lower-case names treated as self-closing

    Returns:
        TagToken with name, closing and self-closing flags computed
    """
    name = TAG_NAME_PATTERN.match(raw).group(1).lower()
    return TagToken(
        raw=raw,
        position=position,
        name=name,
        is_closing=raw.startswith("</"),
        is_self_closing=raw.endswith("/>") or name in void_elements,
    )


def iter_tags(
    content: str, void_elements: Optional[Iterable[str]] = None
) -> Iterator[TagToken]:
    """
    Yield tag tokens from content in left-to-right order.

    Args:
        content: Mixed Markdown/HTML text
        void_elements: Names treated as self-closing (defaults to settings)

    Yields:
        TagToken for every tag-like substring
    """
    if void_elements is None:
        void_elements = settings.VOID_ELEMENTS
    void_set = frozenset(name.lower() for name in void_elements)

    for match in TAG_PATTERN.finditer(content):
        yield parse_tag(match.group(0), match.start(), void_set)


def tokenize(
    content: str, void_elements: Optional[Iterable[str]] = None
) -> List[TagToken]:
    """Return all tag tokens in content as a list."""
    return list(iter_tags(content, void_elements))
