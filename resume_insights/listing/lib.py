"""List item extraction for free-text feedback sections.

Generated feedback is inconsistent about how it formats lists. This module
detects which list encoding a text span uses and splits it into items.

Encodings are tried in priority order, first match wins:
    numbered  - "1. foo 2. bar"
    bulleted  - "- foo\\n- bar", "• foo", "* foo"
    lines     - one item per line (lines of 5 characters or fewer dropped)
    paragraph - the whole span as a single item (between 5 and 150 chars)

Example:
    >>> extract_list_items("1. Add metrics 2. Fix typos")
    ['Add metrics', 'Fix typos']
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

# =============================================================================
# Constants
# =============================================================================

NUMBERED_MARKER = re.compile(r"[0-9]+\.\s+")
BULLET_MARKER = re.compile(r"[•\-*]\s+")
LINE_BREAKS = re.compile(r"\n+")

MIN_ITEM_LENGTH = 5
MAX_PARAGRAPH_LENGTH = 150


class ListEncoding(str, Enum):
    """Delimiter convention used to separate items within a section body."""

    NUMBERED = "numbered"
    BULLETED = "bulleted"
    LINES = "lines"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class ListRule:
    """One link in the extraction chain.

    Attributes:
        encoding: Encoding this rule recognizes.
        matches: Predicate deciding whether the rule applies to the text.
        split: Transform producing items from the text.
    """

    encoding: ListEncoding
    matches: Callable[[str], bool]
    split: Callable[[str], list[str]]


# =============================================================================
# Rule Implementations
# =============================================================================


def _split_on_marker(text: str, marker: re.Pattern[str]) -> list[str]:
    """Split on a marker pattern, dropping empty fragments."""
    fragments = [part for part in marker.split(text) if part.strip()]
    return [part.strip().removesuffix("\n") for part in fragments]


def _split_numbered(text: str) -> list[str]:
    return _split_on_marker(text, NUMBERED_MARKER)


def _split_bulleted(text: str) -> list[str]:
    return _split_on_marker(text, BULLET_MARKER)


def _split_lines(text: str) -> list[str]:
    return [
        line.strip()
        for line in LINE_BREAKS.split(text)
        if len(line.strip()) > MIN_ITEM_LENGTH
    ]


def _is_short_paragraph(text: str) -> bool:
    return MIN_ITEM_LENGTH < len(text) < MAX_PARAGRAPH_LENGTH


LIST_RULES: tuple[ListRule, ...] = (
    ListRule(
        encoding=ListEncoding.NUMBERED,
        matches=lambda text: NUMBERED_MARKER.search(text) is not None,
        split=_split_numbered,
    ),
    ListRule(
        encoding=ListEncoding.BULLETED,
        matches=lambda text: BULLET_MARKER.search(text) is not None,
        split=_split_bulleted,
    ),
    ListRule(
        encoding=ListEncoding.LINES,
        matches=lambda text: True,
        split=_split_lines,
    ),
    ListRule(
        encoding=ListEncoding.PARAGRAPH,
        matches=_is_short_paragraph,
        split=lambda text: [text],
    ),
)


# =============================================================================
# Main Interface
# =============================================================================


def _run_rules(text: str) -> tuple[ListEncoding | None, list[str]]:
    """Evaluate the rule chain, returning the winning encoding and its items."""
    trimmed = text.strip()
    if not trimmed:
        return None, []

    for rule in LIST_RULES:
        if not rule.matches(trimmed):
            continue
        items = rule.split(trimmed)
        if items:
            return rule.encoding, items

    return None, []


def extract_list_items(text: str) -> list[str]:
    """Split a section body into trimmed, non-empty items.

    Args:
        text: Section body with its heading already removed.

    Returns:
        Ordered list of items. Empty when no encoding yields anything.

    Example:
        >>> extract_list_items("- Python\\n- SQL")
        ['Python', 'SQL']
        >>> extract_list_items("AWS, Docker")
        ['AWS, Docker']
    """
    _, items = _run_rules(text)
    return items


def detect_list_encoding(text: str) -> ListEncoding | None:
    """Report which encoding extract_list_items would use for text.

    Args:
        text: Section body with its heading already removed.

    Returns:
        The winning ListEncoding, or None when no rule produced items.
    """
    encoding, _ = _run_rules(text)
    return encoding


__all__ = [
    "LIST_RULES",
    "ListEncoding",
    "ListRule",
    "detect_list_encoding",
    "extract_list_items",
]
