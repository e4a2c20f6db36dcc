"""List item extraction for feedback section bodies."""

from resume_insights.listing.lib import (
    LIST_RULES,
    ListEncoding,
    ListRule,
    detect_list_encoding,
    extract_list_items,
)

__all__ = [
    "LIST_RULES",
    "ListEncoding",
    "ListRule",
    "detect_list_encoding",
    "extract_list_items",
]
