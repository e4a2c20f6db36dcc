"""Feedback processing module for resume review results.

Provides parsing of free-text review feedback into structured sections
for display in tabbed views.
"""

from resume_insights.feedback.lib import (
    ANALYSIS_COMPLETE_OVERVIEW,
    FEEDBACK_UNAVAILABLE,
    KEY_AREAS_OVERVIEW,
    SECTION_TABLE,
    TERMINATOR_HEADINGS,
    FeedbackParser,
    FeedbackSection,
    ParsedFeedback,
    SectionSpec,
    find_section,
    parse_feedback,
    synthesize_overview,
)

__all__ = [
    "ANALYSIS_COMPLETE_OVERVIEW",
    "FEEDBACK_UNAVAILABLE",
    "KEY_AREAS_OVERVIEW",
    "SECTION_TABLE",
    "TERMINATOR_HEADINGS",
    "FeedbackParser",
    "FeedbackSection",
    "ParsedFeedback",
    "SectionSpec",
    "find_section",
    "parse_feedback",
    "synthesize_overview",
]
