"""Feedback parsing for resume review results.

Extracts structured sections from the free-text feedback returned by the
text-generation service: improvement suggestions, missing keywords and
formatting or grammar issues. A short overview is synthesized from whatever
was recovered.

Section bodies run from just after their heading to the next known heading
(or end of text) and are split into items by the listing module.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from resume_insights.core.log import get_logger
from resume_insights.listing import extract_list_items

logger = get_logger(__name__)

# =============================================================================
# Constants
# =============================================================================

FEEDBACK_UNAVAILABLE = "Feedback not available or in an unexpected format."
KEY_AREAS_OVERVIEW = (
    "Key areas for improvement identified. Please review other tabs for details."
)
ANALYSIS_COMPLETE_OVERVIEW = "AI analysis complete. Review tabs for detailed insights."

# Joined suggestions shorter than this are replaced by the first suggestion
MIN_OVERVIEW_LENGTH = 20

# Any of these ends the section before it
TERMINATOR_HEADINGS: tuple[str, ...] = (
    "Suggestions for improvement:",
    "Missing keywords:",
    "Formatting or grammar issues:",
    "Formatting and Grammar Issues:",
    "Formatting & Grammar Issues:",
    "Formatting Issues:",
    "Grammar Issues:",
    "ATS Compatibility Score:",
    "ATS Compatibility Rating:",
)

_TERMINATOR_LOOKAHEAD = (
    "(?=" + "|".join(re.escape(h) for h in TERMINATOR_HEADINGS) + r"|\Z)"
)


class FeedbackSection(str, Enum):
    """Structured sections recovered from feedback text."""

    SUGGESTIONS = "suggestions"
    MISSING_KEYWORDS = "missing_keywords"
    FORMATTING_ISSUES = "formatting_issues"


@dataclass(frozen=True)
class SectionSpec:
    """Heading aliases for one section.

    Attributes:
        section: Output field the section fills.
        alias_groups: Groups of heading phrases, tried in order. Within a
            group the earliest occurrence in the text wins.
    """

    section: FeedbackSection
    alias_groups: tuple[tuple[str, ...], ...]


SECTION_TABLE: tuple[SectionSpec, ...] = (
    SectionSpec(
        section=FeedbackSection.SUGGESTIONS,
        alias_groups=(("Suggestions for improvement",),),
    ),
    SectionSpec(
        section=FeedbackSection.MISSING_KEYWORDS,
        alias_groups=(("Missing keywords",),),
    ),
    SectionSpec(
        section=FeedbackSection.FORMATTING_ISSUES,
        alias_groups=(
            ("Formatting or grammar issues",),
            (
                "Formatting and Grammar Issues",
                "Formatting & Grammar Issues",
                "Formatting Issues",
                "Grammar Issues",
            ),
        ),
    ),
)


# =============================================================================
# Parsed Result
# =============================================================================


class ParsedFeedback(BaseModel):
    """Structured view of one feedback block.

    Serializes with camelCase keys (``missingKeywords``,
    ``formattingIssues``) for the display layer.

    Attributes:
        overview: Short summary, never empty.
        suggestions: Improvement suggestions in source order.
        missing_keywords: Keywords the document lacks.
        formatting_issues: Formatting or grammar problems.
    """

    overview: str = Field(..., min_length=1, description="Short summary")
    suggestions: list[str] = Field(
        default_factory=list, description="Improvement suggestions"
    )
    missing_keywords: list[str] = Field(
        default_factory=list,
        alias="missingKeywords",
        description="Keywords missing from the document",
    )
    formatting_issues: list[str] = Field(
        default_factory=list,
        alias="formattingIssues",
        description="Formatting or grammar issues",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def unavailable(cls) -> "ParsedFeedback":
        """Result for input that cannot be parsed at all."""
        return cls(overview=FEEDBACK_UNAVAILABLE)

    @property
    def is_empty(self) -> bool:
        """True when no section produced any item."""
        return not (self.suggestions or self.missing_keywords or self.formatting_issues)

    def to_display_dict(self) -> dict[str, Any]:
        """Serialize with the display layer's camelCase keys."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Section Location
# =============================================================================


@lru_cache(maxsize=None)
def _section_pattern(aliases: tuple[str, ...]) -> re.Pattern[str]:
    """Compile the capture pattern for a group of heading aliases."""
    headings = "|".join(re.escape(alias) for alias in aliases)
    return re.compile(
        rf"(?:{headings}):?([\s\S]*?){_TERMINATOR_LOOKAHEAD}",
        re.IGNORECASE,
    )


def find_section(text: str, aliases: tuple[str, ...]) -> str | None:
    """Capture the body following the first of the given headings.

    Args:
        text: Full feedback text.
        aliases: Heading phrases without trailing colons.

    Returns:
        Trimmed body text, or None when no heading is found or the heading
        is immediately followed by another one.

    Example:
        >>> find_section("Missing keywords: AWS Grammar Issues: none", ("Missing keywords",))
        'AWS'
    """
    match = _section_pattern(tuple(aliases)).search(text)
    if match is None or not match.group(1):
        return None
    return match.group(1).strip()


def _section_body(text: str, spec: SectionSpec) -> str | None:
    for aliases in spec.alias_groups:
        body = find_section(text, aliases)
        if body is not None:
            return body
    return None


# =============================================================================
# Overview Synthesis
# =============================================================================


def synthesize_overview(
    suggestions: list[str],
    missing_keywords: list[str],
    formatting_issues: list[str],
) -> str:
    """Build the overview line from extracted sections.

    Args:
        suggestions: Extracted suggestions.
        missing_keywords: Extracted missing keywords.
        formatting_issues: Extracted formatting issues.

    Returns:
        Non-empty overview text.
    """
    if suggestions:
        overview = ". ".join(suggestions[:2])
        overview += "..." if len(suggestions) > 2 else "."
        if len(overview) < MIN_OVERVIEW_LENGTH:
            overview = suggestions[0]
        return overview

    if missing_keywords or formatting_issues:
        return KEY_AREAS_OVERVIEW

    return ANALYSIS_COMPLETE_OVERVIEW


# =============================================================================
# Parser
# =============================================================================


class FeedbackParser:
    """Parse free-text review feedback into structured sections.

    Parsing is total: any input, string or not, produces a ParsedFeedback.

    Example:
        >>> parser = FeedbackParser()
        >>> result = parser.parse("Suggestions for improvement: 1. Add metrics 2. Fix typos")
        >>> result.suggestions
        ['Add metrics', 'Fix typos']
    """

    def __init__(self, sections: tuple[SectionSpec, ...] = SECTION_TABLE):
        self.sections = sections

    def parse(self, feedback_text: Any) -> ParsedFeedback:
        """Parse feedback into structured sections.

        Args:
            feedback_text: Raw feedback. Non-string or blank input yields
                the "not available" result.

        Returns:
            Freshly built ParsedFeedback.
        """
        if not isinstance(feedback_text, str) or not feedback_text.strip():
            logger.debug(
                "Feedback unavailable (got %s)", type(feedback_text).__name__
            )
            return ParsedFeedback.unavailable()

        # Lone surrogates are not valid UTF-8; replace them with U+FFFD.
        feedback_text = feedback_text.encode("utf-8", "surrogatepass").decode(
            "utf-8", "replace"
        )

        extracted: dict[FeedbackSection, list[str]] = {
            section: [] for section in FeedbackSection
        }
        for spec in self.sections:
            body = _section_body(feedback_text, spec)
            if body is not None:
                extracted[spec.section] = extract_list_items(body)

        suggestions = extracted[FeedbackSection.SUGGESTIONS]
        missing_keywords = extracted[FeedbackSection.MISSING_KEYWORDS]
        formatting_issues = extracted[FeedbackSection.FORMATTING_ISSUES]

        logger.debug(
            "Parsed feedback: %d suggestions, %d keywords, %d formatting issues",
            len(suggestions),
            len(missing_keywords),
            len(formatting_issues),
        )

        return ParsedFeedback(
            overview=synthesize_overview(
                suggestions, missing_keywords, formatting_issues
            ),
            suggestions=suggestions,
            missing_keywords=missing_keywords,
            formatting_issues=formatting_issues,
        )


def parse_feedback(feedback_text: Any) -> ParsedFeedback:
    """Parse feedback with the default section table.

    Args:
        feedback_text: Raw feedback, possibly missing or not a string.

    Returns:
        ParsedFeedback for the input.
    """
    return FeedbackParser().parse(feedback_text)


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
