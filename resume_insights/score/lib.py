"""ATS compatibility score bands.

Scores are on a 0-10 scale. Bands drive the colour and description shown
next to a resume; a missing score gets its own band.
"""

from enum import Enum
from numbers import Real
from typing import Any

from resume_insights.config import get_max_score, get_score_thresholds


class ScoreBand(str, Enum):
    """Classification of an ATS score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


SCORE_DESCRIPTIONS: dict[ScoreBand, str] = {
    ScoreBand.HIGH: "Your resume appears well-optimized for ATS systems.",
    ScoreBand.MEDIUM: (
        "Your resume has moderate ATS compatibility. Consider the suggestions."
    ),
    ScoreBand.LOW: (
        "Your resume may need significant improvements for optimal ATS compatibility."
    ),
    ScoreBand.NONE: "ATS score not available. Feedback below may still be helpful.",
}


def _as_score(value: Any) -> float | None:
    # bool is a Real subclass but never a score
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


def classify_score(
    score: Any,
    high: float | None = None,
    medium: float | None = None,
) -> ScoreBand:
    """Classify a score into a band.

    Args:
        score: ATS score, or None when the record has none.
        high: Minimum score for HIGH. Defaults to configuration.
        medium: Minimum score for MEDIUM. Defaults to configuration.

    Returns:
        ScoreBand for the score. Non-numeric input maps to NONE.

    Example:
        >>> classify_score(7)
        <ScoreBand.HIGH: 'high'>
        >>> classify_score(None)
        <ScoreBand.NONE: 'none'>
    """
    value = _as_score(score)
    if value is None:
        return ScoreBand.NONE

    default_high, default_medium = get_score_thresholds()
    high = default_high if high is None else high
    medium = default_medium if medium is None else medium

    if value >= high:
        return ScoreBand.HIGH
    if value >= medium:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


def describe_score(score: Any) -> str:
    """Human-readable verdict for a score."""
    return SCORE_DESCRIPTIONS[classify_score(score)]


def score_meter_percent(score: Any, max_score: float | None = None) -> float:
    """Fill percentage for a score meter, clamped to 0-100.

    Args:
        score: ATS score, or None.
        max_score: Top of the scale. Defaults to configuration.

    Returns:
        Percentage of the scale covered by the score; 0.0 without a score.
    """
    value = _as_score(score)
    scale = get_max_score() if max_score is None else max_score
    if value is None or scale <= 0:
        return 0.0
    return max(0.0, min(100.0, value / scale * 100))


__all__ = [
    "SCORE_DESCRIPTIONS",
    "ScoreBand",
    "classify_score",
    "describe_score",
    "score_meter_percent",
]
