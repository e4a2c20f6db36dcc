"""ATS score classification."""

from resume_insights.score.lib import (
    SCORE_DESCRIPTIONS,
    ScoreBand,
    classify_score,
    describe_score,
    score_meter_percent,
)

__all__ = [
    "SCORE_DESCRIPTIONS",
    "ScoreBand",
    "classify_score",
    "describe_score",
    "score_meter_percent",
]
