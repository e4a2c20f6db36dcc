"""resume-insights: structured views over AI resume review feedback."""

from resume_insights.feedback import FeedbackParser, ParsedFeedback, parse_feedback
from resume_insights.history import (
    HistoryFormatError,
    ResumeRecord,
    dashboard_stats,
    load_history,
)
from resume_insights.listing import extract_list_items
from resume_insights.report import ResumeReport, build_report
from resume_insights.score import ScoreBand, classify_score

__all__ = [
    # Feedback
    "FeedbackParser",
    "ParsedFeedback",
    "parse_feedback",
    "extract_list_items",
    # History
    "ResumeRecord",
    "HistoryFormatError",
    "load_history",
    "dashboard_stats",
    # Reports
    "ResumeReport",
    "build_report",
    # Scores
    "ScoreBand",
    "classify_score",
]
