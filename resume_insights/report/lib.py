"""Per-resume report assembly.

Combines a history record with its parsed feedback and score band into the
data behind the resume details view.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from resume_insights.feedback import ParsedFeedback, parse_feedback
from resume_insights.history import ResumeRecord
from resume_insights.score import (
    ScoreBand,
    classify_score,
    describe_score,
    score_meter_percent,
)

NO_AREAS_IDENTIFIED = (
    "No specific areas for improvement clearly parsed from feedback. Check other tabs."
)
DEFAULT_DOWNLOAD_STEM = "resume"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def areas_to_improve(parsed: ParsedFeedback) -> list[str]:
    """Summarize section counts for the overview tab.

    Args:
        parsed: Parsed feedback.

    Returns:
        One line per non-empty section, or a single placeholder line.
    """
    lines: list[str] = []
    if parsed.missing_keywords:
        lines.append(
            f"Missing Keywords: {len(parsed.missing_keywords)} key terms identified."
        )
    if parsed.formatting_issues:
        lines.append(
            f"Formatting/Grammar: {len(parsed.formatting_issues)} issues noted."
        )
    if parsed.suggestions:
        lines.append(
            f"Content Suggestions: {len(parsed.suggestions)} general suggestions provided."
        )
    return lines or [NO_AREAS_IDENTIFIED]


def feedback_pdf_filename(file_name: str | None) -> str:
    """Download name for a record's feedback PDF.

    Example:
        >>> feedback_pdf_filename("My CV (final).pdf")
        'My_CV__final_.pdf-feedback.pdf'
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", file_name) if file_name else ""
    return f"{stem or DEFAULT_DOWNLOAD_STEM}-feedback.pdf"


@dataclass
class ResumeReport:
    """Everything the details view shows for one resume.

    Attributes:
        record: Source history record.
        feedback: Parsed review feedback.
        score_band: Band of the record's ATS score.
        score_description: Verdict text for the band.
        meter_percent: Score meter fill, 0-100.
        areas: Lines for the "areas to improve" card.
        download_name: File name for the feedback PDF.
    """

    record: ResumeRecord
    feedback: ParsedFeedback
    score_band: ScoreBand = ScoreBand.NONE
    score_description: str = ""
    meter_percent: float = 0.0
    areas: list[str] = field(default_factory=list)
    download_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation with camelCase keys."""
        return {
            "id": self.record.id,
            "fileName": self.record.file_name,
            "jobRole": self.record.job_role,
            "createdAt": (
                self.record.created_at.isoformat() if self.record.created_at else None
            ),
            "atsScore": self.record.ats_score,
            "scoreBand": self.score_band.value,
            "scoreDescription": self.score_description,
            "meterPercent": self.meter_percent,
            "areasToImprove": list(self.areas),
            "downloadName": self.download_name,
            "feedback": self.feedback.to_display_dict(),
        }


def build_report(record: ResumeRecord) -> ResumeReport:
    """Build the details report for a record.

    Never raises for malformed feedback; unparseable feedback yields the
    "not available" overview.
    """
    parsed = parse_feedback(record.ai_feedback)
    return ResumeReport(
        record=record,
        feedback=parsed,
        score_band=classify_score(record.ats_score),
        score_description=describe_score(record.ats_score),
        meter_percent=score_meter_percent(record.ats_score),
        areas=areas_to_improve(parsed),
        download_name=feedback_pdf_filename(record.file_name),
    )


__all__ = [
    "NO_AREAS_IDENTIFIED",
    "ResumeReport",
    "areas_to_improve",
    "build_report",
    "feedback_pdf_filename",
]
