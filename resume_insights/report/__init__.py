"""Per-resume report assembly."""

from resume_insights.report.lib import (
    NO_AREAS_IDENTIFIED,
    ResumeReport,
    areas_to_improve,
    build_report,
    feedback_pdf_filename,
)

__all__ = [
    "NO_AREAS_IDENTIFIED",
    "ResumeReport",
    "areas_to_improve",
    "build_report",
    "feedback_pdf_filename",
]
