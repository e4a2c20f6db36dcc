"""Data models for resume history.

This module defines the record shape delivered by the resume API and the
summary structures derived from a list of records.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SortKey(str, Enum):
    """Fields the history list can be sorted by."""

    DATE = "date"
    SCORE = "score"
    NAME = "name"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class HistoryFormatError(ValueError):
    """History payload does not have the expected shape."""

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class ResumeRecord(BaseModel):
    """One uploaded resume with its review results.

    Field aliases follow the API payload (``_id``, ``fileName``, ...).
    ``ai_feedback`` is kept as delivered, whatever its type; the feedback
    parser decides what to make of it.

    Attributes:
        id: Record identifier.
        file_name: Original upload name.
        job_role: Role the resume was reviewed against.
        created_at: Upload timestamp.
        ats_score: ATS compatibility score (0-10), None when not scored.
        ai_feedback: Raw feedback text from the review service.
    """

    id: str = Field(..., alias="_id", description="Record identifier")
    file_name: str = Field("", alias="fileName", description="Original upload name")
    job_role: str = Field("", alias="jobRole", description="Target job role")
    created_at: datetime | None = Field(
        None, alias="createdAt", description="Upload timestamp"
    )
    ats_score: float | None = Field(
        None, alias="atsScore", description="ATS compatibility score"
    )
    ai_feedback: Any = Field(
        None, alias="aiFeedback", description="Raw review feedback"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("file_name", "job_role", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


@dataclass
class DashboardStats:
    """Summary figures for the dashboard.

    Attributes:
        total_resumes: Number of records.
        average_score: Mean of available scores to one decimal, or "N/A".
        recent_uploads: Most recent records in delivery order.
    """

    total_resumes: int = 0
    average_score: str = "N/A"
    recent_uploads: list[ResumeRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "totalResumes": self.total_resumes,
            "averageScore": self.average_score,
            "recentUploads": [
                record.model_dump(mode="json", by_alias=True, exclude={"ai_feedback"})
                for record in self.recent_uploads
            ],
        }
