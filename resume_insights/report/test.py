"""Tests for report module."""

import json

import pytest

from resume_insights.feedback import FEEDBACK_UNAVAILABLE, ParsedFeedback
from resume_insights.history import ResumeRecord, load_history
from resume_insights.report import (
    NO_AREAS_IDENTIFIED,
    areas_to_improve,
    build_report,
    feedback_pdf_filename,
)
from resume_insights.score import ScoreBand


@pytest.fixture(autouse=True)
def default_thresholds(monkeypatch):
    for name in ("ATS_HIGH_SCORE", "ATS_MEDIUM_SCORE", "ATS_MAX_SCORE"):
        monkeypatch.delenv(name, raising=False)


class TestAreasToImprove:
    """Tests for areas_to_improve."""

    @pytest.mark.unit
    def test_all_sections(self):
        """Each populated section contributes a line, keywords first."""
        parsed = ParsedFeedback(
            overview="x",
            suggestions=["a", "b", "c"],
            missing_keywords=["SQL", "AWS"],
            formatting_issues=["Typos"],
        )
        assert areas_to_improve(parsed) == [
            "Missing Keywords: 2 key terms identified.",
            "Formatting/Grammar: 1 issues noted.",
            "Content Suggestions: 3 general suggestions provided.",
        ]

    @pytest.mark.unit
    def test_nothing_parsed(self):
        """Empty feedback gives the placeholder line."""
        assert areas_to_improve(ParsedFeedback.unavailable()) == [NO_AREAS_IDENTIFIED]


class TestFeedbackPdfFilename:
    """Tests for feedback_pdf_filename."""

    @pytest.mark.unit
    def test_safe_name_kept(self):
        assert feedback_pdf_filename("backend_cv.pdf") == "backend_cv.pdf-feedback.pdf"

    @pytest.mark.unit
    def test_unsafe_characters_replaced(self):
        assert feedback_pdf_filename("Jane Doe/CV#2.pdf") == "Jane_Doe_CV_2.pdf-feedback.pdf"

    @pytest.mark.unit
    def test_case_folding_letters_replaced(self):
        """Letters that only case-fold to ASCII are still replaced."""
        name = feedback_pdf_filename("\u212aelvin_\u017fcan.pdf")
        assert name == "_elvin__can.pdf-feedback.pdf"
        assert name.isascii()

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", None])
    def test_missing_name(self, name):
        assert feedback_pdf_filename(name) == "resume-feedback.pdf"


class TestBuildReport:
    """Tests for build_report."""

    @pytest.mark.unit
    def test_full_report(self, history_payload):
        """A fully reviewed record fills every part of the report."""
        record = load_history(history_payload)[0]
        report = build_report(record)
        assert report.score_band == ScoreBand.HIGH
        assert report.meter_percent == pytest.approx(80.0)
        assert report.feedback.missing_keywords == ["Python", "Docker", "CI/CD"]
        assert report.areas[0] == "Missing Keywords: 3 key terms identified."
        assert report.download_name == "backend_cv.pdf-feedback.pdf"

    @pytest.mark.unit
    def test_record_without_feedback(self):
        """Missing feedback and score degrade gracefully."""
        report = build_report(ResumeRecord(id="x"))
        assert report.feedback.overview == FEEDBACK_UNAVAILABLE
        assert report.score_band == ScoreBand.NONE
        assert report.meter_percent == 0.0
        assert report.areas == [NO_AREAS_IDENTIFIED]

    @pytest.mark.unit
    def test_non_string_feedback(self):
        """Non-string feedback is treated as unavailable."""
        record = ResumeRecord.model_validate({"_id": "x", "aiFeedback": 42})
        assert build_report(record).feedback.overview == FEEDBACK_UNAVAILABLE

    @pytest.mark.unit
    def test_to_dict_is_json_ready(self, history_payload):
        """Report dicts serialize to JSON with camelCase keys."""
        record = load_history(history_payload)[1]
        data = build_report(record).to_dict()
        assert data["scoreBand"] == "medium"
        assert data["feedback"]["formattingIssues"] == [
            "Inconsistent tense usage throughout."
        ]
        json.dumps(data)
