"""Tests for history module."""

import json

import pytest

from resume_insights.history import (
    DashboardStats,
    HistoryFormatError,
    ResumeRecord,
    SortKey,
    SortOrder,
    dashboard_stats,
    find_record,
    load_history,
    load_history_file,
    search_records,
    sort_records,
)


@pytest.fixture
def records(history_payload):
    return load_history(history_payload)


class TestResumeRecord:
    """Tests for ResumeRecord model."""

    @pytest.mark.unit
    def test_reads_api_aliases(self):
        """API field names map onto record attributes."""
        record = ResumeRecord.model_validate(
            {
                "_id": "abc",
                "fileName": "cv.pdf",
                "jobRole": "Data Engineer",
                "createdAt": "2026-03-01T09:30:00.000Z",
                "atsScore": 6,
                "aiFeedback": "Missing keywords: Spark",
            }
        )
        assert record.id == "abc"
        assert record.file_name == "cv.pdf"
        assert record.job_role == "Data Engineer"
        assert record.created_at.year == 2026
        assert record.ats_score == 6.0
        assert record.ai_feedback == "Missing keywords: Spark"

    @pytest.mark.unit
    def test_tolerates_missing_optional_fields(self):
        """Only the id is required."""
        record = ResumeRecord.model_validate({"_id": "x", "fileName": None})
        assert record.file_name == ""
        assert record.job_role == ""
        assert record.ats_score is None
        assert record.ai_feedback is None

    @pytest.mark.unit
    def test_keeps_non_string_feedback(self):
        """Feedback of any type is accepted as delivered."""
        record = ResumeRecord.model_validate({"_id": "x", "aiFeedback": {"score": 3}})
        assert record.ai_feedback == {"score": 3}


class TestLoadHistory:
    """Tests for load_history and load_history_file."""

    @pytest.mark.unit
    def test_envelope(self, history_payload):
        """The API envelope is unwrapped."""
        loaded = load_history(history_payload)
        assert [r.id for r in loaded] == ["r3", "r2", "r1", "r0"]

    @pytest.mark.unit
    def test_bare_list(self, history_payload):
        """A bare list of records is accepted."""
        assert len(load_history(history_payload["history"])) == 4

    @pytest.mark.unit
    @pytest.mark.parametrize("payload", [None, "history", {"items": []}, {"history": 3}])
    def test_wrong_shape(self, payload):
        """Payloads without a record list are rejected."""
        with pytest.raises(HistoryFormatError):
            load_history(payload)

    @pytest.mark.unit
    def test_invalid_record_reports_index(self):
        """The failing record index is reported."""
        with pytest.raises(HistoryFormatError) as exc_info:
            load_history({"history": [{"_id": "ok"}, {"fileName": "no id"}]})
        assert exc_info.value.index == 1
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.integration
    def test_load_file(self, tmp_path, history_payload):
        """History exports are read from JSON files."""
        path = tmp_path / "history.json"
        path.write_text(json.dumps(history_payload), encoding="utf-8")
        assert len(load_history_file(path)) == 4

    @pytest.mark.integration
    def test_load_file_bad_json(self, tmp_path):
        """Invalid JSON is reported as a format error."""
        path = tmp_path / "history.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(HistoryFormatError):
            load_history_file(path)

    @pytest.mark.integration
    def test_load_file_not_utf8(self, tmp_path):
        """Latin-1 bytes are reported as a format error."""
        path = tmp_path / "history.json"
        path.write_bytes(b'{"history": [{"_id": "r1", "jobRole": "Caf\xe9"}]}')
        with pytest.raises(HistoryFormatError, match="not valid UTF-8"):
            load_history_file(path)


class TestFindRecord:
    """Tests for find_record."""

    @pytest.mark.unit
    def test_found(self, records):
        assert find_record(records, "r2").file_name == "frontend_cv.pdf"

    @pytest.mark.unit
    def test_missing(self, records):
        assert find_record(records, "nope") is None


class TestDashboardStats:
    """Tests for dashboard_stats."""

    @pytest.mark.unit
    def test_stats(self, records, monkeypatch):
        """Totals, average of scored records and recent uploads."""
        monkeypatch.delenv("DASHBOARD_RECENT_LIMIT", raising=False)
        stats = dashboard_stats(records)
        assert stats.total_resumes == 4
        # (8 + 5.5 + 3) / 3
        assert stats.average_score == "5.5"
        assert [r.id for r in stats.recent_uploads] == ["r3", "r2", "r1"]

    @pytest.mark.unit
    def test_no_scores(self):
        """Without any score the average is N/A."""
        stats = dashboard_stats([ResumeRecord(id="a"), ResumeRecord(id="b")])
        assert stats.average_score == "N/A"
        assert stats.total_resumes == 2

    @pytest.mark.unit
    def test_empty(self):
        """Empty history yields zeroed stats."""
        assert dashboard_stats([]) == DashboardStats()

    @pytest.mark.unit
    def test_recent_limit(self, records):
        """The recent upload count is configurable."""
        assert len(dashboard_stats(records, recent_limit=1).recent_uploads) == 1
        assert dashboard_stats(records, recent_limit=0).recent_uploads == []

    @pytest.mark.unit
    def test_to_dict(self, records):
        """Serialized stats use the API's camelCase keys."""
        data = dashboard_stats(records, recent_limit=1).to_dict()
        assert data["totalResumes"] == 4
        assert data["recentUploads"][0]["_id"] == "r3"
        assert "aiFeedback" not in data["recentUploads"][0]
        json.dumps(data)


class TestSearchRecords:
    """Tests for search_records."""

    @pytest.mark.unit
    def test_matches_file_name(self, records):
        assert [r.id for r in search_records(records, "FRONTEND")] == ["r2"]

    @pytest.mark.unit
    def test_matches_job_role(self, records):
        assert [r.id for r in search_records(records, "engineer")] == ["r3", "r1"]

    @pytest.mark.unit
    def test_empty_term_keeps_all(self, records):
        assert len(search_records(records, "")) == 4


class TestSortRecords:
    """Tests for sort_records."""

    @pytest.mark.unit
    def test_date_desc_default(self, records):
        """Newest first by default."""
        assert [r.id for r in sort_records(records)] == ["r3", "r2", "r1", "r0"]

    @pytest.mark.unit
    def test_date_asc(self, records):
        assert [r.id for r in sort_records(records, "date", "asc")] == [
            "r0",
            "r1",
            "r2",
            "r3",
        ]

    @pytest.mark.unit
    def test_score_missing_ranks_lowest(self, records):
        """Unscored records sort below every scored one."""
        ordered = sort_records(records, SortKey.SCORE, SortOrder.ASC)
        assert [r.id for r in ordered] == ["r0", "r1", "r2", "r3"]

    @pytest.mark.unit
    def test_name(self, records):
        """Names sort case-insensitively."""
        ordered = sort_records(records, SortKey.NAME, SortOrder.ASC)
        assert [r.file_name for r in ordered] == [
            "backend_cv.pdf",
            "Data_Resume.docx",
            "frontend_cv.pdf",
            "untitled.pdf",
        ]

    @pytest.mark.unit
    def test_unknown_key(self, records):
        with pytest.raises(ValueError):
            sort_records(records, "size")
