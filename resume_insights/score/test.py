"""Tests for score module."""

import pytest

from resume_insights.score import (
    SCORE_DESCRIPTIONS,
    ScoreBand,
    classify_score,
    describe_score,
    score_meter_percent,
)


@pytest.fixture(autouse=True)
def default_thresholds(monkeypatch):
    for name in ("ATS_HIGH_SCORE", "ATS_MEDIUM_SCORE", "ATS_MAX_SCORE"):
        monkeypatch.delenv(name, raising=False)


class TestClassifyScore:
    """Tests for classify_score."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "score, band",
        [
            (10, ScoreBand.HIGH),
            (7, ScoreBand.HIGH),
            (6.9, ScoreBand.MEDIUM),
            (5, ScoreBand.MEDIUM),
            (4.99, ScoreBand.LOW),
            (0, ScoreBand.LOW),
        ],
    )
    def test_default_thresholds(self, score, band):
        """Band boundaries are inclusive lower bounds."""
        assert classify_score(score) == band

    @pytest.mark.unit
    @pytest.mark.parametrize("score", [None, "7", True, [7]])
    def test_missing_or_non_numeric(self, score):
        """Anything that is not a number has no band."""
        assert classify_score(score) == ScoreBand.NONE

    @pytest.mark.unit
    def test_explicit_thresholds(self):
        """Explicit thresholds override configuration."""
        assert classify_score(8, high=9, medium=8) == ScoreBand.MEDIUM

    @pytest.mark.unit
    def test_thresholds_from_environment(self, monkeypatch):
        """Configured thresholds are used by default."""
        monkeypatch.setenv("ATS_HIGH_SCORE", "9")
        assert classify_score(8) == ScoreBand.MEDIUM


class TestDescribeScore:
    """Tests for describe_score."""

    @pytest.mark.unit
    def test_every_band_described(self):
        """Each band has a description."""
        assert set(SCORE_DESCRIPTIONS) == set(ScoreBand)

    @pytest.mark.unit
    def test_descriptions(self):
        """Descriptions follow the band."""
        assert describe_score(8) == SCORE_DESCRIPTIONS[ScoreBand.HIGH]
        assert "moderate" in describe_score(6)
        assert "significant" in describe_score(2)
        assert describe_score(None).startswith("ATS score not available")


class TestScoreMeterPercent:
    """Tests for score_meter_percent."""

    @pytest.mark.unit
    def test_percent_of_scale(self):
        """Scores map linearly onto the scale."""
        assert score_meter_percent(7) == pytest.approx(70.0)
        assert score_meter_percent(5, max_score=20) == pytest.approx(25.0)

    @pytest.mark.unit
    def test_clamped(self):
        """Out-of-range scores are clamped."""
        assert score_meter_percent(12) == 100.0
        assert score_meter_percent(-1) == 0.0

    @pytest.mark.unit
    def test_no_score(self):
        """Missing scores give an empty meter."""
        assert score_meter_percent(None) == 0.0
        assert score_meter_percent(5, max_score=0) == 0.0
