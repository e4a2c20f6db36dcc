"""Tests for feedback module."""

import pytest

from resume_insights.feedback import (
    ANALYSIS_COMPLETE_OVERVIEW,
    FEEDBACK_UNAVAILABLE,
    KEY_AREAS_OVERVIEW,
    FeedbackParser,
    ParsedFeedback,
    find_section,
    parse_feedback,
    synthesize_overview,
)


class TestFeedbackParser:
    """Tests for FeedbackParser class."""

    @pytest.fixture
    def parser(self):
        return FeedbackParser()

    @pytest.mark.unit
    def test_numbered_suggestions(self, parser):
        """Numbered suggestions are split into items."""
        result = parser.parse("Suggestions for improvement: 1. Add metrics 2. Fix typos")
        assert result.suggestions == ["Add metrics", "Fix typos"]
        assert result.overview == "Add metrics. Fix typos."

    @pytest.mark.unit
    def test_bulleted_keywords(self, parser):
        """Bulleted keywords are split into items."""
        result = parser.parse("Overall good.\nMissing keywords:\n- Python\n- SQL")
        assert result.missing_keywords == ["Python", "SQL"]
        assert result.suggestions == []
        assert result.overview == KEY_AREAS_OVERVIEW

    @pytest.mark.unit
    def test_alternate_formatting_heading(self, parser):
        """Alternate formatting headings are used when the primary is absent."""
        result = parser.parse("Grammar Issues: Inconsistent tense usage throughout.")
        assert result.formatting_issues == ["Inconsistent tense usage throughout."]

    @pytest.mark.unit
    def test_no_sections(self, parser):
        """Text without headings produces empty sections."""
        result = parser.parse("Looks like a solid resume overall.")
        assert result.suggestions == []
        assert result.missing_keywords == []
        assert result.formatting_issues == []
        assert result.overview == ANALYSIS_COMPLETE_OVERVIEW

    @pytest.mark.unit
    def test_section_stops_at_next_heading(self, parser):
        """A section ends where the next heading starts."""
        result = parser.parse(
            "Suggestions for improvement: Improve spacing. Missing keywords: AWS, Docker"
        )
        assert result.suggestions == ["Improve spacing."]
        assert result.missing_keywords == ["AWS, Docker"]

    @pytest.mark.unit
    def test_ats_heading_terminates(self, parser):
        """ATS score headings end the preceding section."""
        result = parser.parse(
            "Missing keywords: Kubernetes, Helm\nATS Compatibility Score: 6/10"
        )
        assert result.missing_keywords == ["Kubernetes, Helm"]

    @pytest.mark.unit
    def test_headings_are_case_insensitive(self, parser):
        """Headings and terminators match regardless of case."""
        result = parser.parse(
            "SUGGESTIONS FOR IMPROVEMENT: Use active verbs everywhere\n"
            "missing KEYWORDS: Terraform"
        )
        assert result.suggestions == ["Use active verbs everywhere"]
        assert result.missing_keywords == ["Terraform"]

    @pytest.mark.unit
    def test_colon_is_optional(self, parser):
        """Headings match without a trailing colon."""
        result = parser.parse("Missing keywords\n- GraphQL\n- Redis")
        assert result.missing_keywords == ["GraphQL", "Redis"]

    @pytest.mark.unit
    def test_arabic_indic_digit_is_not_numbering(self, parser):
        """A dotted non-ASCII digit stays inside its item."""
        result = parser.parse("Missing keywords: Uses ١. dotted notation here")
        assert result.missing_keywords == ["Uses ١. dotted notation here"]

    @pytest.mark.unit
    def test_primary_formatting_heading_preferred(self, parser):
        """The primary formatting heading wins over alternates."""
        text = (
            "Grammar Issues: Passive voice in summary\n"
            "Formatting or grammar issues: Inconsistent bullet styles"
        )
        result = parser.parse(text)
        assert result.formatting_issues == ["Inconsistent bullet styles"]

    @pytest.mark.unit
    def test_earliest_alternate_heading_wins(self, parser):
        """Among alternates the earliest occurrence is used."""
        text = (
            "Formatting Issues: Margins are uneven\n"
            "Formatting and Grammar Issues: Typos in header"
        )
        result = parser.parse(text)
        assert result.formatting_issues == ["Margins are uneven"]

    @pytest.mark.unit
    def test_full_feedback(self, parser, sample_feedback):
        """A complete feedback block fills every section."""
        result = parser.parse(sample_feedback)
        assert result.suggestions == [
            "Quantify achievements with metrics",
            "Move education below experience",
            "Add a concise professional summary",
        ]
        assert result.missing_keywords == ["Python", "Docker", "CI/CD"]
        assert result.formatting_issues == [
            "Inconsistent date formats",
            "Two spelling mistakes in the skills section",
        ]
        assert result.overview == (
            "Quantify achievements with metrics. Move education below experience..."
        )

    @pytest.mark.unit
    def test_idempotent(self, parser, sample_feedback):
        """Parsing the same text twice gives equal results."""
        first = parser.parse(sample_feedback)
        second = parser.parse(sample_feedback)
        assert first == second
        assert first is not second


class TestInvalidInput:
    """Tests for input outside the string domain."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 42, 3.5, [], {}, b"bytes", "", "   \n\t"])
    def test_unavailable_result(self, value):
        """Non-string and blank input yields the unavailable result."""
        result = parse_feedback(value)
        assert result.overview == FEEDBACK_UNAVAILABLE
        assert result.suggestions == []
        assert result.missing_keywords == []
        assert result.formatting_issues == []

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            "Suggestions for improvement:",
            "Missing keywords: Formatting Issues: Grammar Issues:",
            "1. 2. 3.",
            "- - -",
            ":" * 500,
            "Suggestions for improvement" * 50,
        ],
    )
    def test_never_raises(self, value):
        """Degenerate strings still produce a well-formed result."""
        result = parse_feedback(value)
        assert isinstance(result, ParsedFeedback)
        assert result.overview

    @pytest.mark.unit
    def test_lone_surrogate_is_replaced(self):
        """Unpaired surrogates become replacement characters."""
        result = parse_feedback(
            "Suggestions for improvement: 1. Fix the \ud83d header 2. Add metrics"
        )
        assert len(result.suggestions) == 2
        assert result.suggestions[0].startswith("Fix the \ufffd")
        assert result.suggestions[0].endswith(" header")
        assert result.suggestions[1] == "Add metrics"
        assert not any("\ud800" <= ch <= "\udfff" for ch in result.overview)
        result.model_dump_json()


class TestOverviewSynthesis:
    """Tests for synthesize_overview."""

    @pytest.mark.unit
    def test_two_suggestions(self):
        """Two suggestions are joined and closed with a period."""
        overview = synthesize_overview(["Add metrics", "Fix typos"], [], [])
        assert overview == "Add metrics. Fix typos."

    @pytest.mark.unit
    def test_more_than_two_suggestions(self):
        """Extra suggestions are elided."""
        overview = synthesize_overview(
            ["Add metrics", "Fix typos", "Shorten summary"], [], []
        )
        assert overview == "Add metrics. Fix typos..."

    @pytest.mark.unit
    def test_short_overview_uses_first_suggestion(self):
        """Overviews under 20 characters fall back to the first item."""
        assert synthesize_overview(["Add metrics"], [], []) == "Add metrics"
        assert synthesize_overview(["Be brief", "Go"], [], []) == "Be brief"

    @pytest.mark.unit
    def test_single_long_suggestion(self):
        """A single long suggestion gets a closing period."""
        overview = synthesize_overview(["Quantify achievements with metrics"], [], [])
        assert overview == "Quantify achievements with metrics."

    @pytest.mark.unit
    def test_keywords_only(self):
        """Keywords without suggestions give the key-areas overview."""
        assert synthesize_overview([], ["SQL"], []) == KEY_AREAS_OVERVIEW

    @pytest.mark.unit
    def test_formatting_only(self):
        """Formatting issues without suggestions give the key-areas overview."""
        assert synthesize_overview([], [], ["Typos"]) == KEY_AREAS_OVERVIEW

    @pytest.mark.unit
    def test_nothing(self):
        """No data gives the generic overview."""
        assert synthesize_overview([], [], []) == ANALYSIS_COMPLETE_OVERVIEW


class TestFindSection:
    """Tests for find_section."""

    @pytest.mark.unit
    def test_missing_heading(self):
        """Absent headings return None."""
        assert find_section("Nothing here", ("Missing keywords",)) is None

    @pytest.mark.unit
    def test_heading_followed_by_heading(self):
        """A heading with no body before the next heading returns None."""
        text = "Missing keywords:Grammar Issues: Typos"
        assert find_section(text, ("Missing keywords",)) is None

    @pytest.mark.unit
    def test_body_runs_to_end(self):
        """Without a following heading the body runs to end of text."""
        text = "Missing keywords: Go\nRust\n"
        assert find_section(text, ("Missing keywords",)) == "Go\nRust"

    @pytest.mark.unit
    def test_first_occurrence_used(self):
        """Only the first heading occurrence is captured."""
        text = "Missing keywords: Go Missing keywords: Rust"
        assert find_section(text, ("Missing keywords",)) == "Go"


class TestParsedFeedback:
    """Tests for ParsedFeedback model."""

    @pytest.mark.unit
    def test_display_dict_uses_camel_case(self):
        """Serialized keys match the display layer."""
        parsed = ParsedFeedback(
            overview="Summary",
            suggestions=["a"],
            missing_keywords=["b"],
            formatting_issues=["c"],
        )
        assert parsed.to_display_dict() == {
            "overview": "Summary",
            "suggestions": ["a"],
            "missingKeywords": ["b"],
            "formattingIssues": ["c"],
        }

    @pytest.mark.unit
    def test_accepts_camel_case_input(self):
        """Models can be validated from display-layer dicts."""
        parsed = ParsedFeedback.model_validate(
            {"overview": "x", "missingKeywords": ["SQL"]}
        )
        assert parsed.missing_keywords == ["SQL"]
        assert parsed.formatting_issues == []

    @pytest.mark.unit
    def test_is_frozen(self):
        """Results cannot be reassigned after parsing."""
        parsed = ParsedFeedback.unavailable()
        with pytest.raises(Exception):
            parsed.overview = "changed"

    @pytest.mark.unit
    def test_is_empty(self):
        """is_empty reflects whether any section has items."""
        assert ParsedFeedback.unavailable().is_empty
        assert not ParsedFeedback(overview="x", suggestions=["y"]).is_empty
