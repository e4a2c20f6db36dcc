"""Tests for listing module."""

import pytest

from resume_insights.listing import (
    LIST_RULES,
    ListEncoding,
    detect_list_encoding,
    extract_list_items,
)


class TestNumberedLists:
    """Tests for numbered list extraction."""

    @pytest.mark.unit
    def test_inline_numbered(self):
        """Numbered items on a single line are split."""
        items = extract_list_items("1. Add metrics 2. Fix typos")
        assert items == ["Add metrics", "Fix typos"]

    @pytest.mark.unit
    def test_multiline_numbered(self):
        """Numbered items on separate lines are trimmed."""
        text = "1. Quantify achievements\n2. Shorten the summary\n3. Add a skills section\n"
        assert extract_list_items(text) == [
            "Quantify achievements",
            "Shorten the summary",
            "Add a skills section",
        ]

    @pytest.mark.unit
    def test_multi_digit_numbers(self):
        """Numbers with more than one digit are recognized."""
        items = extract_list_items("9. Ninth item 10. Tenth item 11. Eleventh item")
        assert items == ["Ninth item", "Tenth item", "Eleventh item"]

    @pytest.mark.unit
    def test_text_before_first_number_is_kept(self):
        """A lead-in before the first number becomes its own item."""
        items = extract_list_items("Consider: 1. Bold headings 2. Consistent dates")
        assert items == ["Consider:", "Bold headings", "Consistent dates"]

    @pytest.mark.unit
    def test_numbered_wins_over_bullets(self):
        """Numbered markers take precedence over bullet markers."""
        text = "1. Use - sparingly 2. Keep * for emphasis"
        assert detect_list_encoding(text) == ListEncoding.NUMBERED
        assert extract_list_items(text) == ["Use - sparingly", "Keep * for emphasis"]

    @pytest.mark.unit
    @pytest.mark.parametrize("digit", ["١", "٣", "३", "１"])
    def test_non_ascii_digits_are_not_markers(self, digit):
        """Only ASCII digits start a numbered item."""
        text = f"Uses {digit}. dotted notation here"
        assert detect_list_encoding(text) == ListEncoding.LINES
        assert extract_list_items(text) == [text]


class TestBulletedLists:
    """Tests for bulleted list extraction."""

    @pytest.mark.unit
    @pytest.mark.parametrize("marker", ["-", "*", "•"])
    def test_each_marker(self, marker):
        """Each bullet marker splits items."""
        text = f"{marker} Python\n{marker} SQL"
        assert extract_list_items(text) == ["Python", "SQL"]

    @pytest.mark.unit
    def test_mixed_markers(self):
        """Different markers in one list are all recognized."""
        text = "• Docker\n- Kubernetes\n* Terraform"
        assert extract_list_items(text) == ["Docker", "Kubernetes", "Terraform"]

    @pytest.mark.unit
    def test_hyphen_inside_item_splits(self):
        """A spaced hyphen inside an item is treated as a marker."""
        assert extract_list_items("- Python - SQL") == ["Python", "SQL"]

    @pytest.mark.unit
    def test_hyphenated_word_does_not_split(self):
        """A hyphen without trailing whitespace is not a marker."""
        assert detect_list_encoding("Follow-up on e-mail formatting") == ListEncoding.LINES


class TestLineSeparatedLists:
    """Tests for newline separated extraction."""

    @pytest.mark.unit
    def test_lines_become_items(self):
        """Each sufficiently long line is an item."""
        text = "Tighten the summary\n\nRemove the photo\nUse one font"
        assert extract_list_items(text) == [
            "Tighten the summary",
            "Remove the photo",
            "Use one font",
        ]

    @pytest.mark.unit
    def test_short_lines_are_dropped(self):
        """Lines of five characters or fewer are discarded."""
        text = "Header\nok\nReorder the experience section"
        assert extract_list_items(text) == ["Header", "Reorder the experience section"]

    @pytest.mark.unit
    def test_single_line_uses_line_rule(self):
        """A single long-enough line is caught by the line rule."""
        assert detect_list_encoding("AWS, Docker") == ListEncoding.LINES
        assert extract_list_items("AWS, Docker") == ["AWS, Docker"]


class TestParagraphFallback:
    """Tests for the single paragraph fallback."""

    @pytest.mark.unit
    def test_short_lines_joined_as_paragraph(self):
        """Text whose lines are all short falls back to one item."""
        text = "Go\nJava"
        assert detect_list_encoding(text) == ListEncoding.PARAGRAPH
        assert extract_list_items(text) == ["Go\nJava"]

    @pytest.mark.unit
    def test_too_short(self):
        """Text of five characters or fewer yields nothing."""
        assert extract_list_items("SQL") == []
        assert detect_list_encoding("SQL") is None

    @pytest.mark.unit
    def test_upper_bound_is_exclusive(self):
        """Paragraph rule requires fewer than 150 characters."""
        long_text = "\n".join(["abcd"] * 31)
        assert len(long_text) >= 150
        assert extract_list_items(long_text) == []


class TestEdgeCases:
    """Tests for degenerate inputs."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
    def test_blank_input(self, text):
        """Blank input yields an empty list."""
        assert extract_list_items(text) == []

    @pytest.mark.unit
    def test_surrounding_whitespace_is_trimmed(self):
        """Whitespace around the span does not affect classification."""
        assert extract_list_items("\n\n  1. Add metrics 2. Fix typos  \n") == [
            "Add metrics",
            "Fix typos",
        ]

    @pytest.mark.unit
    def test_items_are_non_empty(self):
        """Marker-only input produces no empty items."""
        items = extract_list_items("1. 2. 3. Real item")
        assert all(items)
        assert items[-1] == "Real item"

    @pytest.mark.unit
    def test_rule_order(self):
        """Rules are evaluated in priority order."""
        assert [rule.encoding for rule in LIST_RULES] == [
            ListEncoding.NUMBERED,
            ListEncoding.BULLETED,
            ListEncoding.LINES,
            ListEncoding.PARAGRAPH,
        ]
