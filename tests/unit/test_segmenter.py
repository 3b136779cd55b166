"""Unit tests for heading-based text segmentation."""

import pytest

from contract_compare.models.enums import MarkerStyle
from contract_compare.parsers import NoSectionsFoundError, TextSegmenter, extract_title


class TestHeadingDetection:
    """Tests for line-initial heading markers."""

    @pytest.mark.parametrize(
        "line, style, marker",
        [
            ("1. Payment Terms", MarkerStyle.DECIMAL, "1."),
            ("1.1 Fees", MarkerStyle.DECIMAL, "1.1"),
            ("2.3.4. Late Charges", MarkerStyle.DECIMAL, "2.3.4."),
            ("4 Termination", MarkerStyle.DECIMAL, "4"),
            ("10 Limitation of Liability", MarkerStyle.DECIMAL, "10"),
            ("A. Definitions", MarkerStyle.CAPITAL_LETTER, "A."),
            ("B.2 Service Credits", MarkerStyle.LETTERED_SUBSECTION, "B.2"),
            ("(a) the first obligation", MarkerStyle.PAREN_LETTER, "(a)"),
            ("(iv) the fourth obligation", MarkerStyle.PAREN_ROMAN, "(iv)"),
            ("(IV) the fourth obligation", MarkerStyle.PAREN_ROMAN, "(IV)"),
            ("IV. Remedies", MarkerStyle.ROMAN, "IV."),
            ("   3. Indented Heading", MarkerStyle.DECIMAL, "3."),
        ],
    )
    def test_heading_markers(self, line, style, marker):
        """Test each supported marker style is recognised."""
        assert TextSegmenter().match_heading(line) == (style, marker)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "Payment is due within 30 days.",
            "30 days after the invoice date",
            "30 (thirty) days written notice.",
            "12 Months after delivery",
            "2024 Annual Review",
            "1.5million in fees",
            "The client may terminate (a) for cause",
        ],
    )
    def test_non_heading_lines(self, line):
        """Test body lines are not mistaken for headings."""
        assert TextSegmenter().match_heading(line) is None

    def test_single_letter_prefers_capital_letter_rule(self):
        """Test "(i)" and "I." resolve by rule order."""
        segmenter = TextSegmenter()
        assert segmenter.match_heading("(i) first")[0] == MarkerStyle.PAREN_LETTER
        assert segmenter.match_heading("I. Introduction")[0] == MarkerStyle.CAPITAL_LETTER


class TestSegmentation:
    """Tests for the section accumulator."""

    def test_single_section(self):
        """Test a heading and its body form one section."""
        text = "1. Payment Terms\nPayment due within 30 days of invoice date."

        sections = TextSegmenter().segment(text)

        assert len(sections) == 1
        section = sections[0]
        assert section.number == "1."
        assert section.title == "Payment Terms"
        assert section.heading == "1. Payment Terms"
        assert section.content == "Payment due within 30 days of invoice date."
        assert section.order == 0
        assert section.text == text

    def test_preamble_is_discarded(self):
        """Test lines before the first heading belong to no section."""
        text = (
            "MASTER SERVICES AGREEMENT\n"
            "This agreement is made between the parties.\n"
            "1. Scope\n"
            "The vendor provides hosting services."
        )

        sections = TextSegmenter().segment(text)

        assert len(sections) == 1
        assert "MASTER SERVICES" not in sections[0].text

    def test_sections_in_document_order(self):
        """Test sections keep document order and sequential order indexes."""
        text = (
            "1. Payment Terms\nFees are payable monthly.\n"
            "2. Delivery\nGoods ship within 5 days.\n"
            "3. Governing Law\nThe laws of England apply."
        )

        sections = TextSegmenter().segment(text)

        assert [s.title for s in sections] == ["Payment Terms", "Delivery", "Governing Law"]
        assert [s.order for s in sections] == [0, 1, 2]

    def test_heading_followed_by_heading_has_empty_content(self):
        """Test a heading immediately followed by another yields empty content."""
        sections = TextSegmenter().segment("1. Definitions\n2. Payment\nFees apply.")

        assert sections[0].content == ""
        assert sections[0].title == "Definitions"
        assert sections[1].content == "Fees apply."

    def test_wrapped_numeric_line_stays_in_body(self):
        """Test a body line starting with a number does not open a section."""
        text = "1. Termination\nEither party may terminate on\n30 (thirty) days written notice."

        sections = TextSegmenter().segment(text)

        assert len(sections) == 1
        assert sections[0].number == "1."
        assert sections[0].content == (
            "Either party may terminate on\n30 (thirty) days written notice."
        )

    def test_multiline_body(self):
        """Test body lines accumulate until the next heading."""
        text = "1. Payment\nLine one.\n\nLine two.\n2. Delivery\nShip it."

        sections = TextSegmenter().segment(text)

        assert sections[0].content == "Line one.\n\nLine two."

    def test_no_headings_raises(self):
        """Test text without any heading is rejected."""
        with pytest.raises(NoSectionsFoundError) as exc_info:
            TextSegmenter().segment("Just a paragraph of text with no numbering.")

        assert "No sections found" in exc_info.value.message

    def test_empty_text_raises(self):
        """Test empty text is rejected."""
        with pytest.raises(NoSectionsFoundError):
            TextSegmenter().segment("")

    def test_segmentation_is_deterministic(self):
        """Test segmenting the same text twice gives equal sections."""
        text = "A. Scope\nServices.\nB. Fees\nPayment monthly.\n(a) late fee applies"
        segmenter = TextSegmenter()

        assert segmenter.segment(text) == segmenter.segment(text)


class TestTitleExtraction:
    """Tests for section title selection."""

    def test_title_from_body_when_heading_has_no_text(self):
        """Test a bare marker takes its title from the body."""
        sections = TextSegmenter().segment("1.\nPAYMENT SCHEDULE\nFees are due monthly.")

        assert sections[0].title == "PAYMENT SCHEDULE"

    def test_first_non_empty_line_fallback(self):
        """Test lowercase lines fall back to the first non-empty line."""
        assert extract_title(["", "  the payment", "more text"]) == "the payment"

    def test_long_line_uses_casing_pattern(self):
        """Test long lines yield the leading Title Case run."""
        long_line = "Payment " + "x" * 120

        assert extract_title([long_line]) == "Payment"

    def test_untitled_section(self):
        """Test no usable line gives the untitled placeholder."""
        assert extract_title(["", "   "]) == "Untitled Section"
