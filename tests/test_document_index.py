"""Tests for DocumentIndex and Document.

Validates line start bookkeeping, line:column lookup and line extraction.
"""

from __future__ import annotations

import pytest

from cursorfixture.text import Document, DocumentIndex

# ============================================================================
# LINE OFFSETS
# ============================================================================


class TestDocumentIndexOffsets:
    """Test line start offset computation."""

    def test_empty_source_has_one_line(self) -> None:
        """Empty source still has a single (empty) line."""
        index = DocumentIndex("")

        assert index.line_count == 1
        assert index.offsets == (0,)

    def test_offsets_follow_newlines(self) -> None:
        """Each newline opens a line at the next offset."""
        index = DocumentIndex("ab\ncd\n\nef")

        assert index.offsets == (0, 3, 6, 7)
        assert index.line_count == 4

    def test_trailing_newline_opens_empty_line(self) -> None:
        """A trailing newline counts as the start of an empty last line."""
        index = DocumentIndex("ab\n")

        assert index.line_count == 2
        assert index.line_start(2) == 3
        assert index.line_end(2) == 3

    def test_crlf_splits_on_lf(self) -> None:
        """CRLF line endings are split on the LF."""
        index = DocumentIndex("ab\r\ncd")

        assert index.offsets == (0, 4)
        assert index.line_end(1) == 3

    def test_line_start_out_of_range(self) -> None:
        """line_start rejects lines outside 1..line_count."""
        index = DocumentIndex("a\nb")

        with pytest.raises(ValueError, match="out of range"):
            index.line_start(0)
        with pytest.raises(ValueError, match="out of range"):
            index.line_start(3)


# ============================================================================
# LINE:COLUMN LOOKUP
# ============================================================================


class TestDocumentIndexLookup:
    """Test get_line_col()."""

    @pytest.mark.parametrize(
        ("pos", "expected"),
        [
            (0, (1, 1)),
            (2, (1, 3)),  # The newline itself belongs to line 1
            (3, (2, 1)),
            (5, (2, 3)),  # End of document
        ],
    )
    def test_positions(self, pos: int, expected: tuple[int, int]) -> None:
        """Positions map to 1-indexed (line, column)."""
        assert DocumentIndex("ab\ncd").get_line_col(pos) == expected

    def test_consecutive_newlines(self) -> None:
        """Blank lines are addressable."""
        index = DocumentIndex("a\n\n\nb")

        assert index.get_line_col(2) == (2, 1)
        assert index.get_line_col(3) == (3, 1)
        assert index.get_line_col(4) == (4, 1)

    def test_codepoint_columns(self) -> None:
        """Columns count codepoints, an emoji is one column."""
        assert DocumentIndex("😀x").get_line_col(1) == (1, 2)

    @pytest.mark.parametrize("pos", [-1, 6])
    def test_out_of_range_rejected(self, pos: int) -> None:
        """Positions outside 0..len raise ValueError."""
        with pytest.raises(ValueError, match="out of range"):
            DocumentIndex("hello").get_line_col(pos)


# ============================================================================
# DOCUMENT
# ============================================================================


class TestDocument:
    """Test Document wrapper."""

    def test_text_and_length(self) -> None:
        """Document exposes its text and codepoint length."""
        doc = Document("héllo")

        assert doc.text == "héllo"
        assert len(doc) == 5
        assert doc.line_count == 1

    def test_line_extraction(self) -> None:
        """line() returns each line without the newline."""
        doc = Document("first\nsecond\n")

        assert doc.line(1) == "first"
        assert doc.line(2) == "second"
        assert doc.line(3) == ""

    def test_line_strips_cr_before_lf(self) -> None:
        """CR of a CRLF terminator is excluded from the line."""
        doc = Document("ab\r\ncd\r\n")

        assert doc.line(1) == "ab"
        assert doc.line(2) == "cd"

    def test_lone_cr_on_last_line_kept(self) -> None:
        """A CR that does not precede LF is ordinary content."""
        assert Document("ab\r").line(1) == "ab\r"

    @pytest.mark.parametrize("number", [0, -1, 3])
    def test_absent_lines_are_none(self, number: int) -> None:
        """Lines outside 1..line_count are None."""
        assert Document("a\nb").line(number) is None

    def test_equal_text_distinct_identity(self) -> None:
        """Documents with equal text are still distinct objects."""
        assert Document("abc") is not Document("abc")

    def test_repr(self) -> None:
        """repr shows the text."""
        assert repr(Document("a\nb")) == "Document('a\\nb')"
