"""Tests for MarkerScanner and capture().

Validates marker stripping, offset bookkeeping, labels, custom syntax and
malformed fixture rejection.
"""

from __future__ import annotations

import logging

import pytest

from cursorfixture import CaptureConfig, MalformedFixtureError, MarkerSyntax, capture
from cursorfixture.diagnostics import DiagnosticCode
from cursorfixture.fixture import MarkerScanner

# ============================================================================
# STRIPPING AND OFFSETS
# ============================================================================


class TestMarkerStripping:
    """Test clean document and marker offsets."""

    def test_no_markers(self) -> None:
        """A fixture without markers is its own document."""
        result = capture("plain text")

        assert result.doc == "plain text"
        assert result.positions == ()
        assert len(result) == 0

    def test_empty_fixture(self) -> None:
        """The empty fixture captures the empty document."""
        result = capture("")

        assert result.doc == ""
        assert result.positions == ()

    def test_integer_fixture(self) -> None:
        """Six markers bracket three integers."""
        result = capture("-----🌵()1992🌵()------🌵()12🌵()---🌵()86🌵()---")

        assert result.doc == "-----1992------12---86---"
        assert result.positions == (5, 9, 15, 17, 20, 22)

    def test_markers_at_edges(self) -> None:
        """Markers may open and close the fixture."""
        result = capture("🌵()ab🌵()")

        assert result.doc == "ab"
        assert result.positions == (0, 2)

    def test_adjacent_markers_share_offset(self) -> None:
        """Back-to-back markers record the same offset."""
        assert capture("a🌵()🌵()b").positions == (1, 1)

    def test_only_markers(self) -> None:
        """A fixture of markers only yields an empty document."""
        result = capture("🌵()🌵()")

        assert result.doc == ""
        assert result.positions == (0, 0)

    def test_offsets_count_codepoints(self) -> None:
        """Astral-plane characters count as one position."""
        assert capture("😀😀🌵()x").positions == (2,)

    def test_combining_marks_are_separate_codepoints(self) -> None:
        """A base letter plus combining mark is two positions."""
        assert capture("e\u0301\U0001f335()").positions == (2,)

    def test_multiline_fixture(self) -> None:
        """Newlines are preserved and counted."""
        result = capture("ab\n🌵()cd\r\ne🌵()f")

        assert result.doc == "ab\ncd\r\nef"
        assert result.positions == (3, 8)

    def test_source_offsets_recorded(self) -> None:
        """Each marker remembers where it was in the raw fixture."""
        result = capture("a🌵()b🌵(x)c")

        assert [m.source_offset for m in result.markers] == [1, 5]


# ============================================================================
# LABELS
# ============================================================================


class TestMarkerLabels:
    """Test labelled markers."""

    def test_labels_recorded(self) -> None:
        """Labels are kept in order; anonymous markers have None."""
        result = capture("🌵(a)x🌵()y🌵(b-2)")

        assert result.doc == "xy"
        assert [m.label for m in result.markers] == ["a", None, "b-2"]
        assert result.labels == ("a", "b-2")

    def test_label_does_not_reach_document(self) -> None:
        """Label text is stripped along with the marker."""
        assert capture("1🌵(start)2").doc == "12"

    @pytest.mark.parametrize("label", ["a b", "a.b", "ä", "a(b"])
    def test_invalid_label(self, label: str) -> None:
        """Labels outside [A-Za-z0-9_-] are rejected."""
        with pytest.raises(MalformedFixtureError) as exc_info:
            capture(f"x🌵({label})")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MARKER_INVALID_LABEL

    def test_duplicate_label(self) -> None:
        """A label may appear only once."""
        with pytest.raises(MalformedFixtureError) as exc_info:
            capture("🌵(a)🌵(a)")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.MARKER_DUPLICATE_LABEL
        assert diagnostic.span is not None
        assert diagnostic.span.column == 5


# ============================================================================
# MALFORMED FIXTURES
# ============================================================================


class TestMalformedFixtures:
    """Test rejection of partially well-formed markers."""

    @pytest.mark.parametrize("fixture", ["a🌵b", "ab🌵", "🌵)", "🌵 ()"])
    def test_bare_glyph(self, fixture: str) -> None:
        """The glyph must be followed directly by the open character."""
        with pytest.raises(MalformedFixtureError) as exc_info:
            capture(fixture)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MARKER_BARE_GLYPH

    @pytest.mark.parametrize("fixture", ["ab🌵(cd", "ab🌵(", "a🌵(\n)", "🌵(x\ny)"])
    def test_unterminated(self, fixture: str) -> None:
        """The close character must appear on the same line."""
        with pytest.raises(MalformedFixtureError) as exc_info:
            capture(fixture)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MARKER_UNTERMINATED

    def test_error_span_points_at_marker(self) -> None:
        """Span is the marker location in the raw fixture."""
        with pytest.raises(MalformedFixtureError) as exc_info:
            capture("ok\nx🌵(")

        span = exc_info.value.diagnostic.span  # type: ignore[union-attr]
        assert span is not None
        assert (span.line, span.column) == (2, 2)
        assert span.start == 4

    def test_error_message_format(self) -> None:
        """The exception text is the rendered diagnostic with snippet."""
        with pytest.raises(MalformedFixtureError) as exc_info:
            capture("ab🌵(cd")

        assert str(exc_info.value) == (
            "error[MARKER_UNTERMINATED]: Unterminated marker at line 1, column 3\n"
            "  --> line 1, column 3\n"
            "  1 | ab🌵(cd\n"
            "    |   ^\n"
            "  = help: Close the marker with ')' on the same line"
        )

    def test_first_error_wins(self) -> None:
        """Scanning stops at the first malformed marker."""
        with pytest.raises(MalformedFixtureError, match="MARKER_BARE_GLYPH"):
            capture("🌵x🌵(")

    def test_fixture_too_large(self) -> None:
        """Fixtures over max_fixture_size are rejected."""
        config = CaptureConfig(max_fixture_size=3)

        with pytest.raises(MalformedFixtureError) as exc_info:
            capture("abcd", config=config)

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.FIXTURE_TOO_LARGE
        assert diagnostic.span is None

    def test_fixture_at_size_limit(self) -> None:
        """A fixture exactly at the limit is accepted."""
        assert capture("abc", config=CaptureConfig(max_fixture_size=3)).doc == "abc"


# ============================================================================
# CUSTOM SYNTAX
# ============================================================================


class TestCustomSyntax:
    """Test configurable marker syntax."""

    def test_custom_delimiters(self) -> None:
        """A different glyph/open/close triple is honored."""
        config = CaptureConfig(syntax=MarkerSyntax(glyph="§", open="[", close="]"))

        result = capture("a§[]b§[x]", config=config)

        assert result.doc == "ab"
        assert result.positions == (1, 2)
        assert result.labels == ("x",)

    def test_default_glyph_is_content_under_custom_syntax(self) -> None:
        """The cactus is ordinary text when another glyph is configured."""
        config = CaptureConfig(syntax=MarkerSyntax(glyph="@"))

        assert capture("🌵@()", config=config).doc == "🌵"

    def test_scanner_reusable(self) -> None:
        """One scanner may scan many fixtures."""
        scanner = MarkerScanner()

        first = scanner.scan("a🌵()")
        second = scanner.scan("a🌵()")

        assert first.positions == second.positions
        assert first.document is not second.document
        assert scanner.config == CaptureConfig()


# ============================================================================
# LOGGING
# ============================================================================


class TestCaptureLogging:
    """Test debug logging."""

    def test_capture_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """capture() logs marker count and document length at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="cursorfixture"):
            capture("ab🌵()c🌵()")

        assert "Captured fixture: 2 marker(s), 3 codepoint(s)" in caplog.text

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected fixtures are logged before raising."""
        with caplog.at_level(logging.DEBUG, logger="cursorfixture"):
            with pytest.raises(MalformedFixtureError):
                capture("a🌵")

        assert "Rejected fixture" in caplog.text
