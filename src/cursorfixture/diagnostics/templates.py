"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every factory returns a Diagnostic which the caller wraps in the matching
    exception class.
    """

    @staticmethod
    def bare_glyph(token: str, open_char: str, span: SourceSpan, snippet: str) -> Diagnostic:
        """Marker glyph not followed by the open character.

        Args:
            token: An example well-formed marker
            open_char: The character expected right after the glyph
            span: Location of the glyph in the raw fixture
            snippet: Rendered raw fixture line with caret

        Returns:
            Diagnostic for MARKER_BARE_GLYPH
        """
        msg = (
            f"Marker glyph at line {span.line}, column {span.column} "
            f"is not followed by '{open_char}'"
        )
        return Diagnostic(
            code=DiagnosticCode.MARKER_BARE_GLYPH,
            message=msg,
            span=span,
            hint=f"Write markers as '{token}'; the glyph cannot be escaped",
            snippet=snippet,
        )

    @staticmethod
    def unterminated_marker(close_char: str, span: SourceSpan, snippet: str) -> Diagnostic:
        """Marker opened but not closed on the same line.

        Args:
            close_char: The expected closing character
            span: Location of the marker start in the raw fixture
            snippet: Rendered raw fixture line with caret

        Returns:
            Diagnostic for MARKER_UNTERMINATED
        """
        msg = f"Unterminated marker at line {span.line}, column {span.column}"
        return Diagnostic(
            code=DiagnosticCode.MARKER_UNTERMINATED,
            message=msg,
            span=span,
            hint=f"Close the marker with '{close_char}' on the same line",
            snippet=snippet,
        )

    @staticmethod
    def invalid_label(label: str, pattern: str, span: SourceSpan, snippet: str) -> Diagnostic:
        """Marker label contains characters outside the label alphabet.

        Args:
            label: The rejected label text
            pattern: Regex the label must fully match
            span: Location of the marker in the raw fixture
            snippet: Rendered raw fixture line with caret

        Returns:
            Diagnostic for MARKER_INVALID_LABEL
        """
        msg = f"Invalid marker label {label!r} at line {span.line}, column {span.column}"
        return Diagnostic(
            code=DiagnosticCode.MARKER_INVALID_LABEL,
            message=msg,
            span=span,
            hint=f"Labels must match {pattern}",
            snippet=snippet,
        )

    @staticmethod
    def duplicate_label(label: str, span: SourceSpan, snippet: str) -> Diagnostic:
        """Marker label used more than once in one fixture.

        Args:
            label: The repeated label
            span: Location of the second occurrence in the raw fixture
            snippet: Rendered raw fixture line with caret

        Returns:
            Diagnostic for MARKER_DUPLICATE_LABEL
        """
        msg = f"Duplicate marker label '{label}' at line {span.line}, column {span.column}"
        return Diagnostic(
            code=DiagnosticCode.MARKER_DUPLICATE_LABEL,
            message=msg,
            span=span,
            hint="Each label may appear only once per fixture",
            snippet=snippet,
        )

    @staticmethod
    def fixture_too_large(size: int, limit: int) -> Diagnostic:
        """Raw fixture exceeds the configured size limit.

        Args:
            size: Fixture length in codepoints
            limit: Configured max_fixture_size

        Returns:
            Diagnostic for FIXTURE_TOO_LARGE
        """
        msg = f"Fixture of {size} codepoints exceeds limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.FIXTURE_TOO_LARGE,
            message=msg,
            hint="Raise CaptureConfig.max_fixture_size or split the fixture",
        )

    @staticmethod
    def cross_document_cursor() -> Diagnostic:
        """take_until() called with a cursor over another document.

        Returns:
            Diagnostic for CROSS_DOCUMENT_CURSOR
        """
        return Diagnostic(
            code=DiagnosticCode.CROSS_DOCUMENT_CURSOR,
            message="take_until() target cursor belongs to a different document",
            hint="Derive both cursors from the same capture() result",
        )

    @staticmethod
    def cursor_order(start: int, end: int) -> Diagnostic:
        """take_until() called with a target before the receiver.

        Args:
            start: Receiver index
            end: Target index

        Returns:
            Diagnostic for CURSOR_ORDER
        """
        msg = f"take_until() target at index {end} precedes cursor at index {start}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_ORDER,
            message=msg,
            hint="Call take_until() on the earlier cursor, passing the later one",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character access at end of document.

        Args:
            position: Cursor index (equal to document length)

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected EOF at position {position}",
        )

    @staticmethod
    def iterator_exhausted(count: int) -> Diagnostic:
        """next() called after the last marker was consumed.

        Args:
            count: Number of markers in the capture

        Returns:
            Diagnostic for ITERATOR_EXHAUSTED
        """
        return Diagnostic(
            code=DiagnosticCode.ITERATOR_EXHAUSTED,
            message=f"Marker iterator exhausted after {count} marker(s)",
            hint="Add a marker to the fixture or call next() fewer times",
        )

    @staticmethod
    def marker_not_found(key: str | int, count: int) -> Diagnostic:
        """Marker lookup by label or index failed.

        Args:
            key: Requested label or 0-based marker index
            count: Number of markers in the capture

        Returns:
            Diagnostic for MARKER_NOT_FOUND
        """
        if isinstance(key, int):
            msg = f"Marker index {key} out of range for {count} marker(s)"
        else:
            msg = f"Marker label '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.MARKER_NOT_FOUND,
            message=msg,
        )
