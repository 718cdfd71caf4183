"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Fixture errors (marker syntax, fixture limits)
        2000-2999: Cursor errors (contract violations while scanning)
        3000-3999: Iteration errors (marker iteration and lookup)
    """

    # Fixture errors (1000-1999)
    MARKER_BARE_GLYPH = 1001
    MARKER_UNTERMINATED = 1002
    MARKER_INVALID_LABEL = 1003
    MARKER_DUPLICATE_LABEL = 1004
    FIXTURE_TOO_LARGE = 1005

    # Cursor errors (2000-2999)
    CROSS_DOCUMENT_CURSOR = 2001
    CURSOR_ORDER = 2002
    UNEXPECTED_EOF = 2003

    # Iteration errors (3000-3999)
    ITERATOR_EXHAUSTED = 3001
    MARKER_NOT_FOUND = 3002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. Offsets here are codepoint offsets into the raw fixture.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the raw fixture (None for cursor errors)
        hint: Suggestion for fixing the error
        snippet: Pre-rendered source snippet with a caret under the span
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    snippet: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[MARKER_UNTERMINATED]: Unterminated marker at line 1, column 3
              --> line 1, column 3
              1 | ab🌵(cd
                |   ^
              = help: Close the marker with ')' on the same line

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
