"""Shared constants for cursorfixture.

Centralized configuration constants used across the text, fixture and
diagnostics packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Marker syntax: the delimiter token embedded in fixtures
- Input limits: size constraints on raw fixtures
- Snippet rendering: layout of debug snippets

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Marker syntax
    "DEFAULT_MARKER_GLYPH",
    "DEFAULT_MARKER_OPEN",
    "DEFAULT_MARKER_CLOSE",
    "LABEL_PATTERN",
    # Input limits
    "MAX_FIXTURE_SIZE",
    # Snippet rendering
    "DEFAULT_CONTEXT_LINES",
    "CARET",
    "GUTTER_SEPARATOR",
]

# ============================================================================
# MARKER SYNTAX
# ============================================================================
#
# A marker is written as GLYPH OPEN [label] CLOSE, e.g. "🌵()" or "🌵(start)".
# The cactus glyph (U+1F335) is a single codepoint that does not occur in the
# lexer inputs this library is aimed at, so it needs no escaping mechanism.
# A glyph that is not immediately followed by OPEN is rejected.

DEFAULT_MARKER_GLYPH: str = "\U0001f335"
DEFAULT_MARKER_OPEN: str = "("
DEFAULT_MARKER_CLOSE: str = ")"

# Characters allowed in a marker label (regex, full match).
LABEL_PATTERN: str = r"[A-Za-z0-9_-]+"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum raw fixture size in codepoints. Fixtures are literal test inputs;
# anything larger is almost certainly a generated string passed by mistake.
MAX_FIXTURE_SIZE: int = 1_000_000

# ============================================================================
# SNIPPET RENDERING
# ============================================================================

# Lines of context shown before/after the cursor line by Cursor.print_debug().
DEFAULT_CONTEXT_LINES: int = 1

CARET: str = "^"
GUTTER_SEPARATOR: str = "|"
