"""cursorfixture - fixture-driven cursors for testing lexers and parsers.

Embed markers in literal fixture text, capture the fixture, and replay a
Cursor at every marker so scanning code can be exercised at exact positions
without offset arithmetic:

    >>> from cursorfixture import capture
    >>> cursors = capture("let 🌵()x = 🌵()42").iter()
    >>> cursors.next().current, cursors.next().current
    ('x', '4')

Public API:
    capture - Strip markers from a fixture into a CaptureResult
    CaptureResult - Clean document plus ordered markers
    Cursor - Position within a document with navigation/inspection
    Loc - 1-indexed (line, column) of a cursor
    CaptureConfig, MarkerSyntax - Capture configuration

Exceptions:
    CursorFixtureError - Base exception class
    MalformedFixtureError - Invalid marker syntax in a fixture
    CursorContractError - Base for cursor/iterator misuse
    CrossDocumentCursorError, CursorOrderError, ExhaustedIteratorError,
    UnknownMarkerError

Submodules:
    cursorfixture.text - Document, DocumentIndex, Cursor, snippet rendering
    cursorfixture.fixture - MarkerScanner, CaptureResult, CursorIterator
    cursorfixture.diagnostics - Diagnostic codes, templates, formatter
    cursorfixture.testing - Harness helpers for scanner tests
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import CaptureConfig, MarkerSyntax
from .diagnostics import (
    CrossDocumentCursorError,
    CursorContractError,
    CursorFixtureError,
    CursorOrderError,
    ExhaustedIteratorError,
    MalformedFixtureError,
    UnknownMarkerError,
)
from .fixture import CaptureResult, CursorIterator, Marker, capture
from .text import Cursor, Document, Loc

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("cursorfixture")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CaptureConfig",
    "CaptureResult",
    "CrossDocumentCursorError",
    "Cursor",
    "CursorContractError",
    "CursorFixtureError",
    "CursorIterator",
    "CursorOrderError",
    "Document",
    "ExhaustedIteratorError",
    "Loc",
    "MalformedFixtureError",
    "Marker",
    "MarkerSyntax",
    "UnknownMarkerError",
    "__version__",
    "capture",
]
