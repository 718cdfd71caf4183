"""Diagnostic system for cursorfixture errors.

Provides structured error diagnostics with codes, spans, hints and source
snippets. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CrossDocumentCursorError,
    CursorContractError,
    CursorFixtureError,
    CursorOrderError,
    ExhaustedIteratorError,
    MalformedFixtureError,
    UnknownMarkerError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CrossDocumentCursorError",
    "CursorContractError",
    "CursorFixtureError",
    "CursorOrderError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExhaustedIteratorError",
    "MalformedFixtureError",
    "OutputFormat",
    "SourceSpan",
    "UnknownMarkerError",
]
