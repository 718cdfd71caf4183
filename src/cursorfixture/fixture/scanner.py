"""Marker scanner.

Strips marker tokens from a raw fixture, recording for each one the
codepoint offset in the clean document at which it was removed.

    "ab🌵()cd🌵(end)"  ->  doc "abcd", markers at 2 and 4 (label "end")

Malformed markers are rejected with a MalformedFixtureError whose diagnostic
points at the offending token in the raw fixture.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from typing import NoReturn

from cursorfixture.config import CaptureConfig
from cursorfixture.constants import LABEL_PATTERN
from cursorfixture.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    MalformedFixtureError,
    SourceSpan,
)
from cursorfixture.text import Document, render_snippet

from .capture import CaptureResult, Marker

__all__ = ["MarkerScanner", "capture"]

logger = logging.getLogger(__name__)

_LABEL_RE = re.compile(LABEL_PATTERN)


class MarkerScanner:
    """Single-pass scanner for marker tokens.

    Example:
        >>> result = MarkerScanner().scan("-🌵()12🌵()-")
        >>> result.doc, result.positions
        ('-12-', (1, 3))
    """

    __slots__ = ("_config",)

    def __init__(self, config: CaptureConfig | None = None) -> None:
        self._config = config if config is not None else CaptureConfig()

    @property
    def config(self) -> CaptureConfig:
        return self._config

    def scan(self, fixture: str) -> CaptureResult:
        """Strip every marker token and record its position.

        Args:
            fixture: Raw fixture text

        Returns:
            CaptureResult with the clean document and markers in source order

        Raises:
            MalformedFixtureError: If the fixture is too large or a marker
                is bare, unterminated, badly labelled, or a duplicate label
        """
        if len(fixture) > self._config.max_fixture_size:
            self._reject(
                ErrorTemplate.fixture_too_large(len(fixture), self._config.max_fixture_size)
            )

        syntax = self._config.syntax
        pieces: list[str] = []
        markers: list[Marker] = []
        seen_labels: set[str] = set()
        clean_len = 0
        start = 0

        while (hit := fixture.find(syntax.glyph, start)) != -1:
            pieces.append(fixture[start:hit])
            clean_len += hit - start

            open_pos = hit + 1
            if fixture[open_pos : open_pos + 1] != syntax.open:
                span = _span(fixture, hit, open_pos)
                self._reject(
                    ErrorTemplate.bare_glyph(
                        syntax.token(), syntax.open, span, _snippet(fixture, hit)
                    )
                )

            close_pos = fixture.find(syntax.close, open_pos + 1)
            newline_pos = fixture.find("\n", open_pos + 1)
            if close_pos == -1 or (newline_pos != -1 and newline_pos < close_pos):
                span = _span(fixture, hit, open_pos + 1)
                self._reject(
                    ErrorTemplate.unterminated_marker(syntax.close, span, _snippet(fixture, hit))
                )

            label = fixture[open_pos + 1 : close_pos]
            if label:
                if not _LABEL_RE.fullmatch(label):
                    span = _span(fixture, hit, close_pos + 1)
                    self._reject(
                        ErrorTemplate.invalid_label(
                            label, LABEL_PATTERN, span, _snippet(fixture, hit)
                        )
                    )
                if label in seen_labels:
                    span = _span(fixture, hit, close_pos + 1)
                    self._reject(
                        ErrorTemplate.duplicate_label(label, span, _snippet(fixture, hit))
                    )
                seen_labels.add(label)

            markers.append(Marker(offset=clean_len, label=label or None, source_offset=hit))
            start = close_pos + 1

        pieces.append(fixture[start:])
        return CaptureResult(Document("".join(pieces)), tuple(markers))

    @staticmethod
    def _reject(diagnostic: Diagnostic) -> NoReturn:
        logger.debug("Rejected fixture: %s", diagnostic.message)
        raise MalformedFixtureError(diagnostic)


def _span(fixture: str, start: int, end: int) -> SourceSpan:
    # Error path only.
    line, column = Document(fixture).index.get_line_col(start)
    return SourceSpan(start=start, end=end, line=line, column=column)


def _snippet(fixture: str, pos: int) -> str:
    return render_snippet(Document(fixture), pos, context_lines=0)


def capture(fixture: str, *, config: CaptureConfig | None = None) -> CaptureResult:
    """Parse a fixture into a clean document and ordered markers.

    Args:
        fixture: Raw fixture text containing marker tokens
        config: Optional capture configuration (marker syntax, size limit)

    Returns:
        CaptureResult ready for iteration

    Raises:
        MalformedFixtureError: If the marker syntax is invalid

    Example:
        >>> cursors = capture("ab🌵()c").iter()
        >>> cursors.next().current
        'c'
    """
    result = MarkerScanner(config).scan(fixture)
    logger.debug(
        "Captured fixture: %d marker(s), %d codepoint(s)", len(result), len(result.doc)
    )
    return result
