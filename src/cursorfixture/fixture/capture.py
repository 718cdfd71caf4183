"""Captured fixtures and marker iteration.

CaptureResult holds the clean document and the ordered markers recorded by
the scanner. Every call to iter() builds a fresh CursorIterator, so a capture
can be replayed any number of times.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from cursorfixture.diagnostics import (
    ErrorTemplate,
    ExhaustedIteratorError,
    UnknownMarkerError,
)
from cursorfixture.text import Cursor, Document

__all__ = ["CaptureResult", "CursorIterator", "Marker"]


@dataclass(frozen=True, slots=True)
class Marker:
    """One stripped delimiter occurrence.

    Attributes:
        offset: Codepoint offset into the clean document
        label: Marker label, None for anonymous markers
        source_offset: Codepoint offset of the delimiter in the raw fixture
    """

    offset: int
    label: str | None = None
    source_offset: int = 0


class CursorIterator(Iterator[Cursor]):
    """Index over a capture's markers yielding one fresh Cursor per marker.

    next() raises ExhaustedIteratorError once all markers are consumed;
    __next__ raises StopIteration instead, so the iterator also works with
    for loops and list().

    Example:
        >>> from cursorfixture import capture
        >>> markers = capture("a🌵()b").iter()
        >>> markers.next().index
        1
        >>> markers.remaining
        0
    """

    __slots__ = ("_document", "_markers", "_position")

    def __init__(self, document: Document, markers: tuple[Marker, ...]) -> None:
        self._document = document
        self._markers = markers
        self._position = 0

    @property
    def position(self) -> int:
        """Number of markers consumed so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._markers) - self._position

    def next(self) -> Cursor:
        """Return a Cursor at the next marker.

        Raises:
            ExhaustedIteratorError: If every marker has been consumed
        """
        if self._position >= len(self._markers):
            raise ExhaustedIteratorError(ErrorTemplate.iterator_exhausted(len(self._markers)))
        marker = self._markers[self._position]
        self._position += 1
        return Cursor(self._document, marker.offset)

    def __next__(self) -> Cursor:
        if self._position >= len(self._markers):
            raise StopIteration
        return self.next()

    def __iter__(self) -> "CursorIterator":
        return self


class CaptureResult:
    """Clean document plus ordered markers, immutable once constructed.

    Example:
        >>> from cursorfixture import capture
        >>> result = capture("x = 🌵(lhs)1 + 🌵(rhs)2")
        >>> result.doc
        'x = 1 + 2'
        >>> result.positions
        (4, 8)
        >>> result.cursor("rhs").current
        '2'
    """

    __slots__ = ("_document", "_markers")

    def __init__(self, document: Document, markers: tuple[Marker, ...]) -> None:
        self._document = document
        self._markers = markers

    @property
    def document(self) -> Document:
        return self._document

    @property
    def doc(self) -> str:
        """Clean document text."""
        return self._document.text

    @property
    def markers(self) -> tuple[Marker, ...]:
        return self._markers

    @property
    def positions(self) -> tuple[int, ...]:
        """Marker offsets in recorded order."""
        return tuple(marker.offset for marker in self._markers)

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels of the labelled markers, in recorded order."""
        return tuple(marker.label for marker in self._markers if marker.label is not None)

    def iter(self) -> CursorIterator:
        """Start a new, independent pass over the markers."""
        return CursorIterator(self._document, self._markers)

    def __iter__(self) -> CursorIterator:
        return self.iter()

    def __len__(self) -> int:
        return len(self._markers)

    def cursor_at(self, index: int) -> Cursor:
        """Return a Cursor at the marker with the given 0-based index.

        Raises:
            UnknownMarkerError: If index is out of range
        """
        if not 0 <= index < len(self._markers):
            raise UnknownMarkerError(ErrorTemplate.marker_not_found(index, len(self._markers)))
        return Cursor(self._document, self._markers[index].offset)

    def cursor(self, label: str) -> Cursor:
        """Return a Cursor at the marker with the given label.

        Raises:
            UnknownMarkerError: If no marker carries the label
        """
        for marker in self._markers:
            if marker.label == label:
                return Cursor(self._document, marker.offset)
        raise UnknownMarkerError(ErrorTemplate.marker_not_found(label, len(self._markers)))

    def __repr__(self) -> str:
        return f"CaptureResult(doc={self.doc!r}, positions={self.positions})"
