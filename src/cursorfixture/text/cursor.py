"""Mutable cursor over a shared, immutable document.

A Cursor is a codepoint index into a Document plus the navigation and
inspection operations that scanning code under test needs.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - The document is shared read-only; only the index moves
    - next() is the single mutation and never moves backwards
    - clone() forks an independent lineage over the same document
    - EOF is a state (is_eof), not a return value
    - Line:column computed on demand from the document's line index

Thread Safety:
    A Document may be shared across threads freely. A single Cursor must not
    be advanced from several threads; clone() it before handing it over.
"""

from dataclasses import dataclass

from cursorfixture.constants import DEFAULT_CONTEXT_LINES
from cursorfixture.diagnostics import (
    CrossDocumentCursorError,
    CursorOrderError,
    ErrorTemplate,
)

from .index import Document
from .snippet import render_snippet

__all__ = ["Cursor", "Loc"]


@dataclass(frozen=True, slots=True)
class Loc:
    """1-indexed line and column of a cursor position.

    Example:
        >>> Loc(2, 3)
        Loc(line=2, column=3)
        >>> str(Loc(2, 3))
        '2:3'
    """

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class Cursor:
    """Position within a document.

    Example:
        >>> cursor = Cursor(Document("hello"), 0)
        >>> cursor.current
        'h'
        >>> fork = cursor.clone()
        >>> fork.next(3).index
        3
        >>> cursor.index  # Original unchanged
        0
        >>> cursor.take_until(fork)
        'hel'
    """

    __slots__ = ("_document", "_index")

    def __init__(self, document: Document, index: int = 0) -> None:
        """Create a cursor.

        Args:
            document: Shared document
            index: Codepoint index, 0..len(document)

        Raises:
            ValueError: If index is outside 0..len(document)
        """
        if not 0 <= index <= len(document):
            msg = f"Cursor index {index} out of range 0..{len(document)}"
            raise ValueError(msg)
        self._document = document
        self._index = index

    @property
    def document(self) -> Document:
        return self._document

    @property
    def doc(self) -> str:
        """Clean document text."""
        return self._document.text

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_eof(self) -> bool:
        """True iff the cursor sits at the end of the document."""
        return self._index == len(self._document)

    @property
    def current(self) -> str:
        """Codepoint at the cursor.

        Raises:
            EOFError: If at end of document
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self._index)
            raise EOFError(diagnostic.message)
        return self._document.text[self._index]

    @property
    def total_lines(self) -> int:
        return self._document.line_count

    def peek(self, offset: int = 0) -> str | None:
        """Codepoint at index + offset, or None beyond either end."""
        target = self._index + offset
        if not 0 <= target < len(self._document):
            return None
        return self._document.text[target]

    def clone(self) -> "Cursor":
        """Return an independent cursor at the same index over the same document."""
        return Cursor(self._document, self._index)

    def next(self, count: int = 1) -> "Cursor":
        """Advance by count codepoints, clamping at the end of the document.

        Args:
            count: Number of codepoints to advance (default: 1)

        Returns:
            This cursor, to allow chaining

        Raises:
            ValueError: If count is negative

        Example:
            >>> cursor = Cursor(Document("ab"), 0)
            >>> cursor.next(10).index
            2
            >>> cursor.is_eof
            True
        """
        if count < 0:
            msg = f"Cursor can only advance forward, got count={count}"
            raise ValueError(msg)
        self._index = min(self._index + count, len(self._document))
        return self

    def take_until(self, other: "Cursor") -> str:
        """Return the text between this cursor and a later one.

        Args:
            other: Cursor over the same document with index >= this index

        Returns:
            Document text from self.index (inclusive) to other.index (exclusive)

        Raises:
            CrossDocumentCursorError: If other belongs to a different document
            CursorOrderError: If other is before this cursor
        """
        if other._document is not self._document:
            raise CrossDocumentCursorError(ErrorTemplate.cross_document_cursor())
        if other._index < self._index:
            raise CursorOrderError(ErrorTemplate.cursor_order(self._index, other._index))
        return self._document.text[self._index : other._index]

    def get_loc(self) -> Loc:
        """Compute the 1-indexed line and column of the cursor.

        Example:
            >>> Cursor(Document("ab\\ncd"), 4).get_loc()
            Loc(line=2, column=2)
        """
        line, column = self._document.index.get_line_col(self._index)
        return Loc(line, column)

    def extract_line(self, line_number: int) -> str | None:
        """Return a 1-indexed line without its terminator, or None if absent."""
        return self._document.line(line_number)

    def print_debug(self, context_lines: int = DEFAULT_CONTEXT_LINES) -> str:
        """Render the cursor line with a caret under the cursor column.

        Args:
            context_lines: Lines of context before/after (default: 1)

        Returns:
            Deterministic multi-line snippet suitable for snapshot comparison

        Example:
            >>> print(Cursor(Document("hello\\nworld"), 8).print_debug())
            1 | hello
            2 | world
              |   ^
        """
        return render_snippet(self._document, self._index, context_lines=context_lines)

    def __repr__(self) -> str:
        return f"Cursor(index={self._index}, loc={self.get_loc()})"
