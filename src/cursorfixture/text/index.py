"""Line index and immutable document.

DocumentIndex precomputes line start offsets in a single O(n) pass, then
answers position lookups in O(log n) using binary search. Document pairs the
clean fixture text with its index and is the unit of identity shared by every
Cursor derived from one capture.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter; the \\r is
      excluded from extracted line text)
    - CR-only (Classic Mac, \\r): NOT supported

Python 3.13+. Zero external dependencies.
"""

__all__ = ["Document", "DocumentIndex"]


class DocumentIndex:
    """Cached line offsets for efficient position lookups.

    Example:
        >>> index = DocumentIndex("line1\\nline2\\nline3")
        >>> index.get_line_col(0)   # Start of line 1
        (1, 1)
        >>> index.get_line_col(6)   # Start of line 2
        (2, 1)
        >>> index.get_line_col(8)   # Third char of line 2
        (2, 3)
        >>> index.line_count
        3

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset index from source.

        Args:
            source: Text to index

        Complexity:
            O(n) where n = len(source)
        """
        # Line 1 starts at offset 0
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines; a trailing newline opens an empty last line."""
        return len(self._offsets)

    @property
    def offsets(self) -> tuple[int, ...]:
        """Line start offsets, ascending, first is always 0."""
        return self._offsets

    def line_start(self, line: int) -> int:
        """Offset of the first codepoint of a 1-indexed line.

        Raises:
            ValueError: If line is outside 1..line_count
        """
        if not 1 <= line <= len(self._offsets):
            msg = f"Line {line} out of range (document has {len(self._offsets)} lines)"
            raise ValueError(msg)
        return self._offsets[line - 1]

    def line_end(self, line: int) -> int:
        """Offset just past the last codepoint of a line, before its newline.

        Raises:
            ValueError: If line is outside 1..line_count
        """
        self.line_start(line)
        if line == len(self._offsets):
            return self._source_len
        return self._offsets[line] - 1

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Codepoint position in source (0-indexed)

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Raises:
            ValueError: If pos is outside 0..len(source)

        Complexity:
            O(log n) where n = number of lines
        """
        if not 0 <= pos <= self._source_len:
            msg = f"Position {pos} out of range 0..{self._source_len}"
            raise ValueError(msg)

        # Line number = count of line starts <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


class Document:
    """Immutable text under test plus its line index.

    Two captures of equal fixture text produce two distinct Documents;
    cursors compare documents by identity.

    Example:
        >>> doc = Document("ab\\r\\ncd")
        >>> doc.line(1)
        'ab'
        >>> doc.line(3) is None
        True
    """

    __slots__ = ("_index", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = DocumentIndex(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def index(self) -> DocumentIndex:
        return self._index

    @property
    def line_count(self) -> int:
        return self._index.line_count

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"Document({self._text!r})"

    def line(self, number: int) -> str | None:
        """Return the text of a 1-indexed line without its terminator.

        Returns:
            Line text, or None when number is outside 1..line_count
        """
        if not 1 <= number <= self._index.line_count:
            return None
        text = self._text[self._index.line_start(number) : self._index.line_end(number)]
        if number < self._index.line_count and text.endswith("\r"):
            return text[:-1]
        return text
