"""Source snippet rendering for debugging and diagnostics.

Renders a position in a document as numbered source lines with a caret row
under the target column:

    1 | hello
    2 | world
      |   ^

The output depends only on the document text and the position, so it is
safe to compare against literal snapshots in tests.

Python 3.13+. Zero external dependencies.
"""

from cursorfixture.constants import CARET, DEFAULT_CONTEXT_LINES, GUTTER_SEPARATOR

from .index import Document

__all__ = ["caret_padding", "render_snippet"]


def caret_padding(prefix: str) -> str:
    """Whitespace that spans prefix, keeping tabs so carets line up.

    Example:
        >>> caret_padding("\\tab")
        '\\t  '
    """
    return "".join("\t" if char == "\t" else " " for char in prefix)


def _source_row(number: int, width: int, text: str) -> str:
    gutter = f"{number:>{width}} {GUTTER_SEPARATOR}"
    return f"{gutter} {text}" if text else gutter


def render_snippet(
    document: Document,
    pos: int,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    caret: str = CARET,
) -> str:
    """Render the line containing pos with a caret under its column.

    Args:
        document: Document to render from
        pos: Codepoint position (0..len(document))
        context_lines: Lines to show before/after the target line
        caret: Marker character for the caret row

    Returns:
        Multi-line snippet, rows joined by "\\n", no trailing newline

    Raises:
        ValueError: If context_lines is negative or pos is out of range

    Example:
        >>> print(render_snippet(Document("abc\\ndef\\nghi"), 5, context_lines=0))
        2 | def
          |  ^
    """
    if context_lines < 0:
        msg = f"context_lines must be >= 0, got {context_lines}"
        raise ValueError(msg)

    line, column = document.index.get_line_col(pos)
    first = max(1, line - context_lines)
    last = min(document.line_count, line + context_lines)
    width = len(str(last))

    rows: list[str] = []
    for number in range(first, last + 1):
        text = document.line(number) or ""
        rows.append(_source_row(number, width, text))
        if number == line:
            # A CRLF terminator column lies past the stripped line text.
            padding = caret_padding(text[: column - 1]) + " " * max(0, column - 1 - len(text))
            rows.append(f"{' ' * width} {GUTTER_SEPARATOR} {padding}{caret}")

    return "\n".join(rows)
