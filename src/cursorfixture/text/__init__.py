"""Document, cursor and snippet rendering.

Python 3.13+.
"""

from .cursor import Cursor, Loc
from .index import Document, DocumentIndex
from .snippet import render_snippet

__all__ = [
    "Cursor",
    "Document",
    "DocumentIndex",
    "Loc",
    "render_snippet",
]
