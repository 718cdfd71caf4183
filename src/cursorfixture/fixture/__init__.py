"""Fixture capture: marker scanning and cursor replay.

Python 3.13+.
"""

from .capture import CaptureResult, CursorIterator, Marker
from .scanner import MarkerScanner, capture

__all__ = [
    "CaptureResult",
    "CursorIterator",
    "Marker",
    "MarkerScanner",
    "capture",
]
