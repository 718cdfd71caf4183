"""Capture configuration.

Frozen dataclasses that describe the marker syntax and the limits applied
when a fixture is captured. Constructing ``CaptureConfig()`` with no
arguments produces the default cactus marker syntax.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cursorfixture.constants import (
    DEFAULT_MARKER_CLOSE,
    DEFAULT_MARKER_GLYPH,
    DEFAULT_MARKER_OPEN,
    MAX_FIXTURE_SIZE,
)

__all__ = ["CaptureConfig", "MarkerSyntax"]


@dataclass(frozen=True, slots=True)
class MarkerSyntax:
    """Delimiter token recognized inside fixtures.

    A marker is written as ``glyph + open + [label] + close``. Each part is
    exactly one codepoint so that scanning never has to deal with partial
    multi-codepoint matches.

    Attributes:
        glyph: Codepoint that introduces a marker (default: U+1F335)
        open: Codepoint that must immediately follow the glyph
        close: Codepoint that terminates the marker on the same line

    Example:
        >>> syntax = MarkerSyntax()
        >>> syntax.token()
        '🌵()'
        >>> MarkerSyntax(glyph="§", open="[", close="]").token("a")
        '§[a]'
    """

    glyph: str = DEFAULT_MARKER_GLYPH
    open: str = DEFAULT_MARKER_OPEN
    close: str = DEFAULT_MARKER_CLOSE

    def __post_init__(self) -> None:
        """Validate marker syntax.

        Raises:
            ValueError: If a part is not a single codepoint, is a line
                terminator, or the three parts are not pairwise distinct.
        """
        for name in ("glyph", "open", "close"):
            value = getattr(self, name)
            if len(value) != 1:
                msg = f"MarkerSyntax.{name} must be a single codepoint, got {value!r}"
                raise ValueError(msg)
            if value in ("\n", "\r"):
                msg = f"MarkerSyntax.{name} must not be a line terminator"
                raise ValueError(msg)
        if len({self.glyph, self.open, self.close}) != 3:
            msg = "MarkerSyntax glyph, open and close must be distinct"
            raise ValueError(msg)

    def token(self, label: str = "") -> str:
        """Return the literal marker text for an optional label."""
        return f"{self.glyph}{self.open}{label}{self.close}"


@dataclass(frozen=True, slots=True)
class CaptureConfig:
    """Immutable configuration for capture().

    Attributes:
        syntax: Marker syntax to recognize (default: ``MarkerSyntax()``)
        max_fixture_size: Maximum raw fixture length in codepoints

    Example:
        >>> from cursorfixture import capture
        >>> config = CaptureConfig(syntax=MarkerSyntax(glyph="@"))
        >>> capture("ab@()c", config=config).positions
        (2,)
    """

    syntax: MarkerSyntax = field(default_factory=MarkerSyntax)
    max_fixture_size: int = MAX_FIXTURE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_fixture_size is not positive.
        """
        if self.max_fixture_size <= 0:
            msg = "max_fixture_size must be positive"
            raise ValueError(msg)
