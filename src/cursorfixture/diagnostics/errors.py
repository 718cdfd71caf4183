"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Fixture-shape errors are raised at capture() time; cursor and
iterator contract violations are raised at the offending call.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CursorFixtureError(Exception):
    """Base exception for all cursorfixture errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CursorFixtureError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedFixtureError(CursorFixtureError):
    """Fixture marker syntax is unterminated or invalid.

    Fixtures are static test inputs, so there is no recovery: the fixture
    must be fixed.
    """


class CursorContractError(CursorFixtureError):
    """A cursor or iterator was used in violation of its contract.

    Indicates a defect in the test or in the scanning code under test.
    """


class CrossDocumentCursorError(CursorContractError):
    """take_until() called with cursors over different documents."""


class CursorOrderError(CursorContractError):
    """take_until() called with a target cursor before the receiver."""


class ExhaustedIteratorError(CursorContractError):
    """next() called after the last marker has been consumed."""


class UnknownMarkerError(CursorContractError, KeyError):
    """Marker lookup by label or index found nothing."""

    # KeyError.__str__ would repr() the message.
    __str__ = Exception.__str__
