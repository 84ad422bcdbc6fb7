"""
Typed failures raised by the pattern engine.

All of them are ``ValueError`` subclasses, so the API layer reports them
as 422 like any other invalid input.
"""


class InvalidYearInput(ValueError):
    """Year is not a supported 4-digit Gregorian year."""


class EmptyYearSetError(ValueError):
    """No years were requested for a pattern."""


class EmptyPatternError(ValueError):
    """A pattern with no years was handed to the exporter."""
