"""Errors raised by Series and Dataframes.

All errors derive from :class:`DataframeError`, and each of them
also derives from the builtin exception that better describes it,
so that code catching ``KeyError`` or ``ValueError`` keeps working.

Degenerate statistics (like the correlation of a constant column)
are not errors, they are reported as ``nan`` or ``inf`` values.
"""


class DataframeError(Exception):
    """Base class for all errors of the library."""


class UnknownColumnError(DataframeError, KeyError):
    """A column that does not exist in the Dataframe was referenced."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown column: {self.name!r}"


class LengthMismatchError(DataframeError, ValueError):
    """Two series or dataframes were expected to have the same length."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"Length mismatch: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class EmptyAccessError(DataframeError, IndexError):
    """A value was requested from a series with no values."""


class ColumnConflictError(DataframeError, ValueError):
    """An operation would have produced two columns with the same name."""
