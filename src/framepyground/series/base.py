"""Base classes for Series

A Series is an ordered, fixed-length sequence of values
of a single kind. Series are immutable, every transformation
returns a new Series, which means that the same Series can be
safely shared by multiple Dataframes.

Most kinds of series store their values in a :class:`pyarrow.Array`,
which is immutable by itself and gives us the compute kernels
of :mod:`pyarrow.compute` for free.
"""

import abc
import random
from typing import Any, Iterator, Self, Sequence

import pyarrow as pa

from ..errors import EmptyAccessError, LengthMismatchError


class Series(abc.ABC):
    """An ordered collection of values of the same kind.

    The base `Series` class only provides the accessors
    shared by all kinds of series, subclasses are in charge
    of storing the values.

    >>> from framepyground.series import NumberSeries
    >>> s = NumberSeries([10, 20, 30])
    >>> len(s), s.first, s.last, s.at(1)
    (3, 10, 30, 20)
    """

    #: The name of the kind of values, as accepted by :func:`series_for_kind`.
    kind: str = ""

    #: If the series holds numbers and supports arithmetic.
    is_number: bool = False

    @property
    @abc.abstractmethod
    def values(self) -> list[Any]:
        """All values of the series as a Python list."""
        ...

    @abc.abstractmethod
    def __len__(self) -> int: ...

    @abc.abstractmethod
    def at(self, position: int) -> Any:
        """The value at the given position.

        Negative positions count from the end like for Python lists.
        """
        ...

    @abc.abstractmethod
    def take(self, positions: pa.Array | Sequence[int]) -> Self:
        """A new series made of the values at the given positions."""
        ...

    @abc.abstractmethod
    def argsort(self, descending: bool = False) -> pa.Array:
        """Positions that would sort the series.

        The sort is stable, equal values retain their relative
        order both for ascending and descending sorting.
        """
        ...

    @abc.abstractmethod
    def to_arrow(self) -> pa.Array:
        """The values of the series as a :class:`pyarrow.Array`"""
        ...

    @property
    def length(self) -> int:
        """Count of values in the series."""
        return len(self)

    @property
    def first(self) -> Any:
        """First value of the series."""
        self._ensure_not_empty("first")
        return self.at(0)

    @property
    def last(self) -> Any:
        """Last value of the series."""
        self._ensure_not_empty("last")
        return self.at(len(self) - 1)

    def any(self, rng: random.Random | None = None) -> Any:
        """A value at a random position of the series."""
        self._ensure_not_empty("any")
        return self.at((rng or random).randrange(len(self)))

    def __getitem__(self, position: int) -> Any:
        return self.at(position)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values!r})"

    def _ensure_not_empty(self, what: str) -> None:
        if not len(self):
            raise EmptyAccessError(f"Cannot access {what} value of an empty series")

    def _ensure_same_length(self, other: "Series") -> None:
        if len(self) != len(other):
            raise LengthMismatchError(len(self), len(other))


class ArrowSeries(Series):
    """A Series whose values are stored in a :class:`pyarrow.Array`.

    Subclasses declare the ``arrow_type`` they store, values
    are converted to that type when the series is created.
    A conversion failure (like text in a series of booleans)
    is raised as is by pyarrow.
    """

    arrow_type: pa.DataType | None = None

    def __init__(self, values: pa.Array | pa.ChunkedArray | Sequence[Any] = ()) -> None:
        """
        :param values: The values of the series, a Python sequence
                       or an arrow array.
        """
        if isinstance(values, pa.ChunkedArray):
            values = values.combine_chunks()
        if not isinstance(values, pa.Array):
            values = pa.array(list(values), type=self.arrow_type)
        elif self.arrow_type is not None and values.type != self.arrow_type:
            values = values.cast(self.arrow_type)
        self.array = self._validate(values)

    def _validate(self, array: pa.Array) -> pa.Array:
        """Check the array is acceptable for the series, or convert it."""
        return array

    @property
    def values(self) -> list[Any]:
        return self.array.to_pylist()

    def __len__(self) -> int:
        return len(self.array)

    def at(self, position: int) -> Any:
        return self.array[position].as_py()

    def take(self, positions: pa.Array | Sequence[int]) -> Self:
        if not isinstance(positions, pa.Array):
            positions = pa.array(positions, type=pa.int64())
        return self.__class__(self.array.take(positions))

    def to_arrow(self) -> pa.Array:
        return self.array
