"""Series of text, booleans and arbitrary objects."""

from typing import Any, Sequence

import pyarrow as pa
import pyarrow.compute as pc

from .base import ArrowSeries, Series


class TextSeries(ArrowSeries):
    """Series of strings.

    Absent values are sorted as if they were empty strings.
    """

    kind = "string"
    arrow_type = pa.string()

    def argsort(self, descending: bool = False) -> pa.Array:
        return pc.array_sort_indices(
            pc.fill_null(self.array, ""),
            order="descending" if descending else "ascending",
        )

    def sort(self) -> "TextSeries":
        """New series with the strings in alphabetical order.

        >>> TextSeries(["b", "c", "a"]).sort().values
        ['a', 'b', 'c']
        """
        return self.take(self.argsort())


class BoolSeries(ArrowSeries):
    """Series of booleans.

    ``False`` sorts before ``True``, absent values sort as ``False``.
    """

    kind = "bool"
    arrow_type = pa.bool_()

    def argsort(self, descending: bool = False) -> pa.Array:
        return pc.array_sort_indices(
            pc.fill_null(self.array, False).cast(pa.int8()),
            order="descending" if descending else "ascending",
        )


class ObjectSeries(Series):
    """Series of arbitrary Python objects.

    Objects can't be stored in arrow arrays, so they are kept
    in a tuple. The series never copies or modifies the objects,
    it's up to the caller not to mutate them.
    """

    kind = "object"

    def __init__(self, values: pa.Array | Sequence[Any] = ()) -> None:
        """
        :param values: The objects of the series.
        """
        if isinstance(values, (pa.Array, pa.ChunkedArray)):
            values = values.to_pylist()
        self._values = tuple(values)

    @property
    def values(self) -> list[Any]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def at(self, position: int) -> Any:
        return self._values[position]

    def take(self, positions: pa.Array | Sequence[int]) -> "ObjectSeries":
        if isinstance(positions, pa.Array):
            positions = positions.to_pylist()
        return ObjectSeries([self._values[position] for position in positions])

    def argsort(self, descending: bool = False) -> pa.Array:
        """Positions that would sort the objects.

        Objects are compared with the Python ordering operators,
        sorting objects that can't be compared raises ``TypeError``.
        Absent values are never compared with objects, they come
        first in ascending order and last in descending order.
        """
        order = sorted(
            range(len(self._values)), key=self._sort_key, reverse=descending
        )
        return pa.array(order, type=pa.int64())

    def _sort_key(self, position: int) -> tuple[bool, Any]:
        value = self._values[position]
        return value is not None, value

    def to_arrow(self) -> pa.Array:
        return pa.array(self.values)
