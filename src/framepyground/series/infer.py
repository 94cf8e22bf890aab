"""Build the right kind of Series for a sequence of values.

When data comes from records the kind of each column is not known
in advance, so it gets detected from the values themselves::

    >>> series_from_values([None, 2, 3])
    NumberSeries([None, 2, 3])
    >>> series_from_values(["a", "b"])
    TextSeries(['a', 'b'])

When the kind is known, :func:`series_for_kind` builds it explicitly.
"""

from typing import Any, Sequence

import pyarrow as pa

from .base import Series
from .kinds import BoolSeries, ObjectSeries, TextSeries
from .numeric import NumberSeries

SERIES_KINDS: dict[str, type[Series]] = {
    NumberSeries.kind: NumberSeries,
    TextSeries.kind: TextSeries,
    BoolSeries.kind: BoolSeries,
    ObjectSeries.kind: ObjectSeries,
}


def series_from_values(values: Sequence[Any]) -> Series:
    """Create a Series detecting its kind from the first present value.

    Sequences with no present values at all become an :class:`ObjectSeries`.
    """
    first = next((v for v in values if v is not None), None)
    # bool must be checked before numbers, as bool is a subclass of int.
    if isinstance(first, bool):
        return BoolSeries(values)
    elif isinstance(first, (int, float)):
        return NumberSeries(values)
    elif isinstance(first, str):
        return TextSeries(values)
    return ObjectSeries(values)


def series_for_kind(kind: str, values: Sequence[Any] = ()) -> Series:
    """Create a Series of the given kind.

    :param kind: One of ``"number"``, ``"string"``, ``"bool"`` or ``"object"``.
    :param values: The values of the series, they must be compatible with the kind.
    """
    try:
        series_class = SERIES_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"Unsupported series kind: {kind!r}, expected one of {list(SERIES_KINDS)}"
        ) from None
    return series_class(values)


def series_from_arrow(array: pa.Array | pa.ChunkedArray) -> Series:
    """Create a Series detecting its kind from the type of an arrow array.

    Arrays of types that have no dedicated series, like structs
    or lists, are converted to Python objects.
    """
    arrow_type = array.type
    if pa.types.is_integer(arrow_type) or pa.types.is_floating(arrow_type):
        return NumberSeries(array)
    elif pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
        return TextSeries(array)
    elif pa.types.is_boolean(arrow_type):
        return BoolSeries(array)
    return ObjectSeries(array)
