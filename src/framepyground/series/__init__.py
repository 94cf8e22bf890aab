"""Typed columns of values.

A Series is a single column of a Dataframe: an ordered,
fixed-length and immutable sequence of values of a single kind.

Four kinds of series are available:

* :class:`NumberSeries` for numbers, possibly absent,
  the only one supporting arithmetic and statistics.
* :class:`TextSeries` for strings.
* :class:`BoolSeries` for booleans.
* :class:`ObjectSeries` for any other Python object.

>>> from framepyground.series import NumberSeries
>>> NumberSeries([1, 2, 3]).add(1).values
[2, 3, 4]
"""

from .base import Series
from .infer import (
    SERIES_KINDS,
    series_for_kind,
    series_from_arrow,
    series_from_values,
)
from .kinds import BoolSeries, ObjectSeries, TextSeries
from .numeric import NumberSeries

__all__ = (
    "Series",
    "NumberSeries",
    "TextSeries",
    "BoolSeries",
    "ObjectSeries",
    "SERIES_KINDS",
    "series_from_values",
    "series_for_kind",
    "series_from_arrow",
)
