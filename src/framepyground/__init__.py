"""FramePyground

An in-memory columnar dataframe built from scratch on top of Apache Arrow.

The library is constituted by a few components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Series, typed columns of values, see :mod:`framepyground.series`.
* The Dataframe, named series with a shared row index, which provides
  sorting, filtering, joining and statistics, see :mod:`framepyground.dataframe`.

For the user guide and code documentation of each component, refer to the
component itself.

>>> from framepyground import Dataframe
>>> df = Dataframe.from_records([{"n": 1, "s": "a"}, {"n": 3, "s": "b"}])
>>> print(df.distribute("n"))
n    | s
---- | -
0.25 | a
0.75 | b
"""

from . import errors, series, utils
from .dataframe import Dataframe
from .errors import (
    ColumnConflictError,
    DataframeError,
    EmptyAccessError,
    LengthMismatchError,
    UnknownColumnError,
)
from .series import BoolSeries, NumberSeries, ObjectSeries, Series, TextSeries

__all__ = (
    "errors",
    "series",
    "utils",
    "Dataframe",
    "Series",
    "NumberSeries",
    "TextSeries",
    "BoolSeries",
    "ObjectSeries",
    "DataframeError",
    "UnknownColumnError",
    "LengthMismatchError",
    "EmptyAccessError",
    "ColumnConflictError",
)
