"""Statistics over arrays of numbers.

Pure functions computing the mean, the standard deviation
and the Pearson correlation coefficient of :class:`pyarrow.Array`
of numbers. Absent values (nulls) are skipped.

>>> import pyarrow as pa
>>> mean(pa.array([1, 2, None, 3]))
2.0
>>> correlation(pa.array([1, 2, 3]), pa.array([2, 4, 6]))
1.0
"""

import logging
import math

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import LengthMismatchError

log = logging.getLogger(__name__)


def mean(values: pa.Array) -> float | None:
    """Arithmetic mean of the values, ``None`` if there are none."""
    return pc.mean(values).as_py()


def stddev(values: pa.Array, ddof: int = 0) -> float | None:
    """Standard deviation of the values.

    By default this is the population standard deviation,
    pass ``ddof=1`` for the sample one.
    Returns ``None`` when there are not enough values.
    """
    return pc.stddev(values, ddof=ddof).as_py()


def correlation(x: pa.Array, y: pa.Array) -> float:
    """Pearson correlation coefficient between two arrays.

    The arrays are compared position by position, positions where
    either of the two values is absent are ignored.

    When one of the two arrays has no variance the coefficient
    is undefined and ``nan`` is returned.
    """
    if len(x) != len(y):
        raise LengthMismatchError(len(x), len(y))

    x = x.cast(pa.float64())
    y = y.cast(pa.float64())
    present = pc.and_(pc.is_valid(x), pc.is_valid(y))
    x = x.filter(present)
    y = y.filter(present)
    if len(x) == 0:
        return math.nan

    dx = pc.subtract(x, pc.mean(x))
    dy = pc.subtract(y, pc.mean(y))
    covariance = pc.sum(pc.multiply(dx, dy)).as_py()
    variance = (
        pc.sum(pc.multiply(dx, dx)).as_py() * pc.sum(pc.multiply(dy, dy)).as_py()
    )
    if variance == 0:
        log.debug("Correlation is undefined for values without variance")
        return math.nan
    return covariance / math.sqrt(variance)
