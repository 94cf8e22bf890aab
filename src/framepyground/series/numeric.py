"""Series of numbers.

The numeric series is the only kind of series that supports
arithmetic. Any value in it can be absent (``None``), absent
values stay absent through every elementwise transformation::

    >>> s = NumberSeries([1, None, 3])
    >>> s.scale(2).values
    [2.0, None, 6.0]
    >>> s.sum()
    4

Arithmetic is delegated to :mod:`pyarrow.compute` kernels,
which propagate nulls and follow IEEE rules for divisions by zero.
Integer arithmetic uses the checked kernels, so an overflow raises
:class:`pyarrow.ArrowInvalid` instead of wrapping around.
"""

from typing import Self

import pyarrow as pa
import pyarrow.compute as pc

from ..utils import statistics
from .base import ArrowSeries


class NumberSeries(ArrowSeries):
    """Series of numbers (or absent values).

    Integers and floats are stored as they are provided,
    transformations that can produce fractional values
    (like :meth:`scale` or :meth:`log`) always emit floats.
    """

    kind = "number"
    is_number = True

    #: How :meth:`round_to` resolves ties, see :func:`pyarrow.compute.round`.
    ROUND_MODE = "half_towards_infinity"

    def _validate(self, array: pa.Array) -> pa.Array:
        if pa.types.is_null(array.type):
            # Only absent values, no way to know if they were ints or floats.
            return array.cast(pa.float64())
        if not (pa.types.is_integer(array.type) or pa.types.is_floating(array.type)):
            raise TypeError(f"Expected numbers, got values of type {array.type}")
        return array

    def argsort(self, descending: bool = False) -> pa.Array:
        """Positions that would sort the series.

        Absent values are sorted as if they were zero.
        """
        return pc.array_sort_indices(
            pc.fill_null(self.array, 0),
            order="descending" if descending else "ascending",
        )

    def _floats(self) -> pa.Array:
        return self.array.cast(pa.float64())

    def add(self, operand: "int | float | NumberSeries") -> Self:
        """New series with ``operand`` added to each value.

        The operand can be a number or another series of the
        same length, in which case values are added position by position.
        """
        if isinstance(operand, NumberSeries):
            self._ensure_same_length(operand)
            operand = operand.array
        return self.__class__(pc.add_checked(self.array, operand))

    def scale(self, factor: int | float) -> Self:
        """New series with each value multiplied by ``factor``."""
        return self.__class__(pc.multiply(self._floats(), factor))

    def squared(self) -> Self:
        """New series with each value multiplied by itself."""
        return self.__class__(pc.multiply_checked(self.array, self.array))

    def absolute(self) -> Self:
        """New series of the absolute values."""
        return self.__class__(pc.abs_checked(self.array))

    def log(self) -> Self:
        """New series of the natural logarithm of each value.

        Zero leads to ``-inf`` and negative values to ``nan``.
        """
        return self.__class__(pc.ln(self._floats()))

    def round_to(self, digits: int) -> Self:
        """New series with values rounded to ``digits`` decimal digits.

        >>> NumberSeries([1 / 7, 3 / 7]).round_to(2).values
        [0.14, 0.43]
        """
        return self.__class__(
            pc.round(self._floats(), ndigits=digits, round_mode=self.ROUND_MODE)
        )

    def divide(self, divisor: int | float) -> Self:
        """New series with each value divided by ``divisor``.

        Dividing by zero leads to ``inf`` or ``nan`` values instead of failing.
        """
        return self.__class__(pc.divide(self._floats(), float(divisor)))

    def distribute(self) -> Self:
        """New series scaled so that its finite values sum to 1.

        Non finite values don't contribute to the sum
        but are still part of the resulting series.

        >>> NumberSeries([1, 3]).distribute().values
        [0.25, 0.75]
        """
        return self.divide(self.finite_sum())

    def finite_sum(self) -> float:
        """Sum of the values, ignoring absent and non finite ones."""
        floats = self._floats()
        return pc.sum(floats.filter(pc.is_finite(floats)), min_count=0).as_py()

    def dot(self, other: "NumberSeries") -> Self:
        """Multiply each value by the value at the same position in ``other``.

        The result is absent wherever either of the values is absent.
        """
        self._ensure_same_length(other)
        return self.__class__(pc.multiply_checked(self.array, other.array))

    def sum(self) -> int | float:
        """Sum of the values, absent values count as zero.

        Integers are summed as Python integers, so the sum is exact
        even when it doesn't fit in 64 bits.
        """
        if pa.types.is_integer(self.array.type):
            return sum(self.array.drop_null().to_pylist())
        return pc.sum(self.array, min_count=0).as_py()

    def mean(self) -> float | None:
        """Mean of the present values, ``None`` if there are none."""
        return statistics.mean(self.array)

    def stddev(self) -> float | None:
        """Population standard deviation of the present values."""
        return statistics.stddev(self.array)

    def correlation(self, other: "NumberSeries") -> float:
        """Pearson correlation coefficient with another series.

        ``nan`` when either of the two series is constant.
        """
        return statistics.correlation(self.array, other.array)
