import math
import random

import pytest

from framepyground import Dataframe
from framepyground.errors import ColumnConflictError, LengthMismatchError
from framepyground.series import NumberSeries, TextSeries


def test_correlation_matrix():
    rng = random.Random(7)

    def r():
        return rng.randint(0, 10)

    # Input records
    i = Dataframe.from_records([{"i1": r(), "i2": r(), "i3": r()} for _ in range(5)])
    # Output records
    o = Dataframe.from_records([{"o1": r(), "o2": r()} for _ in range(5)])

    c = i.correlation_matrix(o)
    assert c.column("Keys").values == ["i1", "i2", "i3"]
    assert c.names == ["Keys", "o1", "o2"]
    for name in ["o1", "o2"]:
        for v in c.values(name):
            assert math.isnan(v) or -1 <= v <= 1


def test_correlation_matrix_linear():
    x = [1, 2, 3, 4]
    i = Dataframe.from_records([{"x": v, "s": "text"} for v in x])
    o = Dataframe.from_records([{"y": 2 * v, "c": 5, "z": -v} for v in x])

    c = i.correlation_matrix(o)
    # Only numeric columns take part to the matrix
    assert c.names == ["Keys", "y", "c", "z"]
    assert c.values("Keys") == ["x"]
    assert isinstance(c.column("Keys"), TextSeries)
    assert isinstance(c.column("y"), NumberSeries)
    assert c.values("y") == [pytest.approx(1.0)]
    assert c.values("z") == [pytest.approx(-1.0)]
    # A constant column has no correlation
    assert math.isnan(c.values("c")[0])


def test_correlation_matrix_on_visible_rows():
    i = Dataframe.from_records([{"x": v} for v in [1, 2, 3, 100]])
    o = Dataframe.from_records([{"y": v} for v in [3, 2, 1, 0]])
    c = i.slice(0, 3).correlation_matrix(o.slice(0, 3))
    assert c.values("y") == [pytest.approx(-1.0)]


def test_correlation_matrix_label():
    i = Dataframe.from_records([{"x": 1}, {"x": 2}])
    o = Dataframe.from_records([{"y": 1}, {"y": 2}])
    assert i.correlation_matrix(o, label="Name").names == ["Name", "y"]
    with pytest.raises(ColumnConflictError):
        i.correlation_matrix(o, label="y")


def test_correlation_matrix_length_mismatch():
    i = Dataframe.from_records([{"x": 1}, {"x": 2}])
    o = Dataframe.from_records([{"y": 1}, {"y": 2}, {"y": 3}])
    with pytest.raises(LengthMismatchError):
        i.correlation_matrix(o)


def test_outlier_detection():
    values = [1, 2, 1, 2, 1, 10]
    df = Dataframe.from_records([{"n": x} for x in values])
    dr = df.outlier(2)
    assert df.values("n") == values
    assert dr.values("n") == values[:-1]


def test_outlier_any_column():
    a = [1, 2, 1, 2, 1, 10, 1, 2, 1, 2, 1, 2]
    b = [10, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1]
    df = Dataframe.from_records(
        [{"a": x, "b": y, "row": idx} for idx, (x, y) in enumerate(zip(a, b))]
    )
    # "row" is numeric too, but evenly spread values are never far from the mean.
    kept = df.outlier(2).values("row")
    assert kept == [1, 2, 3, 4, 6, 7, 8, 9, 10, 11]


def test_outlier_constant_column():
    df = Dataframe.from_records([{"n": 3, "s": "x"} for _ in range(4)])
    assert len(df.outlier(1)) == 4
    assert len(df.outlier(0)) == 4


def test_outlier_absent_values():
    values = [1, 2, 1, 2, 1, 10, None]
    df = Dataframe.from_records([{"n": x} for x in values])
    assert df.outlier(2).values("n") == [1, 2, 1, 2, 1, None]


def test_outlier_only_visible_rows():
    values = [1, 2, 1, 2, 1, 10]
    df = Dataframe.from_records([{"n": x} for x in values])
    # Without the 10 the mean is 1.4 and the standard deviation ~0.49,
    # so the 2s deviate by more than 1.1 standard deviations.
    assert df.slice(0, 5).outlier(1.1).values("n") == [1, 1, 1]
    assert df.outlier(1.1).values("n") == [1, 2, 1, 2, 1]


def test_outlier_without_numeric_columns():
    df = Dataframe.from_records([{"s": "a"}, {"s": "b"}])
    assert df.outlier(1).values("s") == ["a", "b"]


def test_outlier_empty_dataframe():
    df = Dataframe.from_definition({"n": "number"})
    assert len(df.outlier(1)) == 0
