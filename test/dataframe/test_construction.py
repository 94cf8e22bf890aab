import pyarrow as pa
import pytest

from framepyground import Dataframe
from framepyground.errors import LengthMismatchError, UnknownColumnError
from framepyground.series import (
    BoolSeries,
    NumberSeries,
    ObjectSeries,
    TextSeries,
)

TEST_RECORDS = [
    {"n": 1, "s": "a", "b": True, "o": {"l": "foo"}},
    {"n": 3, "s": "b", "b": False, "o": {"l": "bar"}},
]


@pytest.fixture
def df():
    return Dataframe.from_records(TEST_RECORDS)


def test_empty_initialization():
    df = Dataframe()
    assert isinstance(df, Dataframe)
    assert df.names == []
    assert len(df) == 0
    assert df.records == []


def test_import_and_export_records(df):
    assert df.column("b").values == [True, False]
    assert df.records == TEST_RECORDS


def test_detected_kinds(df):
    assert isinstance(df.column("n"), NumberSeries)
    assert isinstance(df.column("s"), TextSeries)
    assert isinstance(df.column("b"), BoolSeries)
    assert isinstance(df.column("o"), ObjectSeries)


def test_records_with_missing_columns():
    df = Dataframe.from_records([{"a": 1}, {"b": "x"}, {"a": None, "b": "y"}])
    assert df.names == ["a", "b"]
    assert df.values("a") == [1, None, None]
    assert df.values("b") == [None, "x", "y"]
    assert isinstance(df.column("b"), TextSeries)


def test_explicit_definition():
    df = Dataframe.from_definition(
        {"n": "number", "s": "string", "b": "bool", "o": "object"}, TEST_RECORDS
    )
    assert df.names == ["n", "s", "b", "o"]
    assert df.records == TEST_RECORDS


def test_definition_without_records():
    df = Dataframe.from_definition({"n": "number", "s": "string"})
    assert len(df) == 0
    assert isinstance(df.column("n"), NumberSeries)
    assert isinstance(df.column("s"), TextSeries)


def test_definition_ignores_detected_kind():
    df = Dataframe.from_definition({"n": "object"}, [{"n": 1}, {"n": 2}])
    assert isinstance(df.column("n"), ObjectSeries)
    assert df.values("n") == [1, 2]


def test_definition_with_incompatible_values():
    with pytest.raises(TypeError):
        Dataframe.from_definition({"n": "number"}, [{"n": "x"}])


def test_columns_from_plain_sequences():
    df = Dataframe({"n": [1, 2], "s": TextSeries(["a", "b"])})
    assert isinstance(df.column("n"), NumberSeries)
    assert df.grid == [[1, "a"], [2, "b"]]


def test_columns_length_mismatch():
    with pytest.raises(LengthMismatchError):
        Dataframe({"a": NumberSeries([1, 2]), "b": NumberSeries([1])})


def test_explicit_index():
    df = Dataframe({"n": NumberSeries([10, 20, 30])}, index=[2, 0, 2])
    assert df.values("n") == [30, 10, 30]
    assert df.storage_length == 3
    assert len(df) == 3


@pytest.mark.parametrize("index", [[0, 3], [-1]])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Dataframe({"n": NumberSeries([10, 20, 30])}, index=index)


def test_index_with_absent_positions():
    with pytest.raises(ValueError):
        Dataframe({"n": NumberSeries([10])}, index=pa.array([None], type=pa.int64()))


def test_unknown_column(df):
    with pytest.raises(UnknownColumnError) as excinfo:
        df.column("missing")
    assert excinfo.value.name == "missing"
    assert "missing" in str(excinfo.value)


def test_unknown_column_is_key_error(df):
    with pytest.raises(KeyError):
        df.values("missing")


def test_grid(df):
    g = df.grid
    assert g[0][0] == 1
    assert g[1] == [3, "b", False, {"l": "bar"}]


def test_from_arrow():
    table = pa.table({"n": [1, 2], "s": ["a", "b"], "b": [True, False]})
    df = Dataframe.from_arrow(table)
    assert df.names == ["n", "s", "b"]
    assert isinstance(df.column("n"), NumberSeries)
    assert isinstance(df.column("s"), TextSeries)
    assert isinstance(df.column("b"), BoolSeries)
    assert df.records == table.to_pylist()


def test_from_record_batch():
    df = Dataframe(pa.record_batch({"n": [1, 2]}))
    assert df.values("n") == [1, 2]


def test_to_arrow_only_visible_rows():
    df = Dataframe.from_records([{"n": 1, "s": "a"}, {"n": 2, "s": "b"}])
    table = df.reverse().to_arrow()
    assert table.to_pydict() == {"n": [2, 1], "s": ["b", "a"]}


def test_print(df, capsys):
    assert df.print("Test Title") is df
    output = capsys.readouterr().out
    assert output.startswith("Test Title\n")
    assert "n | s | b     | o" in output


def test_str():
    df = Dataframe.from_records([{"n": 1.5, "s": None}])
    assert str(df) == "n    | s\n---- | -\n1.50 |  "


def test_repr(df):
    assert repr(df) == "Dataframe(columns=['n', 's', 'b', 'o'], rows=2)"
