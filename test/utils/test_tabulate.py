import pytest

from framepyground.utils.tabulate import format_value, tabulate


def test_tabulate():
    table = tabulate(["Product", "Quantity"], [["Laptop", 8], ["Videogame", 7]])
    assert table.splitlines() == [
        "Product   | Quantity",
        "--------- | --------",
        "Laptop    | 8       ",
        "Videogame | 7       ",
    ]


def test_tabulate_title():
    table = tabulate(["a"], [[1]], title="Numbers")
    assert table.splitlines()[0] == "Numbers"


def test_tabulate_max_rows():
    table = tabulate(["a"], [[i] for i in range(5)], max_rows=2)
    lines = table.splitlines()
    assert lines[2:] == ["0", "1", "... and 3 more rows"]


def test_tabulate_no_columns():
    assert tabulate([], []) == "\n"


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (1.0, "1.00"),
        (3, "3"),
        ("x" * 40, "x" * 27 + "..."),
        ({"l": "foo"}, "{'l': 'foo'}"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected
