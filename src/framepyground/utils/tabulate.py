"""Format tabular data into a text table for print.

the `tabulate` function takes a list of column names and the rows of
a table and formats them into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display the content of a :class:`framepyground.dataframe.Dataframe`.

Example:

    >>> names = ["Product", "Quantity", "Price"]
    >>> rows = [
    ...     ["Videogame", 8, 66.5],
    ...     ["Laptop", 8, 38.72],
    ...     ["Laptop", 7, 77.46],
    ... ]
    >>> print(tabulate(names, rows))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46
"""

from typing import Any, Sequence

MAX_ROWS = 20
MAX_WIDTH = 30


def tabulate(
    names: Sequence[str],
    rows: Sequence[Sequence[Any]],
    title: str | None = None,
    max_rows: int = MAX_ROWS,
) -> str:
    """Format names and rows into a text table.

    Will produce a string like::

        Sales
        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22

    :param names: The column names, used as the table header.
    :param rows: One sequence of values per row, in the same order of ``names``.
    :param title: An optional title printed above the table.
    :param max_rows: How many rows to display at most.
    """
    cols = [str(name) for name in names]
    textrows = [[format_value(v) for v in row] for row in list(rows)[:max_rows]]

    colsizes = compute_max_colsize(cols, textrows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    lines = header + separator + [maketablerow(row, colsizes=colsizes) for row in textrows]
    if title:
        lines.insert(0, title)

    table = "\n".join(lines)
    if len(rows) > max_rows:
        table += f"\n... and {len(rows) - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    render absent values as empty cells and truncate long strings.
    """
    if v is None:
        return ""
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, float):
        return f"{v:.2f}"

    v = str(v)
    if len(v) > MAX_WIDTH:
        v = v[: MAX_WIDTH - 3] + "..."
    return v
