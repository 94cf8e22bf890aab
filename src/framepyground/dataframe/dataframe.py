"""The Dataframe object itself."""

import random
from typing import Any, Callable, Iterable, Mapping, Self, Sequence

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import ColumnConflictError, LengthMismatchError, UnknownColumnError
from ..series import (
    NumberSeries,
    Series,
    TextSeries,
    series_for_kind,
    series_from_arrow,
    series_from_values,
)
from ..utils import statistics, tabulate
from ..utils.permutation import permutation
from .join import match_first_occurrences

RowRecord = dict[str, Any]
RowCallback = Callable[[RowRecord], Any]


class Dataframe:
    """Data structure that handles data in rows and columns.

    The Dataframe object allows to represent in-memory data
    and perform transformations over it.

    A Dataframe is made of named :class:`framepyground.series.Series`
    of the same length and of a row index. The index is the list
    of positions in the series that are part of the dataframe,
    in the order they should appear. So the index decides which rows
    are visible and in what order, without touching the data itself.

    Dataframes are never modified. Operations that only change which
    rows are visible (sorting, selecting, slicing...) return a new
    Dataframe that shares the same series with a different index,
    while operations that change the data build new series.

    >>> df = Dataframe.from_records([{"n": 2, "s": "b"}, {"n": 1, "s": "a"}])
    >>> df.sort("n").records
    [{'n': 1, 's': 'a'}, {'n': 2, 's': 'b'}]
    """

    def __init__(
        self,
        columns: Mapping[str, Series | Sequence[Any]] | pa.Table | None = None,
        index: pa.Array | Sequence[int] | None = None,
    ) -> None:
        """
        :param columns: The series of the dataframe by name, or a
                        `pyarrow.Table` to load the columns from.
                        Sequences of values are converted to series
                        detecting their kind.
        :param index: The positions of the visible rows, by default all
                      the rows in their original order.
        """
        if isinstance(columns, (pa.Table, pa.RecordBatch)):
            columns = {
                name: series_from_arrow(column)
                for name, column in zip(columns.column_names, columns.columns)
            }

        self.columns: dict[str, Series] = {
            name: column if isinstance(column, Series) else series_from_values(column)
            for name, column in (columns or {}).items()
        }
        self.storage_length = self._compute_storage_length()

        if index is None:
            index = pa.array(range(self.storage_length), type=pa.int64())
        elif isinstance(index, pa.Array):
            index = index.cast(pa.int64())
        else:
            index = pa.array(index, type=pa.int64())
        self._check_index(index)
        self.index = index

    def _compute_storage_length(self) -> int:
        """The length of the series, which must be the same for all of them."""
        lengths = [len(column) for column in self.columns.values()]
        if not lengths:
            return 0
        for length in lengths[1:]:
            if length != lengths[0]:
                raise LengthMismatchError(lengths[0], length)
        return lengths[0]

    def _check_index(self, index: pa.Array) -> None:
        """Ensure the index only points to positions that exist in the series."""
        if not len(index):
            return
        if index.null_count:
            raise ValueError("The row index cannot contain absent positions")
        bounds = pc.min_max(index).as_py()
        if bounds["min"] < 0 or bounds["max"] >= self.storage_length:
            raise IndexError(
                "Row index out of range, positions must be "
                f"within [0, {self.storage_length})"
            )

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> Self:
        """Create a Dataframe out of a list of records.

        Each record is a dictionary of column names and values.
        Columns appear in the order they are first found
        and their kind is detected from their first present value.
        Columns missing from some records will have absent values
        for those rows.

        >>> Dataframe.from_records([{"a": 1}, {"b": "x"}]).records
        [{'a': 1, 'b': None}, {'a': None, 'b': 'x'}]
        """
        records = list(records)
        arrays: dict[str, list[Any]] = {}
        for position, record in enumerate(records):
            for name, value in record.items():
                if name not in arrays:
                    arrays[name] = [None] * len(records)
                arrays[name][position] = value
        return cls(
            {name: series_from_values(values) for name, values in arrays.items()}
        )

    @classmethod
    def from_definition(
        cls, header: Mapping[str, str], records: Iterable[Mapping[str, Any]] = ()
    ) -> Self:
        """Create a Dataframe with columns of explicit kinds.

        Useful when the kind of the columns can't be detected
        from the data, for example because there is no data at all.

        :param header: The kind of each column by name, one of
                       ``"number"``, ``"string"``, ``"bool"`` or ``"object"``.
        :param records: The rows of the dataframe, values for columns
                        that are not in the header are ignored.

        >>> Dataframe.from_definition({"n": "number", "s": "string"}).names
        ['n', 's']
        """
        records = list(records)
        return cls(
            {
                name: series_for_kind(kind, [record.get(name) for record in records])
                for name, kind in header.items()
            }
        )

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a Dataframe from the columns of a `pyarrow.Table`."""
        return cls(table)

    def to_arrow(self) -> pa.Table:
        """The visible rows of the Dataframe as a `pyarrow.Table`"""
        return pa.table(
            {
                name: column.take(self.index).to_arrow()
                for name, column in self.columns.items()
            }
        )

    @property
    def names(self) -> list[str]:
        """Names of the columns."""
        return list(self.columns)

    @property
    def length(self) -> int:
        """Count of visible rows."""
        return len(self.index)

    def __len__(self) -> int:
        return self.length

    def column(self, name: str) -> Series:
        """The series for the column with the given name.

        Note that the series contains all the stored values,
        not only the visible ones, see :meth:`values` for those.
        """
        try:
            return self.columns[name]
        except KeyError:
            raise UnknownColumnError(name) from None

    def values(self, name: str) -> list[Any]:
        """The visible values of a column, in the order of the rows."""
        return self.column(name).take(self.index).values

    @property
    def records(self) -> list[RowRecord]:
        """The visible rows as a list of dictionaries."""
        names = self.names
        return [dict(zip(names, row)) for row in self._rows()]

    @property
    def grid(self) -> list[list[Any]]:
        """The visible rows as a list of values, in the order of the columns."""
        return [list(row) for row in self._rows()]

    def _rows(self) -> Iterable[tuple[Any, ...]]:
        """Iterate over the values of the visible rows."""
        return zip(*(self.values(name) for name in self.columns))

    def reindex(self, index: pa.Array | Sequence[int]) -> Self:
        """A new Dataframe sharing the same series with a different index.

        This is the foundation of all operations that only change
        which rows are visible, or their order.
        """
        return self.__class__(self.columns, index)

    def _replace_columns(self, columns: Mapping[str, Series]) -> Self:
        """A new Dataframe with the given series and the same index."""
        return self.__class__(columns, self.index if columns else None)

    def _materialize(self) -> dict[str, Series]:
        """New series containing only the visible rows."""
        return {name: column.take(self.index) for name, column in self.columns.items()}

    def include(self, names: Iterable[str]) -> Self:
        """A new Dataframe with only the named columns, in the given order.

        A Dataframe without columns has no rows, so including
        no columns (or excluding all of them) also drops every row.
        """
        return self._replace_columns({name: self.column(name) for name in names})

    def exclude(self, names: Iterable[str]) -> Self:
        """A new Dataframe without the named columns.

        Names of columns that don't exist are ignored.
        """
        names = set(names)
        return self.include([name for name in self.names if name not in names])

    def select(self, predicate: RowCallback) -> Self:
        """A new Dataframe with only the rows that satisfy the predicate.

        The predicate receives each row as a dictionary
        and the row is kept when it returns a truthy value.

        >>> df = Dataframe.from_records([{"n": 1}, {"n": 2}, {"n": 3}])
        >>> df.select(lambda row: row["n"] > 1).values("n")
        [2, 3]
        """
        mask = pa.array(
            [bool(predicate(record)) for record in self.records], type=pa.bool_()
        )
        return self.reindex(self.index.filter(mask))

    def sort(self, name: str, ascending: bool = True) -> Self:
        """A new Dataframe with rows sorted by the values of a column.

        The sort is stable, rows with equal values keep their
        relative order, also when sorting in descending order.
        Absent numbers are sorted as if they were zero.
        """
        visible = self.column(name).take(self.index)
        return self.reindex(self.index.take(visible.argsort(descending=not ascending)))

    def reverse(self) -> Self:
        """A new Dataframe with rows in reverse order."""
        positions = range(len(self.index) - 1, -1, -1)
        return self.reindex(self.index.take(pa.array(positions, type=pa.int64())))

    def slice(self, start: int, end: int | None = None) -> Self:
        """A new Dataframe with only the rows from ``start`` to ``end`` excluded.

        Works like slicing Python lists: negative positions count from
        the end and out of range positions are clamped.
        """
        window = range(len(self.index))[start:end]
        return self.reindex(self.index.slice(window.start, len(window)))

    def head(self, count: int = 5) -> Self:
        """A new Dataframe with only the first ``count`` rows."""
        return self.slice(0, count)

    def shuffle(self, rng: random.Random | None = None) -> Self:
        """A new Dataframe with rows in random order.

        :param rng: The random generator to use, for reproducible shuffling.
        """
        return self.reindex(permutation(self.index, rng))

    def amend(self, name: str, callback: RowCallback, overwrite: bool = False) -> Self:
        """A new Dataframe with an additional column computed from each row.

        The callback receives each visible row as a dictionary and
        returns the value of the new column for that row.
        The kind of the new column is detected from the returned values.

        Only the visible rows are preserved in the new Dataframe,
        so sorting or filtering the dataframe before amending it
        leads to new series with only those rows, in that order.

        :param name: The name of the new column.
        :param callback: The function computing the value for each row.
        :param overwrite: Replace the column if it already exists,
                          instead of raising :class:`ColumnConflictError`.

        >>> df = Dataframe.from_records([{"n": 1}, {"n": 3}])
        >>> df.amend("neg", lambda row: -row["n"]).values("neg")
        [-1, -3]
        """
        if name in self.columns and not overwrite:
            raise ColumnConflictError(f"Column {name!r} already exists")
        amended = series_from_values([callback(record) for record in self.records])
        columns = self._materialize()
        columns[name] = amended
        return self.__class__(columns)

    def rename(self, names: Mapping[str, str]) -> Self:
        """A new Dataframe with renamed columns.

        :param names: The new name of each column to rename by its current name,
                      columns that are not listed keep their name.
                      Renaming two columns to the same name raises
                      :class:`ColumnConflictError`.
        """
        columns: dict[str, Series] = {}
        for name, column in self.columns.items():
            target = names.get(name, name)
            if target in columns:
                raise ColumnConflictError(
                    f"Renaming {name!r} to {target!r} conflicts with another column"
                )
            columns[target] = column
        return self._replace_columns(columns)

    def join(self, other: "Dataframe") -> Self:
        """A new Dataframe with the columns of both dataframes.

        Rows are combined by position, the first visible row of this
        dataframe with the first visible row of the other one and so on,
        so both dataframes must have the same number of visible rows.
        Columns of the other dataframe replace columns with the same name.
        """
        if len(self) != len(other):
            raise LengthMismatchError(len(self), len(other))
        columns = self._materialize()
        columns.update(other._materialize())
        return self.__class__(columns)

    def left_join(self, other: "Dataframe", key: str) -> Self:
        """A new Dataframe with the columns of ``other`` matched by a key column.

        Each distinct key of ``other`` is matched only once: the first
        row of ``other`` holding the key is copied into the first row of
        this dataframe holding the same key. Further rows with the same
        key, on both sides, receive nothing. See :mod:`.join` for details.

        Rows without a match have absent values in the new columns,
        which keep the same kind they had in ``other``.

        >>> left = Dataframe.from_records([{"k": "x"}, {"k": "y"}])
        >>> right = Dataframe.from_records([{"k": "y", "p": 10}, {"k": "z", "p": 20}])
        >>> left.left_join(right, "k").values("p")
        [None, 10]
        """
        rowmap = match_first_occurrences(self.values(key), other.values(key))
        positions = self.index.to_pylist()

        columns = dict(self.columns)
        for name in other.names:
            if name == key:
                continue
            source = other.values(name)
            values = [None] * self.storage_length
            for target_row, source_row in rowmap:
                values[positions[target_row]] = source[source_row]
            columns[name] = series_for_kind(other.column(name).kind, values)
        return self._replace_columns(columns)

    def correlation_matrix(self, other: "Dataframe", label: str = "Keys") -> Self:
        """Correlation of each numeric column with each numeric column of ``other``.

        Returns a Dataframe with one row for each numeric column of this
        dataframe, named in the ``label`` column, and one column for
        each numeric column of ``other``. Each cell holds the Pearson
        correlation coefficient of the two columns.

        Values are paired by position of the visible rows, so the
        two dataframes must have the same number of visible rows.
        Constant columns have no correlation and lead to ``nan``.
        """
        if len(self) != len(other):
            raise LengthMismatchError(len(self), len(other))
        rows = self._numeric_names()
        cols = other._numeric_names()
        if label in cols:
            raise ColumnConflictError(
                f"Label {label!r} is also a column of the other dataframe"
            )

        columns: dict[str, Series] = {label: TextSeries(rows)}
        for colname in cols:
            other_values = other.column(colname).take(other.index)
            columns[colname] = NumberSeries(
                [
                    self.column(rowname).take(self.index).correlation(other_values)
                    for rowname in rows
                ]
            )
        return self.__class__(columns)

    def _numeric_names(self) -> list[str]:
        return [name for name, column in self.columns.items() if column.is_number]

    def _numeric_column(self, name: str) -> NumberSeries:
        column = self.column(name)
        if not column.is_number:
            raise TypeError(f"Column {name!r} does not contain numbers")
        return column

    def _derive(
        self, name: str, transform: Callable[[NumberSeries], NumberSeries]
    ) -> Self:
        """A new Dataframe with a numeric column replaced by its transformation."""
        columns = dict(self.columns)
        columns[name] = transform(self._numeric_column(name))
        return self._replace_columns(columns)

    def distribute(self, name: str) -> Self:
        """Scale a column so that its finite visible values sum to 1.

        Non finite values are left out of the sum, but are still scaled.

        >>> df = Dataframe.from_records([{"n": 1}, {"n": 3}])
        >>> df.distribute("n").values("n")
        [0.25, 0.75]
        """
        total = self._numeric_column(name).take(self.index).finite_sum()
        return self._derive(name, lambda column: column.divide(total))

    def log(self, name: str) -> Self:
        """Natural logarithm of each value in a column."""
        return self._derive(name, lambda column: column.log())

    def scale(self, name: str, factor: int | float) -> Self:
        """Multiply each value in a column by ``factor``."""
        return self._derive(name, lambda column: column.scale(factor))

    def add(self, name: str, operand: int | float) -> Self:
        """Add ``operand`` to each value in a column."""
        return self._derive(name, lambda column: column.add(operand))

    def digits(self, precision: int, names: Iterable[str] | None = None) -> Self:
        """Round numeric columns to ``precision`` decimal digits.

        :param precision: How many decimal digits to keep.
        :param names: The columns to round, by default all of them.
                      Columns that don't contain numbers are left untouched.
        """
        columns = dict(self.columns)
        for name in self.names if names is None else names:
            column = self.column(name)
            if column.is_number:
                columns[name] = column.round_to(precision)
        return self._replace_columns(columns)

    def outlier(self, factor: float) -> Self:
        """A new Dataframe without the rows that contain outliers.

        For each numeric column, a visible value is an outlier when
        its distance from the mean of the column is more than
        ``factor`` times the standard deviation of the column.
        A row is removed when any of its numeric values is an outlier.

        In columns where all values are the same, the standard deviation
        is zero and no value can be an outlier, as there is no value
        different from the mean. Absent values are never outliers.

        >>> values = [1, 2, 1, 2, 1, 10]
        >>> df = Dataframe.from_records([{"n": n} for n in values])
        >>> df.outlier(2).values("n")
        [1, 2, 1, 2, 1]
        """
        marked = pa.array([False] * len(self), type=pa.bool_())
        for name in self._numeric_names():
            visible = self.column(name).take(self.index).to_arrow().cast(pa.float64())
            mean = statistics.mean(visible)
            if mean is None:
                continue
            deviation = pc.divide(
                pc.abs(pc.subtract(visible, mean)), statistics.stddev(visible)
            )
            marked = pc.or_(marked, pc.fill_null(pc.greater(deviation, factor), False))
        return self.reindex(self.index.filter(pc.invert(marked)))

    def print(self, title: str | None = None) -> Self:
        """Print the Dataframe as a text table and return it."""
        print(tabulate.tabulate(self.names, self.grid, title=title))
        return self

    def __str__(self) -> str:
        return tabulate.tabulate(self.names, self.grid)

    def __repr__(self) -> str:
        return f"Dataframe(columns={self.names}, rows={len(self)})"
