"""Dataframe library built on top of framepyground series.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data, explore it, apply transformations, and analyze it.

Dataframes provide an efficient way to perform operations such as filtering,
sorting, and merging of datasets.

The framepyground Dataframe keeps its data in columns, each one a
:class:`framepyground.series.Series`, and decides which rows are
visible through a row index. Sorting, filtering, slicing or shuffling
a dataframe only computes a new index, the columns themselves are
shared between the original dataframe and the new one::

    >>> df = Dataframe.from_records([{"k": 2}, {"k": 1}, {"k": 3}])
    >>> sorted_df = df.sort("k")
    >>> sorted_df.values("k")
    [1, 2, 3]
    >>> sorted_df.column("k") is df.column("k")
    True
"""

from .dataframe import Dataframe, RowCallback, RowRecord

__all__ = ("Dataframe", "RowRecord", "RowCallback")
