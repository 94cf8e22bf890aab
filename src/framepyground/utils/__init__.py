"""Generic utilities and helpers.

This is a collection of helpers that the Series and Dataframe
objects rely on, but that are not specifically bound to them:
formatting of text tables, statistics over arrays of numbers
and random permutations.

Usually this will be generic Python utilities that could work
in any Python project.
"""

from . import permutation, statistics, tabulate

__all__ = ("permutation", "statistics", "tabulate")
