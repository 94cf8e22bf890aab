"""Matching of rows between two dataframes by key.

The left join performed by :meth:`Dataframe.left_join` is not
a full relational join. Each key is matched only once: the first
row holding the key in the right dataframe is paired with the first
row holding the key in the left dataframe. Any other row with
the same key, on either side, is ignored.

Supposing we have two dataframes::

    left:           right:
    +-----+         +-----+-----+
    | key |         | key |  p  |
    +-----+         +-----+-----+
    |  x  |         |  y  | 10  |
    |  y  |         |  z  | 20  |
    |  y  |         |  y  | 30  |
    +-----+         +-----+-----+

The rows would be paired as ``(1, 0)``, as the first ``"y"`` on
the left is row 1 and the first ``"y"`` on the right is row 0.
``"z"`` has no match on the left and is dropped, while the second
``"y"`` of both dataframes is ignored::

    >>> match_first_occurrences(["x", "y", "y"], ["y", "z", "y"])
    [(1, 0)]
"""

import logging
from typing import Any, Hashable, Sequence

log = logging.getLogger(__name__)


def first_occurrences(keys: Sequence[Hashable]) -> dict[Hashable, int]:
    """Map each key to the first position it appears at.

    Absent keys (``None``) are ignored, they never match anything.
    """
    positions: dict[Hashable, int] = {}
    for position, key in enumerate(keys):
        if key is not None:
            positions.setdefault(key, position)
    return positions


def match_first_occurrences(
    target_keys: Sequence[Any], source_keys: Sequence[Any]
) -> list[tuple[int, int]]:
    """Pair positions of the target and the source holding the same key.

    Returns ``(target_position, source_position)`` tuples
    in the order keys first appear in the source.
    Keys of the source that are not in the target are dropped.
    """
    targets = first_occurrences(target_keys)
    rowmap = []
    for key, source_position in first_occurrences(source_keys).items():
        target_position = targets.get(key)
        if target_position is None:
            log.debug("Key %r has no matching row, dropped", key)
            continue
        rowmap.append((target_position, source_position))
    return rowmap
