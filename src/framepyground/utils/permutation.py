"""Random permutations of row indices."""

import random

import pyarrow as pa


def permutation(indices: pa.Array, rng: random.Random | None = None) -> pa.Array:
    """Return the indices in a uniformly random order.

    :param indices: The array to permute, it is left untouched.
    :param rng: The random generator to draw from, pass one
                with a fixed seed to get reproducible permutations.
    """
    rng = rng or random
    order = rng.sample(range(len(indices)), len(indices))
    return indices.take(pa.array(order, type=pa.int64()))
