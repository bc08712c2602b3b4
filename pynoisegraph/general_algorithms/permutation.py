"""
Seeded permutation table for lattice-based noise generators.

The table is a Fisher-Yates shuffle of 0..255 driven by a local numpy
generator, so identical seeds always give byte-identical tables. Generators
hash integer lattice coordinates through the table to pick gradients,
pseudo-random values or feature points.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from .seeding import normalize_seed


def fisher_yates_permutation(seed: int, size: int = cte.PERMUTATION_SIZE) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    Args:
        seed: Random seed for reproducible permutation
        size: Number of entries (default: 256)

    Returns:
        numpy.ndarray: uint8 permutation of 0..size-1
    """
    rng = np.random.default_rng(normalize_seed(seed))

    # Create initial sequence [0, 1, 2, ..., 255]
    perm = np.arange(size, dtype=np.uint8)

    # Fisher-Yates shuffle
    for i in range(size - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    return perm


class PermutationTable:
    """
    Immutable, seeded permutation of 0..255 with a coordinate hash.

    Author: B.G.
    """

    def __init__(self, seed: int):
        """
        Build the table for a seed.

        Args:
            seed: Unsigned 32-bit seed (larger values are masked)
        """
        self.seed = normalize_seed(seed)
        values = fisher_yates_permutation(self.seed)
        values.flags.writeable = False
        self.values = values
        # Plain ints for the hot path
        self._lookup = tuple(int(v) for v in values)

    def __len__(self):
        return len(self._lookup)

    def __getitem__(self, index):
        return self._lookup[index & 0xFF]

    def hash(self, *coords: int) -> int:
        """
        Reduce integer lattice coordinates to a single byte.

        Each coordinate is masked to a byte and folded into the running index
        through a table lookup, so every dimension influences the result.

        Args:
            *coords: One or more integer coordinates (negative values allowed)

        Returns:
            int: Value in 0..255
        """
        lookup = self._lookup
        index = coords[0] & 0xFF
        for c in coords[1:]:
            index = lookup[index] ^ (c & 0xFF)
        return lookup[index]

    def __repr__(self):
        return f"PermutationTable(seed={self.seed})"
