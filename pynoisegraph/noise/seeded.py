"""
Shared base of the generators driven by a seeded permutation table.

Author: B.G.
"""

from .. import constants as cte
from ..base import NoiseFn, Seedable
from ..general_algorithms.permutation import PermutationTable
from ..general_algorithms.seeding import normalize_seed


class PermutationNoise(NoiseFn, Seedable):
    """
    Generator owning one permutation table built from its seed.

    Author: B.G.
    """

    def __init__(self, seed: int = cte.DEFAULT_SEED):
        self._seed = normalize_seed(seed)
        self._perm = PermutationTable(self._seed)

    @property
    def permutation_table(self) -> PermutationTable:
        return self._perm

    def with_seed(self, seed: int):
        """Return a copy of this generator with a table rebuilt from seed."""
        seed = normalize_seed(seed)
        return self._evolve(_seed=seed, _perm=PermutationTable(seed))

    def __repr__(self):
        return f"{type(self).__name__}(seed={self._seed})"
