"""
Checkerboard pattern generator.

Outputs 2^size sized blocks alternating between -1.0 and 1.0. Meant for
debugging graphs, not as a coherent noise source.

Author: B.G.
"""

import math

from .. import constants as cte
from ..base import NoiseFn
from ..general_algorithms.point import is_finite


class Checkerboard(NoiseFn):
    """
    Noise function that outputs a checkerboard pattern.

    Author: B.G.
    """

    def __init__(self, size: int = cte.DEFAULT_CHECKERBOARD_SIZE):
        """
        Args:
            size: Block size exponent, blocks are 2^size units wide
        """
        self._size = 1 << int(size)

    @property
    def size(self) -> int:
        """Block size in units (already raised to the power of two)."""
        return self._size

    def with_size(self, size: int):
        return self._evolve(_size=1 << int(size))

    def _get(self, point: tuple) -> float:
        if not is_finite(point):
            return math.nan
        mask = self._size
        result = 0
        for c in point:
            result = (result & mask) ^ (math.floor(c) & mask)
        return -1.0 if result > 0 else 1.0
