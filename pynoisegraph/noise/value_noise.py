"""
Lattice value noise.

Each lattice corner carries a hashed pseudo-random value in [-1, 1]; values
are blended with quintic-smoothed linear interpolation.

Author: B.G.
"""

import math

from ..general_algorithms.math_utils import lerp, quintic_curve
from ..general_algorithms.point import is_finite
from .perlin_noise import CORNERS
from .seeded import PermutationNoise


class Value(PermutationNoise):
    """
    Noise function that outputs 2/3/4-dimensional value noise.

    Author: B.G.
    """

    def _get(self, point: tuple) -> float:
        if not is_finite(point):
            return math.nan
        d = len(point)
        cell = [math.floor(c) for c in point]
        frac = [c - i for c, i in zip(point, cell)]

        values = [
            self._perm.hash(*[i + o for i, o in zip(cell, corner)]) / 255.0 * 2.0 - 1.0
            for corner in CORNERS[d]
        ]
        for axis in range(d):
            w = quintic_curve(frac[axis])
            values = [lerp(values[k], values[k + 1], w) for k in range(0, len(values), 2)]
        return values[0]
