"""
Perlin surflet noise.

Same lattice walk as Perlin noise, but each corner's gradient contribution is
attenuated by a radial (1 - r^2)^4 falloff and the contributions are summed
instead of interpolated.

Author: B.G.
"""

import math

from .. import constants as cte
from ..general_algorithms.gradients import grad_dot
from ..general_algorithms.point import is_finite
from .perlin_noise import CORNERS
from .seeded import PermutationNoise


class PerlinSurflet(PermutationNoise):
    """
    Noise function that outputs 2/3/4-dimensional Perlin surflet noise.

    Author: B.G.
    """

    def _get(self, point: tuple) -> float:
        if not is_finite(point):
            return math.nan
        d = len(point)
        cell = [math.floor(c) for c in point]
        frac = [c - i for c, i in zip(point, cell)]

        total = 0.0
        for corner in CORNERS[d]:
            offset = [f - o for f, o in zip(frac, corner)]
            attn = 1.0 - sum(o * o for o in offset)
            if attn > 0.0:
                h = self._perm.hash(*[i + o for i, o in zip(cell, corner)])
                attn *= attn
                total += attn * attn * grad_dot(d, h, offset)
        return total * cte.SURFLET_SCALE[d]
