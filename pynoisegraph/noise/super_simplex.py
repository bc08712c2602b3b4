"""
Super simplex noise for PyNoiseGraph.

Uses the stretched simplex lattice (the regular lattice scaled by sqrt(d+1)
with mirrored cell diagonals) and a wide kernel whose radius reaches the
neighbouring simplices. Every lattice vertex of the 4^d block of cells around
the point is tested against the kernel: the block covers every vertex closer
than the kernel radius, so the sum is exact and smooth.

Only 2D and 3D points are supported.

Author: B.G.
"""

import math

from .. import constants as cte
from ..general_algorithms.gradients import grad_dot
from ..general_algorithms.point import is_finite
from ..general_algorithms.simplex_lattice import lattice_block, stretch_constants
from .seeded import PermutationNoise

_STRETCH = {d: stretch_constants(d) for d in (2, 3)}


class SuperSimplex(PermutationNoise):
    """
    Noise function that outputs 2/3-dimensional super simplex noise.

    Author: B.G.
    """

    dimensions = frozenset((2, 3))

    def _get(self, point: tuple) -> float:
        if not is_finite(point):
            return math.nan
        d = len(point)
        stretch, squish = _STRETCH[d]
        radius_sq = cte.SUPER_SIMPLEX_RADIUS_SQ[d]

        total = 0.0
        for vertex, offset in lattice_block(point, stretch, squish):
            attn = radius_sq - sum(o * o for o in offset)
            if attn > 0.0:
                attn *= attn
                total += attn * attn * grad_dot(d, self._perm.hash(*vertex), offset)
        return total * cte.SUPER_SIMPLEX_SCALE[d]
