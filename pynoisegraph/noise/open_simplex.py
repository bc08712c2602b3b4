"""
Open simplex noise for PyNoiseGraph.

The point is skewed onto the simplex lattice and the d+1 vertices of the
containing simplex each add a radially symmetric contribution
(r^2 - |offset|^2)^4 * dot(gradient, offset). The kernel radius equals the
altitude of the lattice simplices, so a vertex's contribution vanishes on the
face opposite to it and the noise is continuous across simplex boundaries.

Author: B.G.
"""

import math

from .. import constants as cte
from ..general_algorithms.gradients import grad_dot
from ..general_algorithms.point import is_finite
from ..general_algorithms.simplex_lattice import simplex_vertices, skew_constants
from .seeded import PermutationNoise

_SKEW = {d: skew_constants(d) for d in (2, 3, 4)}


class OpenSimplex(PermutationNoise):
    """
    Noise function that outputs 2/3/4-dimensional open simplex noise.

    Author: B.G.
    """

    def _get(self, point: tuple) -> float:
        if not is_finite(point):
            return math.nan
        d = len(point)
        skew, unskew = _SKEW[d]
        radius_sq = cte.OPEN_SIMPLEX_RADIUS_SQ

        total = 0.0
        for vertex, offset in simplex_vertices(point, skew, unskew):
            attn = radius_sq - sum(o * o for o in offset)
            if attn > 0.0:
                attn *= attn
                total += attn * attn * grad_dot(d, self._perm.hash(*vertex), offset)
        return total * cte.OPEN_SIMPLEX_SCALE[d]
