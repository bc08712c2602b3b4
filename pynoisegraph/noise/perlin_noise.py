"""
Perlin gradient noise for PyNoiseGraph.

Classic lattice gradient noise in 2, 3 and 4 dimensions: every corner of the
unit hypercube around the point contributes the dot product of its hashed
gradient with the corner-to-point offset, and the 2^d contributions are
blended axis by axis with quintic-smoothed weights. The output is exactly 0.0
at every integer lattice point.

Author: B.G.
"""

import math

from .. import constants as cte
from ..general_algorithms.gradients import grad_dot
from ..general_algorithms.math_utils import lerp, quintic_curve
from ..general_algorithms.point import is_finite
from .seeded import PermutationNoise

# Corner offsets with axis 0 varying fastest, so pairs (2k, 2k+1) differ
# along the axis being interpolated at each reduction step.
CORNERS = {
    d: tuple(tuple((n >> axis) & 1 for axis in range(d)) for n in range(1 << d))
    for d in (2, 3, 4)
}


def perlin_at(point: tuple, perm) -> float:
    """
    Generate unscaled Perlin noise at a point.

    Args:
        point: 2, 3 or 4 float coordinates
        perm: PermutationTable used to hash lattice corners

    Returns:
        float: Raw noise value (0.0 on lattice points, NaN for a
        non-finite point)
    """
    if not is_finite(point):
        return math.nan
    d = len(point)
    cell = [math.floor(c) for c in point]
    frac = [c - i for c, i in zip(point, cell)]

    values = []
    for corner in CORNERS[d]:
        h = perm.hash(*[i + o for i, o in zip(cell, corner)])
        values.append(grad_dot(d, h, [f - o for f, o in zip(frac, corner)]))

    # Collapse one axis per pass
    for axis in range(d):
        w = quintic_curve(frac[axis])
        values = [lerp(values[k], values[k + 1], w) for k in range(0, len(values), 2)]
    return values[0]


class Perlin(PermutationNoise):
    """
    Noise function that outputs 2/3/4-dimensional Perlin noise.

    Author: B.G.
    """

    def _get(self, point: tuple) -> float:
        return perlin_at(point, self._perm) * cte.PERLIN_SCALE[len(point)]
