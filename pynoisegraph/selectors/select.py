"""
Select selector.

Author: B.G.
"""

from .. import constants as cte
from ..base import NoiseFn
from ..general_algorithms.math_utils import cubic_curve, lerp
from ..general_algorithms.point import common_dimensions


class Select(NoiseFn):
    """
    Noise function that outputs source1 or source2 depending on a control value.

    When the control value lies inside the selection range [lower, upper]
    (both ends included) the output comes from source2, otherwise from
    source1. A positive falloff smooths both edges of the range with a cubic
    ease over [edge - falloff, edge + falloff].

    Author: B.G.
    """

    def __init__(
        self,
        source1,
        source2,
        control,
        bounds: tuple = cte.DEFAULT_SELECT_BOUNDS,
        falloff: float = cte.DEFAULT_FALLOFF,
    ):
        self.source1 = source1
        self.source2 = source2
        self.control = control
        self.bounds = (float(bounds[0]), float(bounds[1]))
        self.falloff = float(falloff)

    @property
    def dimensions(self):
        return common_dimensions(self.source1, self.source2, self.control)

    def with_bounds(self, lower_bound: float, upper_bound: float):
        return self._evolve(bounds=(float(lower_bound), float(upper_bound)))

    def with_falloff(self, falloff: float):
        return self._evolve(falloff=float(falloff))

    def _get(self, point: tuple) -> float:
        control = self.control.get(point)
        lower, upper = self.bounds
        falloff = self.falloff

        if falloff > 0.0:
            if control < lower - falloff:
                return self.source1.get(point)
            if control < lower + falloff:
                alpha = cubic_curve((control - (lower - falloff)) / (2.0 * falloff))
                return lerp(self.source1.get(point), self.source2.get(point), alpha)
            if control < upper - falloff:
                return self.source2.get(point)
            if control < upper + falloff:
                alpha = cubic_curve((control - (upper - falloff)) / (2.0 * falloff))
                return lerp(self.source2.get(point), self.source1.get(point), alpha)
            return self.source1.get(point)

        if control < lower or control > upper:
            return self.source1.get(point)
        return self.source2.get(point)
