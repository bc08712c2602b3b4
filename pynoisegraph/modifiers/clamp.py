"""
Clamp modifier.

Author: B.G.
"""

from .. import constants as cte
from ..general_algorithms.math_utils import clamp
from .unary import Modifier


class Clamp(Modifier):
    """
    Noise function that clamps the source value to a range.

    The bounds are applied as given. A lower bound above the upper bound is
    accepted: values below the lower bound map to it and every other value
    maps to the upper bound.

    Author: B.G.
    """

    def __init__(self, source, bounds: tuple = cte.DEFAULT_CLAMP_BOUNDS):
        super().__init__(source)
        self.bounds = (float(bounds[0]), float(bounds[1]))

    def with_lower_bound(self, lower_bound: float):
        return self._evolve(bounds=(float(lower_bound), self.bounds[1]))

    def with_upper_bound(self, upper_bound: float):
        return self._evolve(bounds=(self.bounds[0], float(upper_bound)))

    def with_bounds(self, lower_bound: float, upper_bound: float):
        return self._evolve(bounds=(float(lower_bound), float(upper_bound)))

    def _get(self, point: tuple) -> float:
        return clamp(self.source.get(point), self.bounds[0], self.bounds[1])
