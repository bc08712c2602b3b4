"""
Concentric cylinders generator.

Author: B.G.
"""

import math

from .. import constants as cte
from ..base import NoiseFn


class Cylinders(NoiseFn):
    """
    Noise function that outputs concentric cylinders centered on the origin.

    The cylinders are aligned with the z axis, like the rings of a tree, and
    extend infinitely along it. Only the x and y coordinates are used.

    Author: B.G.
    """

    def __init__(self, frequency: float = cte.DEFAULT_CYLINDERS_FREQUENCY):
        self.frequency = float(frequency)

    def with_frequency(self, frequency: float):
        return self._evolve(frequency=float(frequency))

    def _get(self, point: tuple) -> float:
        x = point[0] * self.frequency
        y = point[1] * self.frequency

        dist_from_center = math.sqrt(x * x + y * y)
        if not math.isfinite(dist_from_center):
            return math.nan
        dist_from_smaller = dist_from_center - math.floor(dist_from_center)
        dist_from_larger = 1.0 - dist_from_smaller
        nearest = min(dist_from_smaller, dist_from_larger)

        # Shift the result to be in the -1.0 to +1.0 range.
        return 1.0 - nearest * 4.0
