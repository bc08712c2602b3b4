"""
Blend selector.

Author: B.G.
"""

from ..base import NoiseFn
from ..general_algorithms.math_utils import lerp
from ..general_algorithms.point import common_dimensions


class Blend(NoiseFn):
    """
    Noise function that linearly interpolates between two sources.

    The control value is used as the interpolation factor without clamping:
    0 gives source1, 1 gives source2, values outside [0, 1] extrapolate.

    Author: B.G.
    """

    def __init__(self, source1, source2, control):
        self.source1 = source1
        self.source2 = source2
        self.control = control

    @property
    def dimensions(self):
        return common_dimensions(self.source1, self.source2, self.control)

    def _get(self, point: tuple) -> float:
        lower = self.source1.get(point)
        upper = self.source2.get(point)
        return lerp(lower, upper, self.control.get(point))
