"""
Scale and bias modifier.

Author: B.G.
"""

from .. import constants as cte
from .unary import Modifier


class ScaleBias(Modifier):
    """
    Noise function that outputs source * scale + bias.

    Author: B.G.
    """

    def __init__(self, source, scale: float = cte.DEFAULT_SCALE, bias: float = cte.DEFAULT_BIAS):
        super().__init__(source)
        self.scale = float(scale)
        self.bias = float(bias)

    def with_scale(self, scale: float):
        return self._evolve(scale=float(scale))

    def with_bias(self, bias: float):
        return self._evolve(bias=float(bias))

    def _get(self, point: tuple) -> float:
        return self.source.get(point) * self.scale + self.bias
