"""
Exponent modifier.

Author: B.G.
"""

from .. import constants as cte
from ..general_algorithms.math_utils import safe_pow, scale_shift
from .unary import Modifier


class Exponent(Modifier):
    """
    Noise function that maps the source value onto an exponential curve.

    The source value is first normalised from [-1, 1] to [0, 1], raised to the
    exponent, then mapped back onto [-1, 1].

    Author: B.G.
    """

    def __init__(self, source, exponent: float = cte.DEFAULT_EXPONENT):
        super().__init__(source)
        self.exponent = float(exponent)

    def with_exponent(self, exponent: float):
        return self._evolve(exponent=float(exponent))

    def _get(self, point: tuple) -> float:
        value = abs((self.source.get(point) + 1.0) / 2.0)
        return scale_shift(safe_pow(value, self.exponent), 2.0)
