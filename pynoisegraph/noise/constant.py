"""
Constant-valued noise function.

Author: B.G.
"""

from ..base import NoiseFn


class Constant(NoiseFn):
    """
    Noise function that outputs the same value for every point.

    Not useful by itself, but handy as a source for combiners, selectors and
    modifiers.

    Author: B.G.
    """

    def __init__(self, value: float):
        self.value = float(value)

    def with_value(self, value: float):
        return self._evolve(value=float(value))

    def _get(self, point: tuple) -> float:
        return self.value

    def __repr__(self):
        return f"Constant({self.value!r})"
