"""
Single-source modifiers: shared base, absolute value and negation.

Author: B.G.
"""

from ..base import NoiseFn


class Modifier(NoiseFn):
    """
    Noise function that reshapes the output of one source.

    Author: B.G.
    """

    def __init__(self, source):
        self.source = source

    @property
    def dimensions(self):
        return self.source.dimensions

    def with_source(self, source):
        return self._evolve(source=source)


class Abs(Modifier):
    """Outputs the absolute value of the source value."""

    def _get(self, point: tuple) -> float:
        return abs(self.source.get(point))


class Negate(Modifier):
    """Outputs the negated source value."""

    def _get(self, point: tuple) -> float:
        return -self.source.get(point)
