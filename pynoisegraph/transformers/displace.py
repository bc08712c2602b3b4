"""
Displace node.

Author: B.G.
"""

from ..base import NoiseFn
from ..general_algorithms.point import common_dimensions

AXES = ("x", "y", "z", "u")


class Displace(NoiseFn):
    """
    Noise function that moves each coordinate by the value of a displacement
    source before evaluating its source.

    Every displacement source is evaluated at the original point. An axis
    whose displacement is None is left unchanged, and displacements of axes
    beyond the point arity are ignored.

    Author: B.G.
    """

    def __init__(self, source, x=None, y=None, z=None, u=None):
        """
        Args:
            source: Noise function evaluated at the displaced point
            x, y, z, u: Noise functions giving the offset of each axis (or None)
        """
        self.source = source
        self.displacements = (x, y, z, u)

    @property
    def dimensions(self):
        return common_dimensions(self.source, *[d for d in self.displacements if d is not None])

    def _with_axis(self, axis: int, displacement):
        displacements = list(self.displacements)
        displacements[axis] = displacement
        return self._evolve(displacements=tuple(displacements))

    def with_source(self, source):
        return self._evolve(source=source)

    def with_x_displacement(self, displacement):
        return self._with_axis(0, displacement)

    def with_y_displacement(self, displacement):
        return self._with_axis(1, displacement)

    def with_z_displacement(self, displacement):
        return self._with_axis(2, displacement)

    def with_u_displacement(self, displacement):
        return self._with_axis(3, displacement)

    def _get(self, point: tuple) -> float:
        displaced = tuple(
            c if d is None else c + d.get(point)
            for c, d in zip(point, self.displacements)
        )
        return self.source.get(displaced)

    def __repr__(self):
        parts = [repr(self.source)]
        parts += [f"{a}={d!r}" for a, d in zip(AXES, self.displacements) if d is not None]
        return f"Displace({', '.join(parts)})"
