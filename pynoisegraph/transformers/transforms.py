"""
Point transforms and the Transformed node.

A point transform maps a point to another point of the same arity. The
Transformed node applies one to every point before delegating to its source;
the fractal engine applies one between successive layers.

Author: B.G.
"""

import math

from ..base import NoiseFn
from ..general_algorithms.point import DIMENSIONS


class PointTransform:
    """
    Base class for point transforms.

    Author: B.G.
    """

    dimensions = DIMENSIONS

    def apply(self, point: tuple) -> tuple:
        raise NotImplementedError

    def __call__(self, point: tuple) -> tuple:
        return self.apply(point)

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))


class UniformScale(PointTransform):
    """Multiplies every coordinate by the same factor."""

    def __init__(self, scale: float = 1.0):
        self.scale = float(scale)

    def apply(self, point: tuple) -> tuple:
        return tuple(c * self.scale for c in point)

    def __repr__(self):
        return f"UniformScale({self.scale})"


class AxisScale(PointTransform):
    """Multiplies each coordinate by its own factor (x, y, z, u)."""

    def __init__(self, x: float = 1.0, y: float = 1.0, z: float = 1.0, u: float = 1.0):
        self.factors = (float(x), float(y), float(z), float(u))

    def apply(self, point: tuple) -> tuple:
        return tuple(c * f for c, f in zip(point, self.factors))

    def __repr__(self):
        return "AxisScale({}, {}, {}, {})".format(*self.factors)


class Translation(PointTransform):
    """Adds a per-axis offset (x, y, z, u) to each coordinate."""

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, u: float = 0.0):
        self.offsets = (float(x), float(y), float(z), float(u))

    def apply(self, point: tuple) -> tuple:
        return tuple(c + o for c, o in zip(point, self.offsets))

    def __repr__(self):
        return "Translation({}, {}, {}, {})".format(*self.offsets)


class Rotation(PointTransform):
    """
    Rotates points around the origin.

    Angles are in degrees, around the x, y and z axes. 2D points are treated
    as lying in the z = 0 plane and only the first two rows of the rotation
    matrix are used. The fourth coordinate of 4D points is left unchanged.

    Author: B.G.
    """

    def __init__(self, x_angle: float = 0.0, y_angle: float = 0.0, z_angle: float = 0.0):
        self.angles = (float(x_angle), float(y_angle), float(z_angle))
        self._matrix = _rotation_matrix(*self.angles)

    def apply(self, point: tuple) -> tuple:
        m = self._matrix
        if len(point) == 2:
            x, y = point
            return (m[0][0] * x + m[0][1] * y, m[1][0] * x + m[1][1] * y)
        x, y, z = point[:3]
        rotated = tuple(row[0] * x + row[1] * y + row[2] * z for row in m)
        return rotated + tuple(point[3:])

    def __eq__(self, other):
        return type(self) is type(other) and self.angles == other.angles

    def __hash__(self):
        return hash((type(self), self.angles))

    def __repr__(self):
        return "Rotation({}, {}, {})".format(*self.angles)


def _rotation_matrix(x_angle: float, y_angle: float, z_angle: float) -> tuple:
    """
    Build the 3x3 rotation matrix for angles in degrees.

    Rows give the rotated x, y and z coordinates in terms of the input x, y
    and z.
    """
    x_cos, x_sin = math.cos(math.radians(x_angle)), math.sin(math.radians(x_angle))
    y_cos, y_sin = math.cos(math.radians(y_angle)), math.sin(math.radians(y_angle))
    z_cos, z_sin = math.cos(math.radians(z_angle)), math.sin(math.radians(z_angle))

    x1 = y_sin * x_sin * z_sin + y_cos * z_cos
    y1 = x_cos * z_sin
    z1 = y_sin * z_cos - y_cos * x_sin * z_sin
    x2 = y_sin * x_sin * z_cos - y_cos * z_sin
    y2 = x_cos * z_cos
    z2 = -y_cos * x_sin * z_cos - y_sin * z_sin
    x3 = -y_sin * x_cos
    y3 = x_sin
    z3 = y_cos * x_cos

    return ((x1, y1, z1), (x2, y2, z2), (x3, y3, z3))


class Transformed(NoiseFn):
    """
    Noise function that evaluates its source at a transformed point.

    Reseeding a Transformed node reseeds its source and keeps the transform.

    Author: B.G.
    """

    def __init__(self, source, transform: PointTransform):
        self.source = source
        self.transform = transform

    @property
    def dimensions(self):
        return frozenset(self.source.dimensions & self.transform.dimensions)

    @property
    def seed(self) -> int:
        return self.source.seed

    def with_seed(self, seed: int):
        """
        Return a copy whose source is reseeded with seed.

        Raises:
            TypeError: If the source is not seedable
        """
        if not hasattr(self.source, "with_seed"):
            raise TypeError(f"{type(self.source).__name__} has no seed")
        return self._evolve(source=self.source.with_seed(seed))

    def with_source(self, source):
        return self._evolve(source=source)

    def with_transform(self, transform: PointTransform):
        return self._evolve(transform=transform)

    def _get(self, point: tuple) -> float:
        return self.source.get(self.transform.apply(point))

    def __repr__(self):
        return f"Transformed({self.source!r}, {self.transform!r})"
