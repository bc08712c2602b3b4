"""
Convenience nodes that scale, translate or rotate the input point.

Each node is a Transformed node with a fixed kind of transform and setters for
its parameters.

Author: B.G.
"""

from .transforms import AxisScale, Rotation, Transformed, Translation


class ScalePoint(Transformed):
    """
    Noise function that scales each coordinate of the point by its own factor.

    Author: B.G.
    """

    def __init__(self, source, x: float = 1.0, y: float = 1.0, z: float = 1.0, u: float = 1.0):
        super().__init__(source, AxisScale(x, y, z, u))

    @property
    def scale(self) -> tuple:
        return self.transform.factors

    def _with_factor(self, axis: int, value: float):
        factors = list(self.transform.factors)
        factors[axis] = value
        return self._evolve(transform=AxisScale(*factors))

    def with_x_scale(self, x: float):
        return self._with_factor(0, x)

    def with_y_scale(self, y: float):
        return self._with_factor(1, y)

    def with_z_scale(self, z: float):
        return self._with_factor(2, z)

    def with_u_scale(self, u: float):
        return self._with_factor(3, u)

    def with_scale(self, scale: float):
        """Use the same factor on every axis."""
        return self._evolve(transform=AxisScale(scale, scale, scale, scale))

    def with_all_scales(self, x: float, y: float, z: float, u: float):
        return self._evolve(transform=AxisScale(x, y, z, u))


class TranslatePoint(Transformed):
    """
    Noise function that moves the point by a per-axis offset.

    Author: B.G.
    """

    def __init__(self, source, x: float = 0.0, y: float = 0.0, z: float = 0.0, u: float = 0.0):
        super().__init__(source, Translation(x, y, z, u))

    @property
    def translation(self) -> tuple:
        return self.transform.offsets

    def _with_offset(self, axis: int, value: float):
        offsets = list(self.transform.offsets)
        offsets[axis] = value
        return self._evolve(transform=Translation(*offsets))

    def with_x_translation(self, x: float):
        return self._with_offset(0, x)

    def with_y_translation(self, y: float):
        return self._with_offset(1, y)

    def with_z_translation(self, z: float):
        return self._with_offset(2, z)

    def with_u_translation(self, u: float):
        return self._with_offset(3, u)

    def with_translation(self, translation: float):
        """Use the same offset on every axis."""
        t = translation
        return self._evolve(transform=Translation(t, t, t, t))

    def with_all_translations(self, x: float, y: float, z: float, u: float):
        return self._evolve(transform=Translation(x, y, z, u))


class RotatePoint(Transformed):
    """
    Noise function that rotates the point around the origin.

    Angles are in degrees around the x, y and z axes.

    Author: B.G.
    """

    def __init__(self, source, x_angle: float = 0.0, y_angle: float = 0.0, z_angle: float = 0.0):
        super().__init__(source, Rotation(x_angle, y_angle, z_angle))

    @property
    def angles(self) -> tuple:
        return self.transform.angles

    def with_angles(self, x_angle: float, y_angle: float, z_angle: float):
        return self._evolve(transform=Rotation(x_angle, y_angle, z_angle))

    def with_x_angle(self, x_angle: float):
        _, y, z = self.transform.angles
        return self.with_angles(x_angle, y, z)

    def with_y_angle(self, y_angle: float):
        x, _, z = self.transform.angles
        return self.with_angles(x, y_angle, z)

    def with_z_angle(self, z_angle: float):
        x, y, _ = self.transform.angles
        return self.with_angles(x, y, z_angle)
