"""
Worley (cellular) noise for PyNoiseGraph.

Every unit cell of the (frequency scaled) lattice holds one pseudo-random
feature point derived from the cell's integer coordinates. The output is
either the pseudo-random value of the nearest feature point or a quantity
derived from the distances to the nearest and second-nearest feature points.

The search starts with the 3^d cells around the point and grows ring by ring
until no unvisited cell can hold a feature point closer than the ones
already found, so the result is exact for any feature layout.

Author: B.G.
"""

import itertools
import math

from .. import constants as cte
from ..general_algorithms.math_utils import scale_shift
from ..general_algorithms.point import DIMENSIONS, is_finite
from .seeded import PermutationNoise


def euclidean(offset) -> float:
    return math.sqrt(sum(o * o for o in offset))


def euclidean_squared(offset) -> float:
    return sum(o * o for o in offset)


def manhattan(offset) -> float:
    return sum(abs(o) for o in offset)


def chebyshev(offset) -> float:
    return max(abs(o) for o in offset)


# name -> (distance, lower bound of the distance for a given per-axis gap)
DISTANCE_FUNCTIONS = {
    "euclidean": (euclidean, lambda gap: gap),
    "euclidean_squared": (euclidean_squared, lambda gap: gap * gap),
    "manhattan": (manhattan, lambda gap: gap),
    "chebyshev": (chebyshev, lambda gap: gap),
}

RETURN_TYPES = (
    "value",
    "distance",
    "distance2",
    "distance2_add",
    "distance2_sub",
    "distance2_mul",
    "distance2_div",
)


def _build_shell(dimension: int, radius: int) -> tuple:
    """Cell offsets whose largest absolute component equals radius."""
    if radius == 0:
        return ((0,) * dimension,)
    return tuple(
        delta
        for delta in itertools.product(range(-radius, radius + 1), repeat=dimension)
        if max(abs(o) for o in delta) == radius
    )


# Filled at import, never written during evaluation
_SHELLS = {(d, r): _build_shell(d, r) for d in DIMENSIONS for r in range(4)}


def _shell(dimension: int, radius: int) -> tuple:
    cells = _SHELLS.get((dimension, radius))
    if cells is None:
        cells = _build_shell(dimension, radius)
    return cells


class Worley(PermutationNoise):
    """
    Noise function that outputs Worley noise.

    Author: B.G.
    """

    def __init__(
        self,
        seed: int = cte.DEFAULT_SEED,
        frequency: float = cte.DEFAULT_WORLEY_FREQUENCY,
        return_type: str = cte.DEFAULT_WORLEY_RETURN_TYPE,
        distance_function: str = cte.DEFAULT_WORLEY_DISTANCE,
    ):
        """
        Initialize a Worley generator.

        Args:
            seed: Seed of the permutation table (default: 0)
            frequency: Number of cells per input unit (default: 1.0)
            return_type: One of 'value', 'distance', 'distance2',
                'distance2_add', 'distance2_sub', 'distance2_mul',
                'distance2_div' (default: 'value')
            distance_function: One of 'euclidean', 'euclidean_squared',
                'manhattan', 'chebyshev' (default: 'euclidean')

        Raises:
            ValueError: If return_type or distance_function is unknown
        """
        super().__init__(seed)
        self.frequency = float(frequency)
        self.return_type = self._check_return_type(return_type)
        self.distance_function = self._check_distance(distance_function)

    @staticmethod
    def _check_return_type(return_type: str) -> str:
        if return_type not in RETURN_TYPES:
            raise ValueError(f"return_type must be one of {RETURN_TYPES}, got '{return_type}'")
        return return_type

    @staticmethod
    def _check_distance(name: str) -> str:
        if name not in DISTANCE_FUNCTIONS:
            raise ValueError(
                f"distance_function must be one of {tuple(DISTANCE_FUNCTIONS)}, got '{name}'"
            )
        return name

    def with_frequency(self, frequency: float):
        return self._evolve(frequency=float(frequency))

    def with_return_type(self, return_type: str):
        return self._evolve(return_type=self._check_return_type(return_type))

    def with_distance_function(self, distance_function: str):
        return self._evolve(distance_function=self._check_distance(distance_function))

    def feature_point(self, cell: tuple) -> tuple:
        """
        Feature point of a lattice cell, strictly inside the cell.

        Args:
            cell: Integer coordinates of the cell

        Returns:
            tuple: Feature point coordinates (in frequency-scaled space)
        """
        return tuple(
            c + (self._perm.hash(*cell, axis) + 0.5) / 256.0
            for axis, c in enumerate(cell)
        )

    def _get(self, point: tuple) -> float:
        d = len(point)
        point = tuple(c * self.frequency for c in point)
        if not is_finite(point):
            return math.nan
        cell = tuple(math.floor(c) for c in point)
        distance, bound = DISTANCE_FUNCTIONS[self.distance_function]
        needs_second = self.return_type.startswith("distance2")

        # Distance from the point to the faces of its own cell
        margin = min(min(c - i, 1.0 - (c - i)) for c, i in zip(point, cell))

        nearest = second = math.inf
        nearest_cell = cell
        radius = 0
        while True:
            for delta in _shell(d, radius):
                candidate = tuple(i + o for i, o in zip(cell, delta))
                feature = self.feature_point(candidate)
                dist = distance([f - p for f, p in zip(feature, point)])
                if dist < nearest:
                    second = nearest
                    nearest = dist
                    nearest_cell = candidate
                elif dist < second:
                    second = dist

            # Cells outside the searched block are at least radius + margin away
            needed = second if needs_second else nearest
            if radius >= 1 and bound(radius + margin) >= needed:
                break
            radius += 1

        if self.return_type == "value":
            return self._perm.hash(*nearest_cell) / 255.0 * 2.0 - 1.0
        if self.return_type == "distance":
            value = nearest
        elif self.return_type == "distance2":
            value = second
        elif self.return_type == "distance2_add":
            value = nearest + second
        elif self.return_type == "distance2_sub":
            value = second - nearest
        elif self.return_type == "distance2_mul":
            value = nearest * second
        else:
            value = nearest / second if second > 0.0 else 0.0
        return scale_shift(value, 2.0)

    def __repr__(self):
        return (
            f"Worley(seed={self._seed}, frequency={self.frequency}, "
            f"return_type='{self.return_type}', distance_function='{self.distance_function}')"
        )
