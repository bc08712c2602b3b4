"""
Evaluation contract shared by every node of a noise graph.

A noise function maps a 2, 3 or 4 dimensional point to a float. Nodes are
configured at construction; every ``with_*`` call returns a reconfigured copy
and leaves the receiver untouched, so a node can be shared by several parents
and evaluated from several threads.

Author: B.G.
"""

import copy

import numpy as np

from ..general_algorithms.point import DIMENSIONS, as_point
from ..general_algorithms.seeding import normalize_seed


class NoiseFn:
    """
    Base class for noise functions.

    Subclasses implement ``_get`` for an already validated point tuple and
    narrow ``dimensions`` when their algorithm only supports some arities.

    Author: B.G.
    """

    dimensions = DIMENSIONS

    def get(self, point) -> float:
        """
        Evaluate the noise function at a point.

        Args:
            point: Sequence of 2, 3 or 4 coordinates

        Returns:
            float: Noise value (typically in [-1, 1] for generators)

        Raises:
            ValueError: If the point arity is not supported by this node
        """
        return self._get(as_point(point, self.dimensions, type(self).__name__))

    def __call__(self, point) -> float:
        return self.get(point)

    def _get(self, point: tuple) -> float:
        raise NotImplementedError

    def get_many(self, points) -> np.ndarray:
        """
        Evaluate the noise function at every point of a sequence, in order.

        Args:
            points: Iterable of points (or an array of shape (n, d))

        Returns:
            numpy.ndarray: float64 array of n values
        """
        return np.array([self.get(p) for p in points], dtype=np.float64)

    def transformed(self, transform):
        """Wrap this node so every point goes through a point transform first."""
        from ..transformers.transforms import Transformed

        return Transformed(self, transform)

    def scaled(self, factor: float):
        """Wrap this node so every point is uniformly scaled by factor first."""
        from ..transformers.transforms import Transformed, UniformScale

        return Transformed(self, UniformScale(factor))

    def _evolve(self, **changes):
        """Return a shallow copy with some attributes replaced."""
        new = copy.copy(self)
        for name, value in changes.items():
            setattr(new, name, value)
        return new


class Seedable:
    """
    Mixin for noise functions whose output depends on a seed.

    Author: B.G.
    """

    _seed = 0

    @property
    def seed(self) -> int:
        """Unsigned 32-bit seed of this node."""
        return self._seed

    def with_seed(self, seed: int):
        """Return a copy of this node reseeded with seed."""
        return self._evolve(_seed=normalize_seed(seed))
