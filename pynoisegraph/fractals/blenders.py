"""
Layer blenders for the fractal engine.

A blender folds the ordered per-layer values of a fractal into one value.
Every blender carries a persistence, the per-layer amplitude decay.

Author: B.G.
"""

import copy

from .. import constants as cte
from ..general_algorithms.math_utils import clamp


class LayerBlender:
    """
    Base class for layer blenders.

    Author: B.G.
    """

    def __init__(self, persistence: float = cte.DEFAULT_PERSISTENCE):
        self.persistence = float(persistence)

    def with_persistence(self, persistence: float):
        new = copy.copy(self)
        new.persistence = float(persistence)
        return new

    def blend(self, values) -> float:
        """
        Fold layer values (layer 0 first) into one value.

        Args:
            values: Sequence of per-layer values

        Returns:
            float: Blended value

        Raises:
            ValueError: If values is empty
        """
        if len(values) == 0:
            raise ValueError(f"{type(self).__name__} needs at least one layer value")
        return self._blend(values)

    def _blend(self, values) -> float:
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self):
        return f"{type(self).__name__}(persistence={self.persistence})"


class HomogeneousBlender(LayerBlender):
    """Sum of the layer values, layer k weighted by persistence^k."""

    def _blend(self, values) -> float:
        result = 0.0
        amplitude = 1.0
        for value in values:
            result += value * amplitude
            amplitude *= self.persistence
        return result


class HeterogeneousBlender(LayerBlender):
    """
    Multifractal blend where each layer is also scaled by the result so far.

    Regions where the first layers are close to zero stay smooth; regions
    where they are large get rougher.
    """

    def _blend(self, values) -> float:
        result = values[0]
        amplitude = self.persistence
        for value in values[1:]:
            result += value * amplitude * result
            amplitude *= self.persistence
        return result


class RidgedBlender(LayerBlender):
    """
    Ridged multifractal blend.

    Each layer value is folded to (1 - |v|)^2 and weighted by the previous
    folded value divided by the attenuation, clamped to [0, 1]. The result is
    not remapped and lies in [0, sum of persistence^k].

    Author: B.G.
    """

    def __init__(self, persistence: float = cte.DEFAULT_PERSISTENCE, attenuation: float = cte.DEFAULT_ATTENUATION):
        super().__init__(persistence)
        self.attenuation = float(attenuation)

    def with_attenuation(self, attenuation: float):
        new = copy.copy(self)
        new.attenuation = float(attenuation)
        return new

    def _blend(self, values) -> float:
        result = 0.0
        amplitude = 1.0
        weight = 1.0
        for value in values:
            signal = (1.0 - abs(value)) ** 2 * weight
            weight = clamp(signal / self.attenuation, 0.0, 1.0)
            result += signal * amplitude
            amplitude *= self.persistence
        return result

    def __repr__(self):
        return f"RidgedBlender(persistence={self.persistence}, attenuation={self.attenuation})"


class BillowBlender(LayerBlender):
    """Homogeneous sum of the folded layer values 2|v| - 1."""

    def _blend(self, values) -> float:
        result = 0.0
        amplitude = 1.0
        for value in values:
            result += (2.0 * abs(value) - 1.0) * amplitude
            amplitude *= self.persistence
        return result
