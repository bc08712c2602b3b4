"""
Turbulence: domain warping by fractal Perlin noise.

Author: B.G.
"""

import logging

from .. import constants as cte
from ..base import NoiseFn, Seedable
from ..general_algorithms.point import DIMENSIONS
from ..general_algorithms.seeding import derive_seed, normalize_seed
from ..fractals.presets import fractal_perlin
from .transforms import Transformed, UniformScale

logger = logging.getLogger(__name__)

# Offsets added to the point before sampling distorter k, in units of 1/65536.
# None of them is a multiple of 1/2, so displacement fields are never sampled
# on the Perlin lattice where they vanish.
DISTORTER_OFFSETS = tuple(
    tuple(v / 65536.0 for v in row)
    for row in (
        (12414.0, 65124.0, 31337.0, 57948.0),
        (26519.0, 18128.0, 60943.0, 48513.0),
        (53820.0, 11213.0, 44845.0, 39357.0),
        (18128.0, 44845.0, 12414.0, 60943.0),
    )
)


class Turbulence(NoiseFn, Seedable):
    """
    Noise function that randomly displaces the point before evaluating its
    source.

    Coordinate k of the point is moved by power times the value of the k-th
    displacement field, a fractal Perlin noise scaled by frequency. The four
    fields have distinct seeds derived from the Turbulence seed, and
    roughness sets their number of layers. With power 0 the output equals
    the source output at the same point.

    Author: B.G.
    """

    def __init__(
        self,
        source,
        seed: int = cte.DEFAULT_TURBULENCE_SEED,
        frequency: float = cte.DEFAULT_TURBULENCE_FREQUENCY,
        power: float = cte.DEFAULT_TURBULENCE_POWER,
        roughness: int = cte.DEFAULT_TURBULENCE_ROUGHNESS,
    ):
        """
        Args:
            source: Noise function evaluated at the displaced point
            seed: Seed of the displacement fields
            frequency: Frequency of the displacement fields
            power: Displacement strength
            roughness: Number of layers of each displacement field (>= 1)

        Raises:
            ValueError: If roughness < 1
        """
        self.source = source
        self._seed = normalize_seed(seed)
        self.frequency = float(frequency)
        self.power = float(power)
        self.roughness = _check_roughness(roughness)
        self._distorters = self._build_distorters()
        logger.debug(
            "Turbulence built (seed=%d, frequency=%s, roughness=%d)",
            self._seed, self.frequency, self.roughness,
        )

    def _build_distorters(self) -> tuple:
        return tuple(
            Transformed(
                fractal_perlin(seed=derive_seed(self._seed, k), layers=self.roughness),
                UniformScale(self.frequency),
            )
            for k in range(len(DISTORTER_OFFSETS))
        )

    @property
    def dimensions(self):
        return frozenset(self.source.dimensions & DIMENSIONS)

    @property
    def distorters(self) -> tuple:
        return self._distorters

    def with_source(self, source):
        return self._evolve(source=source)

    def with_seed(self, seed: int):
        new = self._evolve(_seed=normalize_seed(seed))
        new._distorters = new._build_distorters()
        logger.debug("Turbulence reseeded with %d", new._seed)
        return new

    def with_frequency(self, frequency: float):
        scale = UniformScale(frequency)
        return self._evolve(
            frequency=float(frequency),
            _distorters=tuple(d.with_transform(scale) for d in self._distorters),
        )

    def with_power(self, power: float):
        return self._evolve(power=float(power))

    def with_roughness(self, roughness: int):
        """
        Return a copy whose displacement fields have roughness layers.

        Raises:
            ValueError: If roughness < 1
        """
        roughness = _check_roughness(roughness)
        logger.debug("Turbulence roughness set to %d", roughness)
        return self._evolve(
            roughness=roughness,
            _distorters=tuple(d.with_source(d.source.with_layers(roughness)) for d in self._distorters),
        )

    def _get(self, point: tuple) -> float:
        d = len(point)
        displaced = tuple(
            point[k] + self._distorters[k].get(
                tuple(c + o for c, o in zip(point, DISTORTER_OFFSETS[k][:d]))
            ) * self.power
            for k in range(d)
        )
        return self.source.get(displaced)

    def __repr__(self):
        return (
            f"Turbulence({self.source!r}, seed={self._seed}, frequency={self.frequency}, "
            f"power={self.power}, roughness={self.roughness})"
        )


def _check_roughness(roughness) -> int:
    roughness = int(roughness)
    if roughness < 1:
        raise ValueError(f"turbulence roughness must be at least 1, got {roughness}")
    return roughness
