"""
Fractal engine for PyNoiseGraph.

A fractal owns a stack of layers, each a copy of one seedable base function
reseeded from the fractal seed and the layer index. Evaluation samples layer 0
at the input point, then moves the point through the layer transform before
sampling each following layer, and hands the ordered values to a blender.

Author: B.G.
"""

import logging

from .. import constants as cte
from ..base import NoiseFn, Seedable
from ..general_algorithms.seeding import derive_seed, normalize_seed
from ..noise.perlin_noise import Perlin
from ..transformers.transforms import UniformScale
from .blenders import HomogeneousBlender

logger = logging.getLogger(__name__)


def _check_layers(layers) -> int:
    layers = int(layers)
    if layers < 1:
        raise ValueError(f"a fractal needs at least one layer, got {layers}")
    return layers


def _check_base(base):
    if not hasattr(base, "with_seed"):
        raise TypeError(f"fractal base must be seedable, got {type(base).__name__}")
    return base


class Fractal(NoiseFn, Seedable):
    """
    Multi-layer noise function built from a seedable base function.

    The seed of layer k only depends on the fractal seed and k, so resizing
    the stack never changes the layers that are kept.

    Author: B.G.
    """

    def __init__(
        self,
        base=None,
        layers: int = cte.DEFAULT_LAYERS,
        seed: int = cte.DEFAULT_FRACTAL_SEED,
        transform=None,
        blender=None,
        frequency: float = cte.DEFAULT_FRACTAL_FREQUENCY,
    ):
        """
        Args:
            base: Seedable noise function used as layer template (default: Perlin)
            layers: Number of layers (>= 1)
            seed: Fractal seed; layer seeds are derived from it
            transform: Point transform applied between layers
                (default: UniformScale of the default lacunarity)
            blender: Layer blender (default: HomogeneousBlender)
            frequency: Scale applied to the point before layer 0

        Raises:
            ValueError: If layers < 1
            TypeError: If base is not seedable
        """
        self._base = _check_base(Perlin() if base is None else base)
        self._seed = normalize_seed(seed)
        self._layers = self._build_layers(0, _check_layers(layers))
        self.transform = UniformScale(cte.DEFAULT_LACUNARITY) if transform is None else transform
        self.blender = HomogeneousBlender(cte.DEFAULT_PERSISTENCE) if blender is None else blender
        self.frequency = float(frequency)
        logger.debug(
            "Fractal of %d %s layers built (seed=%d, blender=%r)",
            len(self._layers), type(self._base).__name__, self._seed, self.blender,
        )

    def _build_layers(self, start: int, stop: int) -> tuple:
        return tuple(self._base.with_seed(derive_seed(self._seed, k)) for k in range(start, stop))

    @property
    def dimensions(self):
        return frozenset(self._base.dimensions & self.transform.dimensions)

    @property
    def base(self):
        return self._base

    @property
    def layers(self) -> int:
        """Number of layers."""
        return len(self._layers)

    @property
    def layer_functions(self) -> tuple:
        return self._layers

    @property
    def layer_seeds(self) -> tuple:
        return tuple(layer.seed for layer in self._layers)

    @property
    def persistence(self) -> float:
        return self.blender.persistence

    def with_layers(self, layers: int):
        """
        Return a copy with a resized layer stack.

        Retained layers are kept as they are; new layers get seeds derived
        from their index.

        Raises:
            ValueError: If layers < 1
        """
        layers = _check_layers(layers)
        current = len(self._layers)
        if layers <= current:
            stack = self._layers[:layers]
        else:
            stack = self._layers + self._build_layers(current, layers)
        logger.debug("Fractal resized from %d to %d layers", current, layers)
        return self._evolve(_layers=stack)

    def with_seed(self, seed: int):
        """Return a copy whose layers are all reseeded from seed."""
        new = self._evolve(_seed=normalize_seed(seed))
        new._layers = new._build_layers(0, len(self._layers))
        logger.debug("Fractal reseeded with %d", new._seed)
        return new

    def with_base(self, base):
        """
        Return a copy using another layer template, keeping seed and size.

        Raises:
            TypeError: If base is not seedable
        """
        new = self._evolve(_base=_check_base(base))
        new._layers = new._build_layers(0, len(self._layers))
        return new

    def with_transform(self, transform):
        return self._evolve(transform=transform)

    def with_lacunarity(self, lacunarity: float):
        """Use a uniform scale of lacunarity between layers."""
        return self._evolve(transform=UniformScale(lacunarity))

    def with_blender(self, blender):
        return self._evolve(blender=blender)

    def with_persistence(self, persistence: float):
        return self._evolve(blender=self.blender.with_persistence(persistence))

    def with_frequency(self, frequency: float):
        return self._evolve(frequency=float(frequency))

    def _get(self, point: tuple) -> float:
        point = tuple(c * self.frequency for c in point)
        values = []
        for layer in self._layers:
            values.append(layer.get(point))
            point = self.transform.apply(point)
        return self.blender.blend(values)

    def __repr__(self):
        return (
            f"Fractal({type(self._base).__name__}, layers={len(self._layers)}, "
            f"seed={self._seed}, transform={self.transform!r}, blender={self.blender!r}, "
            f"frequency={self.frequency})"
        )
