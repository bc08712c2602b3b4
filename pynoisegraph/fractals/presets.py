"""
Ready-made fractal configurations.

Author: B.G.
"""

from .. import constants as cte
from .blenders import BillowBlender, HeterogeneousBlender, HomogeneousBlender, RidgedBlender
from .fractal import Fractal


def fbm(
    base=None,
    seed: int = cte.DEFAULT_FRACTAL_SEED,
    layers: int = cte.DEFAULT_LAYERS,
    frequency: float = cte.DEFAULT_FRACTAL_FREQUENCY,
    lacunarity: float = cte.DEFAULT_LACUNARITY,
    persistence: float = cte.DEFAULT_PERSISTENCE,
) -> Fractal:
    """
    Fractal Brownian motion: homogeneous sum of layers.

    Args:
        base: Seedable layer template (default: Perlin)
        seed: Fractal seed
        layers: Number of layers
        frequency: Scale of layer 0
        lacunarity: Frequency growth between layers
        persistence: Amplitude decay between layers

    Returns:
        Fractal: Configured fractal
    """
    return Fractal(base, layers, seed, blender=HomogeneousBlender(persistence), frequency=frequency).with_lacunarity(
        lacunarity
    )


def billow(
    base=None,
    seed: int = cte.DEFAULT_FRACTAL_SEED,
    layers: int = cte.DEFAULT_LAYERS,
    frequency: float = cte.DEFAULT_FRACTAL_FREQUENCY,
    lacunarity: float = cte.DEFAULT_LACUNARITY,
    persistence: float = cte.DEFAULT_PERSISTENCE,
) -> Fractal:
    """Billowy fractal: every layer is folded with 2|v| - 1 before summing."""
    return Fractal(base, layers, seed, blender=BillowBlender(persistence), frequency=frequency).with_lacunarity(
        lacunarity
    )


def basic_multi(
    base=None,
    seed: int = cte.DEFAULT_FRACTAL_SEED,
    layers: int = cte.DEFAULT_LAYERS,
    frequency: float = cte.DEFAULT_FRACTAL_FREQUENCY,
    lacunarity: float = cte.DEFAULT_LACUNARITY,
    persistence: float = cte.DEFAULT_PERSISTENCE,
) -> Fractal:
    """Heterogeneous multifractal."""
    return Fractal(base, layers, seed, blender=HeterogeneousBlender(persistence), frequency=frequency).with_lacunarity(
        lacunarity
    )


def ridged_multi(
    base=None,
    seed: int = cte.DEFAULT_FRACTAL_SEED,
    layers: int = cte.DEFAULT_LAYERS,
    frequency: float = cte.DEFAULT_FRACTAL_FREQUENCY,
    lacunarity: float = cte.DEFAULT_LACUNARITY,
    persistence: float = cte.DEFAULT_PERSISTENCE,
    attenuation: float = cte.DEFAULT_ATTENUATION,
) -> Fractal:
    """Ridged multifractal, output in [0, sum of persistence^k]."""
    blender = RidgedBlender(persistence, attenuation)
    return Fractal(base, layers, seed, blender=blender, frequency=frequency).with_lacunarity(lacunarity)


def fractal_perlin(seed: int = cte.DEFAULT_FRACTAL_SEED, layers: int = cte.DEFAULT_LAYERS) -> Fractal:
    """Default Perlin fractal, the displacement field used by Turbulence."""
    return Fractal(layers=layers, seed=seed)
