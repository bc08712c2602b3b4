"""
Noise generation module for PyNoiseGraph.

Leaf nodes of a noise graph. Each generator consumes only the point and its
own seeded state; composite nodes build on top of them.

Noise Types:
- Constant: The same value everywhere
- Checkerboard: Alternating -1/1 blocks of 2^size units (debugging aid)
- Cylinders: Concentric z-aligned rings
- Perlin: Lattice gradient noise, zero on integer points
- PerlinSurflet: Perlin lattice walk with radial corner falloff
- Value: Lattice value noise
- OpenSimplex: Gradient noise on the simplex lattice (2D/3D/4D)
- SuperSimplex: Wide-kernel simplex noise on the stretched lattice (2D/3D)
- Worley: Cellular noise from per-cell feature points

Usage:
    import pynoisegraph as png

    perlin = png.noise.Perlin(seed=42)
    value = perlin.get([42.4, 37.7, 2.8])

    cells = png.noise.Worley(seed=1).with_frequency(16.0).with_return_type("distance")

Author: B.G.
"""

from .checkerboard import Checkerboard
from .constant import Constant
from .cylinders import Cylinders
from .open_simplex import OpenSimplex
from .perlin_noise import Perlin, perlin_at
from .perlin_surflet import PerlinSurflet
from .seeded import PermutationNoise
from .super_simplex import SuperSimplex
from .value_noise import Value
from .worley_noise import DISTANCE_FUNCTIONS, RETURN_TYPES, Worley

__all__ = [
    "Checkerboard",
    "Constant",
    "Cylinders",
    "OpenSimplex",
    "Perlin", "perlin_at",
    "PerlinSurflet",
    "PermutationNoise",
    "SuperSimplex",
    "Value",
    "DISTANCE_FUNCTIONS", "RETURN_TYPES", "Worley",
]
