"""
PyNoiseGraph: coherent noise functions and composable noise graphs.

Every node of a graph maps a 2, 3 or 4 dimensional point to a float. Leaf
generators (Perlin, simplex, Worley, ...) are combined, reshaped, selected,
warped and layered into fractals by composite nodes. Nodes are immutable: all
configuration goes through ``with_*`` calls returning new nodes, so any node
can be shared between parents and evaluated concurrently.

Submodules:
- general_algorithms: Points, seeding, permutation tables, gradients, curves
- base: NoiseFn evaluation contract and Seedable capability
- noise: Generators
- combiners: Add, Multiply, Power, Min, Max
- modifiers: Abs, Negate, Clamp, Exponent, ScaleBias
- selectors: Blend, Select
- transformers: Point transforms, Displace, Turbulence
- fractals: Fractal engine, layer blenders and presets
- constants: Default configuration values

Usage:
    import pynoisegraph as png

    granite = png.Add(
        png.fractals.billow(png.Worley(seed=3).with_return_type("distance"), layers=1),
        png.ScaleBias(png.fractals.fbm(png.Perlin(), frequency=8.0), scale=0.25),
    )
    value = granite.get([0.5, 0.5, 0.5])

Author: B.G.
"""

import logging

from . import constants
from . import general_algorithms
from . import base
from . import noise
from . import combiners
from . import modifiers
from . import selectors
from . import transformers
from . import fractals

from .base import NoiseFn, Seedable
from .combiners import Add, Combiner, Max, Min, Multiply, Power
from .fractals import (
    BillowBlender,
    Fractal,
    HeterogeneousBlender,
    HomogeneousBlender,
    RidgedBlender,
)
from .modifiers import Abs, Clamp, Exponent, Negate, ScaleBias
from .noise import (
    Checkerboard,
    Constant,
    Cylinders,
    OpenSimplex,
    Perlin,
    PerlinSurflet,
    SuperSimplex,
    Value,
    Worley,
)
from .selectors import Blend, Select
from .transformers import (
    AxisScale,
    Displace,
    Rotation,
    RotatePoint,
    ScalePoint,
    Transformed,
    TranslatePoint,
    Translation,
    Turbulence,
    UniformScale,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "constants", "general_algorithms", "base", "noise", "combiners",
    "modifiers", "selectors", "transformers", "fractals",
    "NoiseFn", "Seedable",
    "Checkerboard", "Constant", "Cylinders", "OpenSimplex", "Perlin",
    "PerlinSurflet", "SuperSimplex", "Value", "Worley",
    "Add", "Combiner", "Max", "Min", "Multiply", "Power",
    "Abs", "Clamp", "Exponent", "Negate", "ScaleBias",
    "Blend", "Select",
    "AxisScale", "Displace", "Rotation", "RotatePoint", "ScalePoint",
    "Transformed", "TranslatePoint", "Translation", "Turbulence", "UniformScale",
    "BillowBlender", "Fractal", "HeterogeneousBlender", "HomogeneousBlender", "RidgedBlender",
]
