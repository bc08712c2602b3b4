"""
Fractal engine for PyNoiseGraph.

Stacks of reseeded copies of one base generator, sampled at successively
transformed points and folded by a layer blender.

Core Modules:
- fractal: The Fractal node (layer stack, transform, blender, frequency)
- blenders: Homogeneous, heterogeneous, ridged and billow layer blenders
- presets: fbm, billow, basic_multi, ridged_multi, fractal_perlin

Usage:
    import pynoisegraph as png

    terrain = png.fractals.ridged_multi(png.noise.OpenSimplex(), layers=8)
    height = terrain.get([0.3, 1.7])

Author: B.G.
"""

from .blenders import BillowBlender, HeterogeneousBlender, HomogeneousBlender, LayerBlender, RidgedBlender
from .fractal import Fractal
from .presets import basic_multi, billow, fbm, fractal_perlin, ridged_multi

__all__ = [
    "BillowBlender", "HeterogeneousBlender", "HomogeneousBlender", "LayerBlender", "RidgedBlender",
    "Fractal",
    "basic_multi", "billow", "fbm", "fractal_perlin", "ridged_multi",
]
