"""
Transformer nodes for PyNoiseGraph.

Nodes that change the point before delegating to a source:
- Point transforms: UniformScale, AxisScale, Translation, Rotation
- Transformed: Evaluate a source at a transformed point
- ScalePoint / TranslatePoint / RotatePoint: Per-axis configurable wrappers
- Displace: Offset each axis by the value of another noise function
- Turbulence: Domain warping by four fractal Perlin displacement fields

Usage:
    import pynoisegraph as png

    warped = png.transformers.Turbulence(png.noise.Perlin(), frequency=4.0, power=0.125)
    value = warped.get([0.5, 0.25, 1.0])

Author: B.G.
"""

from .displace import Displace
from .point_nodes import RotatePoint, ScalePoint, TranslatePoint
from .transforms import AxisScale, PointTransform, Rotation, Transformed, Translation, UniformScale
from .turbulence import DISTORTER_OFFSETS, Turbulence

__all__ = [
    "Displace",
    "RotatePoint", "ScalePoint", "TranslatePoint",
    "AxisScale", "PointTransform", "Rotation", "Transformed", "Translation", "UniformScale",
    "DISTORTER_OFFSETS", "Turbulence",
]
