"""
Modifier nodes for PyNoiseGraph.

Unary nodes that reshape the output of a single source:
- Abs: Absolute value
- Negate: Sign flip
- Clamp: Clamp to [lower, upper] as given
- Exponent: Exponential curve on the [0, 1]-normalised value
- ScaleBias: Affine value * scale + bias

Author: B.G.
"""

from .clamp import Clamp
from .exponent import Exponent
from .scale_bias import ScaleBias
from .unary import Abs, Modifier, Negate

__all__ = ["Abs", "Clamp", "Exponent", "Modifier", "Negate", "ScaleBias"]
