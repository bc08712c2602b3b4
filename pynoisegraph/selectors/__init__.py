"""
Selector nodes for PyNoiseGraph.

- Blend: Interpolate between two sources by a control source
- Select: Switch between two sources by a control range, with optional falloff

Author: B.G.
"""

from .blend import Blend
from .select import Select

__all__ = ["Blend", "Select"]
