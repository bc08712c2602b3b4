"""
General algorithms submodule for PyNoiseGraph.

Building blocks shared by every noise function: the point abstraction, seed
derivation, the seeded permutation table, gradient tables, scalar
interpolation helpers and the simplex lattice walker.

Core Modules:
- point: Point conversion and dimensionality checks
- seeding: Seed normalisation and per-index seed derivation
- permutation: Fisher-Yates permutation table with coordinate hashing
- gradients: 2D/3D/4D gradient vector tables
- math_utils: Interpolation, s-curves and range remapping
- simplex_lattice: Skewed lattice traversal for simplex-family noise

Author: B.G.
"""

from .gradients import GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D, grad_dot, gradient
from .math_utils import clamp, cubic_curve, lerp, quintic_curve, safe_pow, scale_shift
from .permutation import PermutationTable, fisher_yates_permutation
from .point import DIMENSIONS, as_point, common_dimensions, is_finite
from .seeding import derive_seed, normalize_seed

__all__ = [
    "GRADIENTS_2D", "GRADIENTS_3D", "GRADIENTS_4D", "grad_dot", "gradient",
    "clamp", "cubic_curve", "lerp", "quintic_curve", "safe_pow", "scale_shift",
    "PermutationTable", "fisher_yates_permutation",
    "DIMENSIONS", "as_point", "common_dimensions", "is_finite",
    "derive_seed", "normalize_seed",
]
