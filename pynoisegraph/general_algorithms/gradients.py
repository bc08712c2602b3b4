"""
Gradient vector tables for gradient-based noise.

A hashed lattice byte selects one vector from the table of the point's
dimensionality; the dot product with the corner-to-point offset gives the
corner's contribution.

Author: B.G.
"""

import numpy as np

# 8-direction 2D gradient vectors
GRADIENTS_2D = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],  # Diagonal gradients
    [1, 0], [-1, 0], [0, 1], [0, -1]      # Axis-aligned gradients
], dtype=np.float64)

# Cube edge midpoints, padded to 16 entries
GRADIENTS_3D = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
    [1, 1, 0], [-1, 1, 0], [0, -1, 1], [0, -1, -1]
], dtype=np.float64)

# Tesseract edge midpoints
GRADIENTS_4D = np.array([
    [0, 1, 1, 1], [0, 1, 1, -1], [0, 1, -1, 1], [0, 1, -1, -1],
    [0, -1, 1, 1], [0, -1, 1, -1], [0, -1, -1, 1], [0, -1, -1, -1],
    [1, 0, 1, 1], [1, 0, 1, -1], [1, 0, -1, 1], [1, 0, -1, -1],
    [-1, 0, 1, 1], [-1, 0, 1, -1], [-1, 0, -1, 1], [-1, 0, -1, -1],
    [1, 1, 0, 1], [1, 1, 0, -1], [1, -1, 0, 1], [1, -1, 0, -1],
    [-1, 1, 0, 1], [-1, 1, 0, -1], [-1, -1, 0, 1], [-1, -1, 0, -1],
    [1, 1, 1, 0], [1, 1, -1, 0], [1, -1, 1, 0], [1, -1, -1, 0],
    [-1, 1, 1, 0], [-1, 1, -1, 0], [-1, -1, 1, 0], [-1, -1, -1, 0]
], dtype=np.float64)

_TABLES = {
    2: tuple(tuple(g) for g in GRADIENTS_2D.tolist()),
    3: tuple(tuple(g) for g in GRADIENTS_3D.tolist()),
    4: tuple(tuple(g) for g in GRADIENTS_4D.tolist()),
}


def gradient(dimension: int, hash_val: int) -> tuple:
    """Select the gradient vector for a hashed byte (table size is a power of two)."""
    table = _TABLES[dimension]
    return table[hash_val & (len(table) - 1)]


def grad_dot(dimension: int, hash_val: int, offset) -> float:
    """Compute dot product of gradient vector and distance vector"""
    g = gradient(dimension, hash_val)
    return sum(gi * oi for gi, oi in zip(g, offset))
