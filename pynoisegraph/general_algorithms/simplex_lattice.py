"""
Simplex lattice walking shared by the simplex-family generators.

Points are skewed onto a hypercubic lattice, where each unit cell splits into
d! simplices. The containing simplex is found by ranking the fractional
coordinates (Kuhn decomposition); its d+1 vertices are unskewed back to input
space for the radial kernel. The neighbourhood variant lists every lattice
vertex of a block of cells around the point, for kernels wider than one
simplex.

Author: B.G.
"""

import itertools
import math

from .point import DIMENSIONS

# Cell offsets -1..2 along each axis, filled at import
_BLOCK_OFFSETS = {d: tuple(itertools.product(range(-1, 3), repeat=d)) for d in DIMENSIONS}


def skew_constants(dimension: int) -> tuple:
    """
    Skew and unskew factors of the regular simplex lattice.

    Args:
        dimension: Point arity

    Returns:
        tuple: (skew, unskew) such that lattice = x + sum(x) * skew and
        x = lattice - sum(lattice) * unskew
    """
    root = math.sqrt(dimension + 1.0)
    return (root - 1.0) / dimension, (1.0 - 1.0 / root) / dimension


def stretch_constants(dimension: int) -> tuple:
    """
    Stretch and squish factors of the mirrored (stretched) simplex lattice.

    The lattice is the regular one scaled by sqrt(d+1) with the long cell
    diagonal swapped: lattice = x + sum(x) * stretch and
    x = lattice + sum(lattice) * squish.

    Args:
        dimension: Point arity

    Returns:
        tuple: (stretch, squish)
    """
    root = math.sqrt(dimension + 1.0)
    return (1.0 / root - 1.0) / dimension, (root - 1.0) / dimension


def simplex_vertices(point: tuple, skew: float, unskew: float):
    """
    Find the vertices of the simplex containing a point.

    Args:
        point: Input coordinates
        skew: Factor mapping input space onto the lattice
        unskew: Factor mapping lattice coordinates back to input space

    Yields:
        tuple: (lattice vertex as ints, offset from that vertex to the point
        in input space) for each of the d+1 vertices
    """
    d = len(point)
    s = sum(point) * skew
    cell = [math.floor(c + s) for c in point]
    t = sum(cell) * unskew
    origin = [c - (i - t) for c, i in zip(point, cell)]

    # Walk the cell diagonal, largest fractional coordinate first
    order = sorted(range(d), key=lambda axis: -origin[axis])
    vertex = list(cell)
    yield tuple(vertex), tuple(origin)
    for k, axis in enumerate(order, start=1):
        vertex[axis] += 1
        shift = k * unskew
        offset = tuple(
            o - (v - c) + shift for o, v, c in zip(origin, vertex, cell)
        )
        yield tuple(vertex), offset


def lattice_block(point: tuple, to_lattice: float, from_lattice: float):
    """
    List the lattice vertices of the 4^d block of cells around a point.

    The block spans cell offsets -1 to 2 along each axis.

    Args:
        point: Input coordinates
        to_lattice: Factor mapping input space onto the lattice
        from_lattice: Factor mapping lattice coordinates back to input space
            (added, so pass a negative unskew for the regular lattice)

    Yields:
        tuple: (lattice vertex as ints, offset from that vertex to the point)
    """
    d = len(point)
    s = sum(point) * to_lattice
    cell = [math.floor(c + s) for c in point]

    for delta in _BLOCK_OFFSETS[d]:
        vertex = tuple(c + o for c, o in zip(cell, delta))
        t = sum(vertex) * from_lattice
        yield vertex, tuple(p - (v + t) for p, v in zip(point, vertex))
