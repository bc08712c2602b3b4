"""
Point abstraction for PyNoiseGraph.

A sample point is a sequence of 2, 3 or 4 real coordinates. Nodes declare the
point arities they can evaluate through their ``dimensions`` attribute; this
module converts user input into the tuple form every node works with and
rejects unsupported arities.

Author: B.G.
"""

import math

DIMENSIONS = frozenset((2, 3, 4))


def as_point(point, dimensions=DIMENSIONS, owner: str = "noise function") -> tuple:
    """
    Convert a sequence of coordinates into a tuple of floats.

    Args:
        point: Sequence (list, tuple, numpy array) of coordinates
        dimensions: Point arities accepted by the caller
        owner: Name used in the error message

    Returns:
        tuple: Coordinates as floats

    Raises:
        ValueError: If the number of coordinates is not supported
    """
    coords = tuple(float(c) for c in point)
    if len(coords) not in dimensions:
        supported = ", ".join(str(d) for d in sorted(dimensions)) or "none"
        raise ValueError(
            f"{owner} supports {supported}-dimensional points, got {len(coords)}"
        )
    return coords


def common_dimensions(*nodes) -> frozenset:
    """Return the point arities supported by every given node."""
    result = DIMENSIONS
    for node in nodes:
        result = result & node.dimensions
    return frozenset(result)


def is_finite(point: tuple) -> bool:
    """True when no coordinate is NaN or infinite."""
    return all(math.isfinite(c) for c in point)
