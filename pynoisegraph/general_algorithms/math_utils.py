"""
Scalar math helpers shared by the noise functions.

Interpolation, smoothing curves and range remapping used by the lattice
generators, the selectors and the modifiers. All helpers work on plain Python
floats; they are called once per lattice corner so they stay branch-light.

Author: B.G.
"""

import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b by factor t (unclamped)."""
    return a + t * (b - a)


def quintic_curve(t: float) -> float:
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def cubic_curve(t: float) -> float:
    """Cubic s-curve: 3t^2 - 2t^3"""
    return t * t * (3.0 - 2.0 * t)


def scale_shift(value: float, n: float) -> float:
    """Map a value from [0, 1] onto [-1, 1] when n is 2 (value * n - 1)."""
    return value * n - 1.0


def clamp(value: float, low: float, high: float) -> float:
    """
    Clamp a value to the range given by low and high.

    The bounds are used as given: when low exceeds high every value below low
    maps to low and every other value maps to high.

    Args:
        value: Value to clamp
        low: Lower bound
        high: Upper bound

    Returns:
        float: Clamped value
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def safe_pow(base: float, exponent: float) -> float:
    """
    Raise base to exponent with IEEE semantics instead of Python exceptions.

    math.pow raises on domain and range faults; noise graphs are expected to
    propagate those as NaN or infinity instead.

    Args:
        base: Base value
        exponent: Exponent value

    Returns:
        float: base ** exponent, NaN for a negative base with a fractional
        exponent, infinity on overflow or zero raised to a negative power
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        if base == 0.0 and exponent < 0.0:
            return math.inf
        return math.nan
