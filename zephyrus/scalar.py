"""Scalar helpers shared by the vector, matrix and physics code."""

import math
import random

PI = 3.1415926535
TWO_PI = PI * 2.0
PI_HALVED = PI / 2.0
INFINITY_POS = math.inf
INFINITY_NEG = -math.inf


def to_rad(degrees):
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def to_deg(radians):
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI


def near_zero(value, epsilon=0.001):
    """Return True when ``value`` lies within ``epsilon`` of zero."""
    return abs(value) <= epsilon


def clamp(value, lower, upper):
    """Clamp ``value`` into the closed range ``[lower, upper]``."""
    return min(upper, max(value, lower))


def lerp(a, b, t):
    """Linear interpolation from ``a`` to ``b`` by ``t``."""
    return a + t * (b - a)


def cot(angle):
    """Cotangent of ``angle`` in radians."""
    return 1.0 / math.tan(angle)


def fmod(numer, denom):
    """Floating point remainder with the sign of ``numer``."""
    return math.fmod(numer, denom)


def round_to_int(value):
    """Convert to int by truncation towards zero."""
    return int(value)


def random_range_float(low, high):
    """Random float between ``low`` and ``high``, both ends included."""
    return random.uniform(low, high)


def random_range_int(low, high):
    """Random int between ``low`` and ``high``, both ends included."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    return random.randint(low, high)