"""Floating point helpers."""

import sys

_NEAR_ZERO = 1e-10


def almost_equal(v1: float, v2: float) -> bool:
    """Return True if two floats are equal within machine precision.

    Values that are both closer to zero than 1e-10 are always considered equal.
    """
    if abs(v1) < _NEAR_ZERO and abs(v2) < _NEAR_ZERO:
        return True
    return abs(v1 - v2) < abs(min(v1, v2)) * sys.float_info.epsilon