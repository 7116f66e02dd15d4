"""Scalar helpers shared by the vector, matrix and quaternion types."""

from __future__ import annotations

import math

__all__ = ["to_radians", "to_degrees", "sign", "rsqrt"]


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180.0)


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180.0 / math.pi)


def sign(value: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``value``."""
    return (value > 0) - (value < 0)


def rsqrt(value: float) -> float:
    """Return the reciprocal square root of ``value``.

    Raises ZeroDivisionError for zero and ValueError for negative input.
    """
    return 1.0 / math.sqrt(value)