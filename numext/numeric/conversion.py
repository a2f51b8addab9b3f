"""
Rounding to a multiple, angle conversion, and the two-valued sign.

All functions are pure: no side effects, no state.
"""

from __future__ import annotations

import math

# Smallest positive (subnormal) double.
_SMALLEST_DOUBLE: float = math.ulp(0.0)


def round_to_multiple(value: float | None, multiple: float | None) -> float | None:
    """
    Round value to the nearest integer multiple of multiple.

    Halfway cases round to the even multiple. A multiple whose magnitude is
    below the smallest positive double leaves value unchanged. A quotient
    value / multiple that is inf or nan is not rounded: the result is inf
    or nan, as for an infinite value.

    Args:
        value: Number to round, or None to propagate absence.
        multiple: Rounding basis, or None to skip rounding.

    Returns:
        The rounded value; value itself when multiple is None or too small;
        None when value is None.
    """
    if value is None:
        return None
    if multiple is None:
        return value
    if abs(multiple) < _SMALLEST_DOUBLE:
        return value
    quotient = value / multiple
    if not math.isfinite(quotient):
        return float(quotient * multiple)
    return float(math.trunc(round(quotient)) * multiple)


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians / math.pi * 180.0


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees / 180.0 * math.pi


def sign(n: float) -> float:
    """Return 1.0 if n >= 0, otherwise -1.0. Zero maps to 1.0."""
    if n >= 0:
        return 1.0
    return -1.0
