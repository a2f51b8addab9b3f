"""
Order of magnitude and the precision-difference metric.

precision_difference answers "to how many significant digits do these two
numbers agree?". Each operand is scaled into [1, 10) by its own magnitude;
the result is the absolute difference of the scaled values, plus a penalty
of 10 ** |ka - kb| when the magnitudes differ.

    precision_difference(111111111111111, 111111011111111) ~= 1e-6
    precision_difference(111111111111111, 191111111111111) ~= 0.8
    precision_difference(1.23e-210, 1.23001e-210)          ~= 1e-5
    precision_difference(21.23e-210, 1.23001e-210)        ~= 10.89299

The result is not a metric: it is not symmetric for values straddling a
power of ten once rounding is involved. A penalty too large for a double
is inf.
"""

from __future__ import annotations

import math
import sys

_SMALLEST_DOUBLE: float = math.ulp(0.0)
_MAX_EXP10: int = sys.float_info.max_10_exp


def magnitude(value: float) -> int:
    """
    Base-10 order of magnitude of value (190 -> 2, 0.0034 -> -3).

    Returns 0 for zero.
    """
    a = abs(value)
    if a < _SMALLEST_DOUBLE:
        return 0
    return int(math.floor(math.log10(a)))


def _normalize(value: float, k: int) -> float:
    if -k <= _MAX_EXP10:
        return value * 10.0**-k
    # Subnormals need up to 10 ** 324, which is not representable; scale in two steps.
    half = -k // 2
    return value * 10.0**half * 10.0 ** (-k - half)


def _penalty(ka: int, kb: int) -> float:
    if ka == kb:
        return 0.0
    gap = abs(ka - kb)
    if gap > _MAX_EXP10:
        return math.inf
    return 10.0**gap


def precision_difference(a: float, b: float) -> float:
    """Non-negative measure of how closely a and b agree; 0 means identical."""
    ka = magnitude(a)
    kb = magnitude(b)

    qa = _normalize(a, ka)
    qb = _normalize(b, kb)

    return abs(qa - qb) + _penalty(ka, kb)
