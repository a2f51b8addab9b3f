"""
Tolerance-aware comparison between floating-point numbers.

Every explicit-tolerance function takes its arguments as (x, tol, y) so that
calls read left to right: "x equals, within tol, y".

The derived ordering predicates are built on equals_tol, so two values
within tolerance of each other are never reported as strictly greater or
strictly less than one another. compare_tol is consistent with equals_tol
for a single tolerance but is not transitive across chained comparisons
that use different tolerances.
"""

from __future__ import annotations

DEFAULT_AUTO_PRECISION: float = 1e-6


def equals_tol(x: float, tol: float, y: float) -> bool:
    """
    True if x and y differ by no more than tol.

    Raises:
        ValueError: If tol is negative.
    """
    if tol < 0:
        raise ValueError(f"tol must be >= 0, got {tol}")
    return abs(x - y) <= tol


def equals_auto_tol(x: float, y: float, precision: float = DEFAULT_AUTO_PRECISION) -> bool:
    """
    True if x and y are equal within a tolerance scaled by the smaller operand.

    The tolerance is abs(min(x, y) * precision). When the smaller operand is
    zero the tolerance collapses to zero and only exact equality passes.
    """
    return abs(x - y) <= abs(min(x, y) * precision)


def greater_than_tol(x: float, tol: float, y: float) -> bool:
    """True if x exceeds y by more than tol."""
    return x > y and not equals_tol(x, tol, y)


def greater_than_or_equals_tol(x: float, tol: float, y: float) -> bool:
    """True if x exceeds y or equals it within tol."""
    return x > y or equals_tol(x, tol, y)


def less_than_tol(x: float, tol: float, y: float) -> bool:
    """True if x is below y by more than tol."""
    return x < y and not equals_tol(x, tol, y)


def less_than_or_equals_tol(x: float, tol: float, y: float) -> bool:
    """True if x is below y or equals it within tol."""
    return x < y or equals_tol(x, tol, y)


def compare_tol(x: float, tol: float, y: float) -> int:
    """Return 0 if x equals y within tol, -1 if x < y, otherwise 1."""
    if equals_tol(x, tol, y):
        return 0
    if x < y:
        return -1
    return 1
