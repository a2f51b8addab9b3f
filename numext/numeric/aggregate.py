"""Aggregate helpers over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def mean(values: Iterable[float]) -> float:
    """
    Arithmetic mean of values, consumed in a single forward pass.

    An empty iterable yields nan; callers that need a finite result must
    check for emptiness themselves.
    """
    total = 0.0
    count = 0
    for v in values:
        total += v
        count += 1
    if count == 0:
        return math.nan
    return total / count
