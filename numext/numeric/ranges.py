"""
Interval notation for numeric ranges.

A range specification is a bracket, an optional lower bound, a comma, an
optional upper bound and a closing bracket:

    "[0, 10)"   0 (included) to 10 (excluded)
    "[10, 20]"  10 (included) to 20 (included)
    "(30,)"     30 (excluded) to +infinity
    "(,)"       every number

'[' and ']' are inclusive, '(' and ')' exclusive. Bounds use the invariant
number format. Membership is evaluated with the tolerance comparator, so a
number within tol of an exclusive bound is outside the range and a number
within tol of an inclusive bound is inside it.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import FormatError, ParseError
from .parsing import parse_invariant
from .tolerance import (
    greater_than_or_equals_tol,
    greater_than_tol,
    less_than_or_equals_tol,
    less_than_tol,
)

_OPENERS = {"[": True, "(": False}
_CLOSERS = {"]": True, ")": False}


@dataclass(frozen=True)
class Range:
    """
    A numeric interval with independently inclusive, possibly absent, bounds.

    A bound of None is unbounded on that side; its inclusive flag is ignored.
    """

    lower: float | None
    upper: float | None
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    def contains(self, number: float, tol: float) -> bool:
        """True if number satisfies every present bound within tol."""
        if self.lower is None and self.upper is None:
            return True

        contains = True

        if self.lower is not None:
            if self.lower_inclusive:
                contains = contains and greater_than_or_equals_tol(number, tol, self.lower)
            else:
                contains = contains and greater_than_tol(number, tol, self.lower)

        if self.upper is not None:
            if self.upper_inclusive:
                contains = contains and less_than_or_equals_tol(number, tol, self.upper)
            else:
                contains = contains and less_than_tol(number, tol, self.upper)

        return contains


def _parse_bound(text: str, spec: str) -> float | None:
    stripped = text.strip()
    if not stripped:
        return None
    try:
        return parse_invariant(stripped)
    except ParseError as exc:
        raise FormatError(f"invalid bound {stripped!r} in range {spec!r}") from exc


def parse_range(spec: str) -> Range:
    """
    Parse a range specification such as "[0, 10)" into a Range.

    Raises:
        FormatError: If the brackets are missing or unknown, the bounds are
            not separated by exactly one comma, or a bound is not a number.
    """
    s = spec.strip()
    if len(s) < 2 or s[0] not in _OPENERS or s[-1] not in _CLOSERS:
        raise FormatError(
            f"range must start with '[' or '(' and end with ']' or ')', got {spec!r}"
        )

    parts = s[1:-1].split(",")
    if len(parts) != 2:
        raise FormatError(f"range must have exactly one ',' between its bounds, got {spec!r}")

    return Range(
        lower=_parse_bound(parts[0], spec),
        upper=_parse_bound(parts[1], spec),
        lower_inclusive=_OPENERS[s[0]],
        upper_inclusive=_CLOSERS[s[-1]],
    )


def is_in_range(number: float, tol: float, spec: str) -> bool:
    """True if number lies in the range described by spec, within tol."""
    return parse_range(spec).contains(number, tol)
