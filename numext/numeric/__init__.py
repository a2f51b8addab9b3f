"""
Tolerance-aware numeric helpers.

Pure, stateless functions: tolerance comparison, rounding to a multiple,
angle conversion, order of magnitude and precision difference, invariant
numeric parsing and formatting, range evaluation, and the arithmetic mean.
"""

from .aggregate import mean
from .conversion import round_to_multiple, sign, to_degrees, to_radians
from .errors import FormatError, ParseError
from .magnitude import magnitude, precision_difference
from .parsing import format_fixed, parse_invariant, parse_smart, stringify
from .ranges import Range, is_in_range, parse_range
from .tolerance import (
    DEFAULT_AUTO_PRECISION,
    compare_tol,
    equals_auto_tol,
    equals_tol,
    greater_than_or_equals_tol,
    greater_than_tol,
    less_than_or_equals_tol,
    less_than_tol,
)

__all__ = [
    # errors
    "FormatError",
    "ParseError",
    # types
    "Range",
    # tolerance
    "DEFAULT_AUTO_PRECISION",
    "equals_tol",
    "equals_auto_tol",
    "greater_than_tol",
    "greater_than_or_equals_tol",
    "less_than_tol",
    "less_than_or_equals_tol",
    "compare_tol",
    # conversion
    "round_to_multiple",
    "to_degrees",
    "to_radians",
    "sign",
    # magnitude
    "magnitude",
    "precision_difference",
    # parsing
    "parse_invariant",
    "parse_smart",
    "stringify",
    "format_fixed",
    # ranges
    "parse_range",
    "is_in_range",
    # aggregate
    "mean",
]
