"""
numext: tolerance-aware numeric helpers.

Re-exports the numeric toolkit and the named tolerance presets so callers
can write ``from numext import equals_tol, get_preset``.
"""

from .numeric import (
    DEFAULT_AUTO_PRECISION,
    FormatError,
    ParseError,
    Range,
    compare_tol,
    equals_auto_tol,
    equals_tol,
    format_fixed,
    greater_than_or_equals_tol,
    greater_than_tol,
    is_in_range,
    less_than_or_equals_tol,
    less_than_tol,
    magnitude,
    mean,
    parse_invariant,
    parse_range,
    parse_smart,
    precision_difference,
    round_to_multiple,
    sign,
    stringify,
    to_degrees,
    to_radians,
)
from .presets import PresetRegistry, ToleranceKind, TolerancePreset, get_preset, get_registry

__all__ = [
    # errors
    "FormatError",
    "ParseError",
    # types
    "Range",
    "ToleranceKind",
    "TolerancePreset",
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
    # presets
    "PresetRegistry",
    "get_registry",
    "get_preset",
]
