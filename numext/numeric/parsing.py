"""
Locale-independent numeric text: parsing and formatting.

The invariant convention is '.' as the decimal point and no grouping
separators. Nothing here consults the host locale, so text produced by
stringify or format_fixed always parses back with parse_invariant.

parse_smart accepts either '.' or ',' as the decimal point, for input whose
locale is unknown ("1.2" and "1,2" both give 1.2). Text with more than one
separator is rejected instead of guessed at.
"""

from __future__ import annotations

import math
import re

from .errors import FormatError, ParseError

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_SYMBOLS: dict[str, float] = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}


def parse_invariant(text: str) -> float:
    """
    Parse a decimal literal using the invariant convention.

    Accepts surrounding whitespace, an optional sign, an optional exponent,
    and the symbols NaN, Infinity and -Infinity.

    Raises:
        ParseError: If text is not a valid invariant decimal literal.
    """
    s = text.strip()
    if s in _SYMBOLS:
        return _SYMBOLS[s]
    if not _DECIMAL_RE.fullmatch(s):
        raise ParseError(f"{text!r} is not a valid invariant decimal number")
    return float(s)


def parse_smart(text: str) -> float:
    """
    Parse a decimal number whose decimal point may be '.' or ','.

    Raises:
        FormatError: If text contains more than one separator, or both kinds.
        ParseError: If text has an acceptable separator count but is not a
            valid decimal literal.
    """
    dots = text.count(".")
    commas = text.count(",")

    if commas == 0 and dots <= 1:
        return parse_invariant(text)
    if commas == 1 and dots == 0:
        return parse_invariant(text.replace(",", "."))
    raise FormatError(f'unable to smart parse double from string "{text}"')


def _symbol(x: float) -> str | None:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    return None


def stringify(x: float, decimals: int) -> str:
    """
    Round x to the given number of decimals and render it invariantly.

    Uses the shortest representation that round-trips, so 2.0 renders as
    "2" and 0.1 + 0.2 rounded to 2 decimals renders as "0.3".
    """
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    symbol = _symbol(x)
    if symbol is not None:
        return symbol
    text = repr(round(float(x), decimals))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_fixed(x: float, digits: int) -> str:
    """Render x invariantly with exactly `digits` fractional digits (2.03, 4 -> "2.0300")."""
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {digits}")
    symbol = _symbol(x)
    if symbol is not None:
        return symbol
    return f"{x:.{digits}f}"
