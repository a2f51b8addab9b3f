"""Exception types raised when text does not match a numeric grammar."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when text does not conform to a numeric or range-string grammar."""


class ParseError(FormatError):
    """Raised when text is not a valid invariant decimal literal."""
