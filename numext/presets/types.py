"""
Type definitions for named tolerance presets.

All types are frozen dataclasses with fail-fast validation in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from numext.numeric.tolerance import equals_auto_tol, equals_tol


class ToleranceKind(str, Enum):
    """How a preset's value is applied when comparing two numbers."""

    ABSOLUTE = "ABSOLUTE"  # value is the maximum absolute difference
    RELATIVE = "RELATIVE"  # value is the precision scaled by the smaller operand


@dataclass(frozen=True)
class TolerancePreset:
    """
    A named tolerance loaded from the preset table.

    The value must be non-negative. Presets are immutable after construction
    and safe to share across threads.
    """

    name: str
    kind: ToleranceKind
    value: float
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("preset name must be non-empty")
        if self.value < 0:
            raise ValueError(f"preset {self.name!r} value must be >= 0, got {self.value}")

    def equals(self, x: float, y: float) -> bool:
        """Compare x and y using this preset's kind and value."""
        if self.kind is ToleranceKind.ABSOLUTE:
            return equals_tol(x, self.value, y)
        return equals_auto_tol(x, y, self.value)
