from .registry import PresetRegistry, get_preset, get_registry
from .types import ToleranceKind, TolerancePreset

__all__ = [
    # Enums
    "ToleranceKind",
    # Registry entry types (frozen, loaded from YAML)
    "TolerancePreset",
    # Registry
    "PresetRegistry",
    "get_registry",
    "get_preset",
]
