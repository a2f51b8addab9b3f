"""
Tolerance preset registry: loads named presets from YAML on first use,
validates them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once, on the first call. Nothing writes to
the registry after loading.

Data file format (data/tolerances.yaml):

    presets:
      - name: length
        kind: ABSOLUTE      # ABSOLUTE | RELATIVE
        value: 1.0e-4
        description: Linear dimensions in model units.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Iterator, cast

import yaml

from .types import ToleranceKind, TolerancePreset

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_PRESETS_FILE = "tolerances.yaml"
_REQUIRED_KEYS = ("name", "kind", "value")


class PresetRegistry:
    """
    Immutable registry of named tolerance presets.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self._presets: dict[str, TolerancePreset] = {}

        self._load_presets()
        logger.debug("Loaded %d tolerance presets from %s", len(self._presets), data_dir)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Tolerance preset file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse tolerance preset file {path}: {exc}") from exc

    def _load_presets(self) -> None:
        data = self._load_yaml(_PRESETS_FILE)
        if not isinstance(data, dict) or not isinstance(data.get("presets"), list):
            raise ValueError(f"{_PRESETS_FILE} must contain a 'presets' list")

        errors: list[str] = []

        for index, entry in enumerate(data["presets"]):
            if not isinstance(entry, dict):
                errors.append(f"entry {index} is not a mapping")
                continue

            missing = [key for key in _REQUIRED_KEYS if key not in entry]
            if missing:
                errors.append(f"entry {index} is missing {', '.join(missing)}")
                continue

            name = str(entry["name"])
            if name in self._presets:
                errors.append(f"duplicate preset name: {name!r}")
                continue

            try:
                preset = TolerancePreset(
                    name=name,
                    kind=ToleranceKind(entry["kind"]),
                    value=float(entry["value"]),
                    description=str(entry.get("description", "")).strip(),
                )
            except (TypeError, ValueError) as exc:
                errors.append(f"entry {index} ({name!r}): {exc}")
                continue

            self._presets[name] = preset

        if errors:
            raise ValueError(
                "Tolerance preset validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, name: str) -> TolerancePreset:
        """Return the preset registered under name; KeyError if unknown."""
        try:
            return self._presets[name]
        except KeyError:
            raise KeyError(f"unknown tolerance preset: {name!r}") from None

    def names(self) -> list[str]:
        """Preset names in file order."""
        return list(self._presets)

    def __contains__(self, name: object) -> bool:
        return name in self._presets

    def __iter__(self) -> Iterator[TolerancePreset]:
        return iter(self._presets.values())

    def __len__(self) -> int:
        return len(self._presets)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Built on first use so importing numext reads no files. The lock keeps
# concurrent first calls from loading twice; the registry is read-only
# afterwards, so sharing it across threads is safe.

_registry: PresetRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> PresetRegistry:
    """Return the module-level registry singleton, loading it on first call."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = PresetRegistry()
    return _registry


def get_preset(name: str) -> TolerancePreset:
    """Shortcut for get_registry().get(name)."""
    return get_registry().get(name)
