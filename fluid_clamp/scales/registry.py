"""
Scale registry: loads the default design scales from YAML at startup,
validates them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
Every table is loaded and validated once at import time. Nothing writes to
the registry after startup.

A scale is a plain name -> literal mapping ("4" -> "1rem", "base" -> "1rem").
Callers with their own theme pass it straight to the validator; these tables
are the fallback when no theme is supplied.
"""

from __future__ import annotations

from enum import Enum
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from fluid_clamp.utilities.length import Length

_DATA_DIR = Path(__file__).parent / "data"
_SCALES_FILE = "scales.yaml"

# Keys never combined into fluid pairs: framework defaults and open-ended extremes.
EXCLUDED_PAIR_KEYS: frozenset[str] = frozenset({"DEFAULT", "none", "full"})


class ScaleKind(str, Enum):
    """The closed set of design scales."""

    SPACING = "spacing"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"


# Scales whose entries may be unit-less multipliers rather than lengths.
_UNITLESS_ALLOWED: frozenset[ScaleKind] = frozenset({ScaleKind.LINE_HEIGHT})


class ScaleRegistry:
    """
    Read-only registry of the default design scales.

    All tables are wrapped in MappingProxyType after loading and are
    immutable for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.scales: MappingProxyType[ScaleKind, MappingProxyType[str, str]]

        self._load_scales()
        self._validate_entries()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Scale data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse scale data file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Scale data file {path} must contain a mapping")
        return cast(dict[str, Any], data)

    def _load_scales(self) -> None:
        data = self._load_yaml(_SCALES_FILE)
        result: dict[ScaleKind, MappingProxyType[str, str]] = {}
        for name, table in data.items():
            try:
                kind = ScaleKind(name)
            except ValueError:
                raise ValueError(f"Unknown scale {name!r} in {_SCALES_FILE}") from None
            if not isinstance(table, dict):
                raise ValueError(f"Scale {name!r} must be a mapping of key -> literal")
            result[kind] = MappingProxyType({str(k): str(v) for k, v in table.items()})
        self.scales = MappingProxyType(result)

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate_entries(self) -> None:
        errors: list[str] = []
        for kind in ScaleKind:
            if kind not in self.scales:
                errors.append(f"missing scale {kind.value!r}")
                continue
            for key, literal in self.scales[kind].items():
                parsed = Length.parse(literal)
                if parsed is None:
                    errors.append(f"{kind.value}.{key}: {literal!r} is not a CSS length")
                elif parsed.unit is None and not parsed.is_zero and kind not in _UNITLESS_ALLOWED:
                    errors.append(f"{kind.value}.{key}: {literal!r} has no unit")
        if errors:
            raise ValueError("Scale registry validation failed:\n  " + "\n  ".join(errors))

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_scale(self, kind: ScaleKind | str) -> MappingProxyType[str, str]:
        """Return the read-only table for *kind*."""
        return self.scales[ScaleKind(kind)]


def generate_fluid_keys(scale: Mapping[str, Any]) -> list[str]:
    """
    Every ``"min/max"`` key for a scale: ordered pairs of distinct keys.

    EXCLUDED_PAIR_KEYS are skipped. Order follows the scale's own key order.
    """
    keys = [k for k in scale if k not in EXCLUDED_PAIR_KEYS]
    return [f"{lo}/{hi}" for lo in keys for hi in keys if lo != hi]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts. The registry is read-only after construction.

_registry: ScaleRegistry = ScaleRegistry()


def get_registry() -> ScaleRegistry:
    """Return the module-level registry singleton."""
    return _registry
