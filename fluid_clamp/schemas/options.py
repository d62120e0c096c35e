"""
Configuration records for fluid calculations.

ResolvedOptions is the fully-defaulted configuration shared by every call;
ClampOverrides carries the per-call adjustments (breakpoints, negation,
container mode). Both are frozen; ResolvedOptions is validated on construction.

Viewport ordering is not checked here: equal or reversed
breakpoints are an expected per-call failure reported as a structured
result by the calculator, not an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, cast

import yaml

# camelCase option names accepted alongside the snake_case fields.
_CAMEL_CASE_ALIASES: dict[str, str] = {
    "minViewport": "min_viewport",
    "maxViewport": "max_viewport",
    "rootFontSize": "root_font_size",
    "useRem": "use_rem",
    "useContainerQuery": "use_container_query",
    "validateUnits": "validate_units",
    "checkAccessibility": "check_accessibility",
}


@dataclass(frozen=True)
class ResolvedOptions:
    """
    Fully-defaulted configuration for a fluid calculation.

    Attributes:
        min_viewport: Viewport width (px) where the value sits at its start bound.
        max_viewport: Viewport width (px) where the value reaches its end bound.
        root_font_size: px per rem, used for every rem/px conversion.
        use_rem: Emit rem (True) or px (False) bounds and intercept.
        use_container_query: Emit ``cqw`` instead of ``vw`` for the slope term.
        validate_units: Run the unit-compatibility check before calculating.
        debug: Append a ``/* fluid from ... */`` comment to clamp() output.
        check_accessibility: Enable the advisory typography checks.
    """

    min_viewport: float = 375
    max_viewport: float = 1440
    root_font_size: float = 16
    use_rem: bool = True
    use_container_query: bool = False
    validate_units: bool = True
    debug: bool = False
    check_accessibility: bool = True

    def __post_init__(self) -> None:
        if self.root_font_size <= 0:
            raise ValueError(f"root_font_size must be positive, got {self.root_font_size}")
        if self.min_viewport < 0:
            raise ValueError(f"min_viewport must be non-negative, got {self.min_viewport}")
        if self.max_viewport < 0:
            raise ValueError(f"max_viewport must be non-negative, got {self.max_viewport}")

    def with_overrides(self, **changes: Any) -> ResolvedOptions:
        """Return a copy with *changes* applied (names as in resolve_options)."""
        return replace(self, **_normalise_keys(changes))


@dataclass(frozen=True)
class ClampOverrides:
    """
    Per-call adjustments to a ResolvedOptions.

    Viewport overrides may be numbers (px) or length strings in px, rem or em.
    ``use_container_query=None`` keeps the option's setting.
    """

    negate: bool = False
    use_container_query: bool | None = None
    min_viewport: float | str | None = None
    max_viewport: float | str | None = None


DEFAULT_OPTIONS = ResolvedOptions()


def resolve_options(
    overrides: Mapping[str, Any] | None = None, **kwargs: Any
) -> ResolvedOptions:
    """
    Merge *overrides* and keyword arguments over the defaults.

    Keys may be snake_case or the camelCase names used by JavaScript
    tooling. Unknown keys raise ValueError.
    """
    merged: dict[str, Any] = {}
    if overrides:
        merged.update(_normalise_keys(overrides))
    merged.update(_normalise_keys(kwargs))
    return replace(DEFAULT_OPTIONS, **merged)


def load_options(path: Path | str) -> ResolvedOptions:
    """
    Load options from a YAML file.

    The document is a mapping of option names, optionally nested under a
    top-level ``fluid:`` key. An empty document yields the defaults.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the YAML is malformed, not a mapping, or names an
            unknown option.
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Options file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse options file {path}: {exc}") from exc

    if data is None:
        return DEFAULT_OPTIONS
    if not isinstance(data, dict):
        raise ValueError(f"Options file {path} must contain a mapping, got {type(data).__name__}")
    if "fluid" in data:
        data = data["fluid"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"'fluid' section of {path} must be a mapping")
    return resolve_options(cast(dict[str, Any], data))


# ── Helpers ───────────────────────────────────────────────────────────────────

_FIELD_NAMES = frozenset(f.name for f in fields(ResolvedOptions))


def _normalise_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    unknown: list[str] = []
    for key, value in raw.items():
        name = _CAMEL_CASE_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            unknown.append(key)
            continue
        result[name] = value
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
    return result
