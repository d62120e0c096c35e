"""
Resolve the viewport range for a single calculation.

The range comes from ResolvedOptions unless a ClampOverrides replaces one or
both ends. Override values may be numbers (px) or length strings in px, rem
or em; everything is normalised to px here so the calculator only ever sees
two px numbers.
"""

from __future__ import annotations

import math

from fluid_clamp.errors import ErrorCode, Result, err, ok
from fluid_clamp.schemas.options import ClampOverrides, ResolvedOptions
from fluid_clamp.utilities.formatting import format_number
from fluid_clamp.utilities.length import Length


def resolve_viewport_range(
    options: ResolvedOptions,
    overrides: ClampOverrides | None = None,
) -> Result[tuple[float, float]]:
    """
    Return ``Ok((min_px, max_px))`` for this call, or an Err.

    Errors:
        invalid-viewport: a breakpoint does not parse or is negative.
        mismatched-bp-units: both breakpoints are lengths in different units.
        mismatched-bp-val-units: a breakpoint unit cannot be related to the
            rem/px values (e.g. ``50vw``).

    Ordering is not checked here; see calculate_clamp.
    """
    raw_min: float | str = options.min_viewport
    raw_max: float | str = options.max_viewport
    if overrides is not None:
        if overrides.min_viewport is not None:
            raw_min = overrides.min_viewport
        if overrides.max_viewport is not None:
            raw_max = overrides.max_viewport

    min_len = _parse_breakpoint(raw_min)
    if min_len is None:
        return err(ErrorCode.INVALID_VIEWPORT, str(raw_min))
    max_len = _parse_breakpoint(raw_max)
    if max_len is None:
        return err(ErrorCode.INVALID_VIEWPORT, str(raw_max))

    if (
        isinstance(raw_min, str)
        and isinstance(raw_max, str)
        and not min_len.is_zero
        and not max_len.is_zero
        and min_len.unit != max_len.unit
    ):
        return err(ErrorCode.MISMATCHED_BP_UNITS, min_len.css_text, max_len.css_text)

    root = options.root_font_size
    min_px = _to_px(min_len, root)
    max_px = _to_px(max_len, root)
    if min_px is None or max_px is None:
        return err(ErrorCode.MISMATCHED_BP_VAL_UNITS)

    if min_px < 0:
        return err(ErrorCode.INVALID_VIEWPORT, f"{format_number(min_px)}px")
    if max_px < 0:
        return err(ErrorCode.INVALID_VIEWPORT, f"{format_number(max_px)}px")

    return ok((min_px, max_px))


# ── Helpers ───────────────────────────────────────────────────────────────────


def _parse_breakpoint(raw: float | str) -> Length | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            return None
        return Length(float(raw), "px")
    parsed = Length.parse(raw)
    if parsed is not None and parsed.unit is None:
        # a bare number is read as px, matching numeric options
        return parsed.with_unit("px")
    return parsed


def _to_px(length: Length, root_font_size: float) -> float | None:
    converted = length.to_px(root_font_size)
    return converted.number if converted is not None else None
