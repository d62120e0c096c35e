"""
Advisory accessibility checks for fluid typography.

Neither check ever blocks value generation: callers surface the result as a
warning and emit the declaration regardless.

check_accessibility flags a minimum font size below 12px.

check_sc144 approximates WCAG SC 1.4.4 (text resizable to 200%). Browser
zoom scales rem/px terms by the zoom factor but vw terms only through the
shrunken CSS viewport, so a fluid size can grow much less than the zoom.
At zoom z and device width v the rendered size is

    z * clamp(lo, intercept + slope * (v / z), hi)

and the check requires the 5x-zoomed size to be at least twice the 1x size.
It samples the two breakpoints only; it is a boundary heuristic, not a proof
over the whole range.
"""

from __future__ import annotations

from enum import Enum

from fluid_clamp.errors import ErrorCode, FluidError, Result, err, ok
from fluid_clamp.schemas.options import ResolvedOptions
from fluid_clamp.schemas.results import VALID, ValidationResult
from fluid_clamp.utilities.formatting import format_number
from fluid_clamp.utilities.length import Length

MIN_FONT_SIZE_PX: float = 12.0
BODY_FONT_SIZE_PX: float = 16.0

MAX_ZOOM: float = 5.0
REQUIRED_GROWTH: float = 2.0


class ValueCategory(str, Enum):
    """What a fluid value is applied to; only TEXT is checked."""

    TEXT = "text"
    OTHER = "other"


def check_accessibility(
    min_value: Length | str,
    options: ResolvedOptions,
    category: ValueCategory | str = ValueCategory.OTHER,
) -> ValidationResult:
    """
    Flag a typographic minimum below MIN_FONT_SIZE_PX.

    Returns VALID for non-text categories, when the check is disabled, or
    when *min_value* cannot be expressed in px. Otherwise a failed result
    carries a font-too-small error and a warning naming the px value.
    """
    if not options.check_accessibility or ValueCategory(category) is not ValueCategory.TEXT:
        return VALID

    length = (
        min_value
        if isinstance(min_value, Length)
        else Length.parse_with_spacing_fallback(min_value, options.root_font_size)
    )
    if length is None:
        return VALID
    px = length.to_px(options.root_font_size)
    if px is None:
        return VALID

    min_px = abs(px.number)
    if min_px >= MIN_FONT_SIZE_PX:
        return VALID

    shown = format_number(min_px, 2)
    warning = (
        f"Fluid typography minimum size ({shown}px) may be too small for accessibility. "
        f"Consider using at least {format_number(MIN_FONT_SIZE_PX)}px for small text "
        f"or {format_number(BODY_FONT_SIZE_PX)}px for body text."
    )
    return ValidationResult.failure(
        FluidError.from_code(ErrorCode.FONT_TOO_SMALL, shown), warning=warning
    )


def check_sc144(
    start_num: float,
    end_num: float,
    start_breakpoint: float,
    end_breakpoint: float,
    slope: float,
    intercept: float,
) -> Result[None]:
    """
    Boundary check for WCAG SC 1.4.4 on a fluid font size.

    Args:
        start_num: Size at start_breakpoint, in px.
        end_num: Size at end_breakpoint, in px.
        start_breakpoint: First breakpoint (px).
        end_breakpoint: Second breakpoint (px).
        slope: Size change per px of viewport.
        intercept: Size at a zero-width viewport, in px.

    Returns:
        ``Ok(None)`` when both breakpoints pass, else an Err with code
        fails-sc-144 naming the first failing breakpoint.
    """
    lo, hi = sorted((start_num, end_num))

    def rendered(viewport: float, zoom: float) -> float:
        preferred = intercept + slope * (viewport / zoom)
        return zoom * min(max(preferred, lo), hi)

    for viewport in (start_breakpoint, end_breakpoint):
        if rendered(viewport, MAX_ZOOM) < REQUIRED_GROWTH * rendered(viewport, 1.0):
            return err(ErrorCode.FAILS_SC_144, f"{format_number(viewport)}px")
    return ok(None)
