"""
Fluid clamp() calculator.

Given a start and end length and a viewport range, produces the CSS value

    clamp(lo, intercept + slope·100vw, hi)

where the preferred term is the straight line through (min_viewport, start)
and (max_viewport, end):

    slope     = (end - start) / (max_viewport - min_viewport)
    intercept = start - slope * min_viewport

All arithmetic happens in rem; viewport bounds are converted with
root_font_size. Outside the range the value holds at the nearer bound.

Degenerate inputs never produce a clamp():
  - equal bounds, or a slope below SLOPE_EPSILON, emit the single value
  - equal breakpoints fail with no-change-bp, reversed ones with invalid-viewport

Negation flips both bounds BEFORE the line is computed, then the bounds are
re-sorted, because clamp() with its first argument above its third is not a
clamp at all. Wrapping an already-built clamp() in ``calc(... * -1)`` keeps
the bounds in the wrong order and is not supported.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from fluid_clamp.errors import Err, ErrorCode, FluidError
from fluid_clamp.schemas.options import DEFAULT_OPTIONS, ClampOverrides, ResolvedOptions
from fluid_clamp.schemas.results import ClampResult, FluidLine, ValidationResult
from fluid_clamp.utilities.formatting import (
    NumberFormatter,
    format_number,
    get_formatter,
    output_precision,
)
from fluid_clamp.utilities.length import Length
from fluid_clamp.validator.breakpoints import resolve_viewport_range
from fluid_clamp.validator.units import validate_units_match

logger = logging.getLogger(__name__)

SLOPE_EPSILON: float = 1e-4

VIEWPORT_UNIT = "vw"
CONTAINER_UNIT = "cqw"


def compute_fluid_line(
    min_rem: float,
    max_rem: float,
    min_viewport_rem: float,
    max_viewport_rem: float,
) -> FluidLine:
    """
    Line through (min_viewport_rem, min_rem) and (max_viewport_rem, max_rem).

    Raises:
        ValueError: If the two viewports coincide; callers check this first.
    """
    if min_viewport_rem == max_viewport_rem:
        raise ValueError(f"viewport bounds coincide at {min_viewport_rem}rem")
    slope = (max_rem - min_rem) / (max_viewport_rem - min_viewport_rem)
    intercept = min_rem - slope * min_viewport_rem
    return FluidLine(
        slope=slope,
        intercept=intercept,
        min_viewport=min_viewport_rem,
        max_viewport=max_viewport_rem,
    )


def create_debug_comment(
    min_value: str,
    max_value: str,
    min_viewport: float,
    max_viewport: float,
    is_container: bool = False,
) -> str:
    """CSS comment describing where a fluid value came from, for DevTools."""
    kind = "container" if is_container else "viewport"
    return (
        f"/* fluid from {min_value} at {format_number(min_viewport)}px "
        f"to {max_value} at {format_number(max_viewport)}px ({kind}) */"
    )


def calculate_clamp(
    start: Length | str,
    end: Length | str,
    options: ResolvedOptions = DEFAULT_OPTIONS,
    overrides: ClampOverrides | None = None,
) -> ClampResult:
    """
    Compute the CSS value that scales from *start* to *end* across the viewport range.

    Parameters
    ----------
    start, end:
        Lengths or literals. Bare numbers are read as spacing-scale indexes
        (4 -> 1rem); a unit-less ``0`` adopts the other side's unit.
    options:
        Resolved configuration.
    overrides:
        Per-call breakpoints, negation and container mode.

    Returns
    -------
    ClampResult
        ``text`` is a bare value or a ``clamp()`` expression, and is empty
        whenever ``validation.valid`` is False.
    """
    overrides = overrides or ClampOverrides()
    root = options.root_font_size
    use_container = (
        overrides.use_container_query
        if overrides.use_container_query is not None
        else options.use_container_query
    )

    # ── 1. Resolve both sides ─────────────────────────────────────────────────
    start_len = _resolve_side(start)
    if start_len is None:
        return _failed(FluidError.from_code(ErrorCode.INVALID_MIN, _literal(start)))
    end_len = _resolve_side(end)
    if end_len is None:
        return _failed(FluidError.from_code(ErrorCode.INVALID_MAX, _literal(end)))

    # ── 2. A unit-less zero adopts its neighbour's unit ───────────────────────
    if start_len.is_unitless_zero:
        start_len = start_len.with_unit(end_len.unit)
    if end_len.is_unitless_zero:
        end_len = end_len.with_unit(start_len.unit)

    # ── 3. Unit compatibility ─────────────────────────────────────────────────
    if options.validate_units:
        validation = validate_units_match(start_len, end_len)
        if not validation.valid:
            return ClampResult(text="", validation=validation)

    # ── 4. Convert to rem ─────────────────────────────────────────────────────
    min_rem = _to_rem(start_len, root)
    if min_rem is None:
        return _failed(FluidError.from_code(ErrorCode.UNSUPPORTED_UNIT, start_len.unit or "none"))
    max_rem = _to_rem(end_len, root)
    if max_rem is None:
        return _failed(FluidError.from_code(ErrorCode.UNSUPPORTED_UNIT, end_len.unit or "none"))

    viewports = resolve_viewport_range(options, overrides)
    if isinstance(viewports, Err):
        return _failed(viewports.error)
    min_viewport, max_viewport = viewports.value

    if min_viewport == max_viewport:
        return _failed(
            FluidError.from_code(ErrorCode.NO_CHANGE_BP, f"{format_number(min_viewport)}px")
        )
    if min_viewport > max_viewport:
        return _failed(
            FluidError.from_code(ErrorCode.INVALID_VIEWPORT, f"{format_number(min_viewport)}px")
        )

    min_viewport_rem = min_viewport / root
    max_viewport_rem = max_viewport / root

    # ── 5. Negate the bounds, never the finished string ───────────────────────
    if overrides.negate:
        min_rem, max_rem = -min_rem, -max_rem

    precision = output_precision(min_rem, max_rem, min_viewport_rem, max_viewport_rem)
    fmt = get_formatter(precision)
    logger.debug(
        "fluid %s -> %s: %srem..%srem over %spx..%spx at precision %d",
        _literal(start),
        _literal(end),
        min_rem,
        max_rem,
        min_viewport,
        max_viewport,
        precision,
    )

    # ── 6. Equal bounds: a constant ───────────────────────────────────────────
    if math.isclose(min_rem, max_rem, rel_tol=1e-12, abs_tol=1e-12):
        warning = None
        if _literal(start).strip() != _literal(end).strip():
            warning = (
                f'Start "{_literal(start)}" and end "{_literal(end)}" are the same length; '
                f"emitting a constant value"
            )
        line = FluidLine(0.0, min_rem, min_viewport_rem, max_viewport_rem)
        return ClampResult(
            text=_format_value(min_rem, fmt, options),
            validation=ValidationResult.success(warning),
            line=line,
        )

    # ── 7. Slope and intercept ────────────────────────────────────────────────
    line = compute_fluid_line(min_rem, max_rem, min_viewport_rem, max_viewport_rem)

    if abs(line.slope) < SLOPE_EPSILON:
        logger.debug("slope %s below %s; emitting constant", line.slope, SLOPE_EPSILON)
        warning = (
            f"Change from {_literal(start)} to {_literal(end)} is too small to scale "
            f"fluidly; emitting a constant value"
        )
        return ClampResult(
            text=_format_value(min_rem, fmt, options),
            validation=ValidationResult.success(warning),
            line=line,
        )

    # ── 8. Order the bounds and build the preferred term ──────────────────────
    lo, hi = sorted((min_rem, max_rem))
    unit = CONTAINER_UNIT if use_container else VIEWPORT_UNIT
    preferred = _format_preferred(line, fmt, options, unit)

    text = (
        f"clamp({_format_value(lo, fmt, options)}, {preferred}, "
        f"{_format_value(hi, fmt, options)})"
    )
    if options.debug:
        comment = create_debug_comment(
            _literal(start), _literal(end), min_viewport, max_viewport, use_container
        )
        text = f"{text} {comment}"

    return ClampResult(text=text, validation=ValidationResult.success(), line=line)


def calculate_clamp_or_raise(
    start: Length | str,
    end: Length | str,
    options: ResolvedOptions = DEFAULT_OPTIONS,
    overrides: ClampOverrides | None = None,
) -> str:
    """Like calculate_clamp, but raise the FluidError instead of returning it."""
    result = calculate_clamp(start, end, options, overrides)
    result.validation.raise_for_error()
    return result.text


def create_negated_clamp(
    start: Length | str,
    end: Length | str,
    options: ResolvedOptions = DEFAULT_OPTIONS,
    overrides: ClampOverrides | None = None,
) -> str:
    """Text of the negated fluid value (e.g. for negative margins); empty on failure."""
    forced = replace(overrides or ClampOverrides(), negate=True)
    return calculate_clamp(start, end, options, forced).text


def create_container_clamp(
    start: Length | str,
    end: Length | str,
    options: ResolvedOptions = DEFAULT_OPTIONS,
    overrides: ClampOverrides | None = None,
) -> str:
    """Text of the fluid value scaled by container width (cqw); empty on failure."""
    forced = replace(overrides or ClampOverrides(), use_container_query=True)
    return calculate_clamp(start, end, options, forced).text


# ── Helpers ───────────────────────────────────────────────────────────────────


def _resolve_side(raw: Length | str) -> Length | None:
    if isinstance(raw, Length):
        return raw
    parsed = Length.parse(raw)
    if parsed is not None and (parsed.unit is not None or parsed.is_zero):
        return parsed
    return Length.parse_with_spacing_fallback(raw)


def _to_rem(length: Length, root_font_size: float) -> float | None:
    if length.is_unitless_zero:
        return 0.0
    converted = length.to_rem(root_font_size)
    return converted.number if converted is not None else None


def _literal(raw: Length | str) -> str:
    return raw.css_text if isinstance(raw, Length) else str(raw)


def _format_value(rem: float, fmt: NumberFormatter, options: ResolvedOptions) -> str:
    if options.use_rem:
        return f"{fmt.format(rem)}rem"
    return f"{fmt.format(rem * options.root_font_size)}px"


def _format_preferred(
    line: FluidLine, fmt: NumberFormatter, options: ResolvedOptions, unit: str
) -> str:
    slope_text = f"{fmt.format(line.slope * 100)}{unit}"
    if fmt.format(line.intercept) == "0":
        return slope_text
    intercept_text = _format_value(abs(line.intercept), fmt, options)
    if line.intercept < 0:
        return f"{slope_text} - {intercept_text}"
    if line.slope < 0:
        # "2rem - 1vw", not "2rem + -1vw"
        return f"{intercept_text} - {fmt.format(abs(line.slope) * 100)}{unit}"
    return f"{intercept_text} + {slope_text}"


def _failed(error: FluidError) -> ClampResult:
    code = error.code.value if error.code else "-"
    logger.debug("clamp calculation failed [%s]: %s", code, error.message)
    return ClampResult(text="", validation=ValidationResult.failure(error))
