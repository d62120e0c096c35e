"""
Unit and value compatibility checks for a fluid (start, end) pair.

Checks run in a fixed order and the first failure wins:
  1. validate_units_match          -- both parse; non-zero sides share a supported unit
  2. validate_values_are_different -- the pair actually changes
  3. validate_breakpoints_compatible -- the viewport range is non-degenerate

A zero-valued side always passes the unit check: zero is the same length in
every unit, so it adopts its neighbour's unit.

Only rem, px and em are accepted as bound units. Viewport and container
units are valid as output but cannot be interpolated against a px viewport.
"""

from __future__ import annotations

import logging

from fluid_clamp.errors import ErrorCode, FluidError
from fluid_clamp.schemas.options import ResolvedOptions
from fluid_clamp.schemas.results import VALID, ValidationResult
from fluid_clamp.utilities.formatting import format_number
from fluid_clamp.utilities.length import Length

logger = logging.getLogger(__name__)

SUPPORTED_UNITS: tuple[str, ...] = ("rem", "px", "em")


def is_supported_unit(unit: str | None) -> bool:
    """True when *unit* can be used as a fluid bound unit."""
    return unit in SUPPORTED_UNITS


def validate_units_match(start: Length | str, end: Length | str) -> ValidationResult:
    """Check that *start* and *end* parse and share a supported unit."""
    start_len = _as_length(start)
    end_len = _as_length(end)

    if start_len is None:
        return _fail(ErrorCode.INVALID_MIN, _raw_text(start))
    if end_len is None:
        return _fail(ErrorCode.INVALID_MAX, _raw_text(end))

    if start_len.is_zero or end_len.is_zero:
        return VALID

    if start_len.unit != end_len.unit:
        return _fail(ErrorCode.MISMATCHED_UNITS, start_len.css_text, end_len.css_text)

    if not is_supported_unit(start_len.unit):
        return _fail(ErrorCode.UNSUPPORTED_UNIT, start_len.unit or "none")

    return VALID


def validate_values_are_different(start: Length | str, end: Length | str) -> ValidationResult:
    """Fail with no-change when number and unit are both identical."""
    start_len = _as_length(start)
    end_len = _as_length(end)

    if start_len is None or end_len is None:
        # reported by validate_units_match
        return VALID

    if start_len.number == end_len.number and start_len.unit == end_len.unit:
        return _fail(ErrorCode.NO_CHANGE, start_len.css_text)

    return VALID


def validate_breakpoints_compatible(
    value: Length | str,
    min_viewport: float,
    max_viewport: float,
) -> ValidationResult:
    """Fail with no-change-bp unless min_viewport < max_viewport."""
    if _as_length(value) is None:
        return _fail(ErrorCode.INVALID_MIN, _raw_text(value))

    if min_viewport >= max_viewport:
        return _fail(ErrorCode.NO_CHANGE_BP, f"{format_number(min_viewport)}px")

    return VALID


def validate_fluid_pair(
    min_value: Length | str,
    max_value: Length | str,
    options: ResolvedOptions,
) -> ValidationResult:
    """Run every pair check in order and return the first failure."""
    result = validate_units_match(min_value, max_value)
    if not result.valid:
        return result

    result = validate_values_are_different(min_value, max_value)
    if not result.valid:
        return result

    return validate_breakpoints_compatible(min_value, options.min_viewport, options.max_viewport)


def validate_fluid_units(start: Length | str, end: Length | str) -> ValidationResult:
    """Unit and no-change checks only, without reference to breakpoints."""
    result = validate_units_match(start, end)
    if not result.valid:
        return result
    return validate_values_are_different(start, end)


# ── Helpers ───────────────────────────────────────────────────────────────────


def _as_length(value: Length | str) -> Length | None:
    return value if isinstance(value, Length) else Length.parse(value)


def _raw_text(value: object) -> str:
    return value.css_text if isinstance(value, Length) else str(value)


def _fail(code: ErrorCode, *args: object) -> ValidationResult:
    error = FluidError.from_code(code, *args)
    logger.debug("validation failed [%s]: %s", code.value, error.message)
    return ValidationResult.failure(error)
