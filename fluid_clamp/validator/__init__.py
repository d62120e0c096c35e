"""
Fluid pair validator: public API.

Exposed names
-------------
validate_units_match           -- both sides parse and share a supported unit
validate_values_are_different  -- the pair is not a no-op
validate_breakpoints_compatible -- min viewport < max viewport
validate_fluid_pair            -- all three checks, first failure wins
validate_fluid_units           -- unit and no-change checks only
parse_and_validate_fluid_pair  -- "min/max" -> FluidValuePair or ValidationResult
resolve_viewport_range         -- per-call breakpoints normalised to px
"""

from .breakpoints import resolve_viewport_range
from .pair import (
    THEME_VALUE_PROPERTIES,
    extract_theme_literal,
    is_arbitrary_value,
    parse_and_validate_fluid_pair,
    parse_arbitrary_value,
    parse_fluid_string,
    resolve_theme_value,
)
from .units import (
    SUPPORTED_UNITS,
    is_supported_unit,
    validate_breakpoints_compatible,
    validate_fluid_pair,
    validate_fluid_units,
    validate_units_match,
    validate_values_are_different,
)

__all__ = [
    "SUPPORTED_UNITS",
    "THEME_VALUE_PROPERTIES",
    "is_supported_unit",
    "validate_units_match",
    "validate_values_are_different",
    "validate_breakpoints_compatible",
    "validate_fluid_pair",
    "validate_fluid_units",
    "resolve_viewport_range",
    "parse_fluid_string",
    "is_arbitrary_value",
    "parse_arbitrary_value",
    "extract_theme_literal",
    "resolve_theme_value",
    "parse_and_validate_fluid_pair",
]
