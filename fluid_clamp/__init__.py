"""
fluid_clamp: fluid CSS clamp() values from design-scale pairs.

Exposed names
-------------
generate_fluid_value  -- "min/max" token -> FluidDeclaration (the full pipeline)
calculate_clamp       -- start/end lengths -> ClampResult
resolve_options       -- defaults merged with overrides -> ResolvedOptions
load_options          -- ResolvedOptions from a YAML file
check_accessibility   -- advisory minimum font-size check
check_sc144           -- advisory WCAG SC 1.4.4 zoom check
get_registry          -- the default design scales

The library logs through the standard ``logging`` module under the
``fluid_clamp`` logger and installs only a NullHandler; configure handlers
in the application.
"""

import logging

from fluid_clamp.api.generate import FluidDeclaration, generate_fluid_value
from fluid_clamp.calculator.clamp import (
    calculate_clamp,
    calculate_clamp_or_raise,
    create_container_clamp,
    create_negated_clamp,
)
from fluid_clamp.checker.accessibility import ValueCategory, check_accessibility, check_sc144
from fluid_clamp.errors import Err, ErrorCode, FluidError, Ok, Result, throw_error
from fluid_clamp.scales.registry import ScaleKind, generate_fluid_keys, get_registry
from fluid_clamp.schemas.options import (
    DEFAULT_OPTIONS,
    ClampOverrides,
    ResolvedOptions,
    load_options,
    resolve_options,
)
from fluid_clamp.schemas.results import ClampResult, ValidationResult
from fluid_clamp.utilities.length import Length

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # pipeline
    "generate_fluid_value",
    "FluidDeclaration",
    # calculator
    "calculate_clamp",
    "calculate_clamp_or_raise",
    "create_negated_clamp",
    "create_container_clamp",
    "ClampResult",
    # configuration
    "ResolvedOptions",
    "ClampOverrides",
    "DEFAULT_OPTIONS",
    "resolve_options",
    "load_options",
    # accessibility
    "ValueCategory",
    "check_accessibility",
    "check_sc144",
    # errors
    "ErrorCode",
    "FluidError",
    "Ok",
    "Err",
    "Result",
    "throw_error",
    "ValidationResult",
    # scales
    "ScaleKind",
    "get_registry",
    "generate_fluid_keys",
    # values
    "Length",
]
