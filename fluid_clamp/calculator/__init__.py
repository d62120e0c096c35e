"""
Fluid clamp() calculator: public API.

Exposed names
-------------
calculate_clamp          -- start/end/options -> ClampResult (text + validation)
calculate_clamp_or_raise -- same, raising FluidError on failure
create_negated_clamp     -- negated fluid value text
create_container_clamp   -- container-relative (cqw) fluid value text
compute_fluid_line       -- slope/intercept through two (viewport, value) points
create_debug_comment     -- DevTools comment naming the inputs
"""

from .clamp import (
    CONTAINER_UNIT,
    SLOPE_EPSILON,
    VIEWPORT_UNIT,
    calculate_clamp,
    calculate_clamp_or_raise,
    compute_fluid_line,
    create_container_clamp,
    create_debug_comment,
    create_negated_clamp,
)

__all__ = [
    "SLOPE_EPSILON",
    "VIEWPORT_UNIT",
    "CONTAINER_UNIT",
    "calculate_clamp",
    "calculate_clamp_or_raise",
    "create_negated_clamp",
    "create_container_clamp",
    "compute_fluid_line",
    "create_debug_comment",
]
