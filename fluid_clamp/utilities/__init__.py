"""
Shared utilities for fluid_clamp.

Provides the leaf tools every other layer uses identically: CSS length
parsing and rem/px conversion, and deterministic number formatting.
"""

from .formatting import (
    MAX_PRECISION,
    MIN_PRECISION,
    NumberFormatter,
    decimal_places,
    format_number,
    get_formatter,
    output_precision,
)
from .length import (
    DEFAULT_ROOT_FONT_SIZE,
    LENGTH_UNITS,
    SPACING_RATIO,
    Length,
    is_bare_number,
)

__all__ = [
    # types
    "Length",
    "NumberFormatter",
    # length
    "LENGTH_UNITS",
    "SPACING_RATIO",
    "DEFAULT_ROOT_FONT_SIZE",
    "is_bare_number",
    # formatting
    "MIN_PRECISION",
    "MAX_PRECISION",
    "decimal_places",
    "output_precision",
    "get_formatter",
    "format_number",
]
