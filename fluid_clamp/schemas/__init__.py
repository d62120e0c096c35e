from .options import (
    DEFAULT_OPTIONS,
    ClampOverrides,
    ResolvedOptions,
    load_options,
    resolve_options,
)
from .results import VALID, ClampResult, FluidLine, FluidValuePair, ValidationResult

__all__ = [
    # configuration
    "ResolvedOptions",
    "ClampOverrides",
    "DEFAULT_OPTIONS",
    "resolve_options",
    "load_options",
    # results
    "ValidationResult",
    "VALID",
    "ClampResult",
    "FluidLine",
    "FluidValuePair",
]
