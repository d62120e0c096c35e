"""
Result records returned by validation and calculation.

All are frozen dataclasses created fresh per call. A failed ValidationResult
always carries a FluidError; a successful one may still carry an advisory
warning.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluid_clamp.errors import ErrorCode, FluidError
from fluid_clamp.utilities.length import Length


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation step: valid flag, optional error and warning."""

    valid: bool
    error: FluidError | None = None
    warning: str | None = None

    def __post_init__(self) -> None:
        if not self.valid and self.error is None:
            raise ValueError("an invalid ValidationResult must carry an error")

    @property
    def code(self) -> ErrorCode | None:
        return self.error.code if self.error is not None else None

    @classmethod
    def success(cls, warning: str | None = None) -> ValidationResult:
        return cls(valid=True, warning=warning)

    @classmethod
    def failure(cls, error: FluidError, warning: str | None = None) -> ValidationResult:
        return cls(valid=False, error=error, warning=warning)

    def raise_for_error(self) -> None:
        """Raise the carried FluidError if this result is a failure."""
        if self.error is not None and not self.valid:
            raise self.error


VALID = ValidationResult(valid=True)


@dataclass(frozen=True)
class FluidLine:
    """
    Linear function value(viewport) = intercept + slope * viewport, in rem.

    Attributes:
        slope: Value change per rem of viewport width.
        intercept: Value at a zero-width viewport, in rem.
        min_viewport: Start of the interpolation domain, in rem.
        max_viewport: End of the interpolation domain, in rem.
    """

    slope: float
    intercept: float
    min_viewport: float
    max_viewport: float

    def at(self, viewport: float) -> float:
        return self.intercept + self.slope * viewport


@dataclass(frozen=True)
class ClampResult:
    """CSS text (empty on failure) plus the validation that produced it."""

    text: str
    validation: ValidationResult
    line: FluidLine | None = None

    @property
    def is_fluid(self) -> bool:
        return self.text.startswith("clamp(")


@dataclass(frozen=True)
class FluidValuePair:
    """
    A resolved and validated "min/max" pair.

    ``min_key``/``max_key`` are the tokens as written; ``min_resolved`` and
    ``max_resolved`` are the literals they resolved to.
    """

    min: Length
    max: Length
    min_key: str
    max_key: str
    min_resolved: str
    max_resolved: str
