"""
Closed error taxonomy and the tagged Ok/Err result used across fluid_clamp.

Every expected failure (bad literal, incompatible units, degenerate range,
missing theme key, accessibility finding) is described by an ErrorCode and a
message built from the code's own arguments. Fallible operations return
``Ok(value)`` or ``Err(FluidError)`` instead of raising; callers that prefer
exceptions use ``unwrap()`` or ``throw_error()``.

The message table is checked against the enum at import time, so adding a
code without a message fails loudly instead of at the first lookup.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Every failure kind the core can report."""

    # value parsing
    MISSING_MIN = "missing-min"
    MISSING_MAX = "missing-max"
    INVALID_MIN = "invalid-min"
    INVALID_MAX = "invalid-max"
    # units
    MISMATCHED_UNITS = "mismatched-units"
    UNSUPPORTED_UNIT = "unsupported-unit"
    # value degeneracy
    NO_CHANGE = "no-change"
    INVALID_VIEWPORT = "invalid-viewport"
    # breakpoints
    MISMATCHED_BP_UNITS = "mismatched-bp-units"
    NO_CHANGE_BP = "no-change-bp"
    MISMATCHED_BP_VAL_UNITS = "mismatched-bp-val-units"
    # accessibility (advisory)
    FAILS_SC_144 = "fails-sc-144"
    FONT_TOO_SMALL = "font-too-small"
    # theme lookup
    THEME_VALUE_NOT_FOUND = "theme-value-not-found"
    # general
    PARSE_FAILED = "parse-failed"


ERROR_MESSAGES: MappingProxyType[ErrorCode, Callable[..., str]] = MappingProxyType(
    {
        ErrorCode.MISSING_MIN: lambda: "Missing minimum value",
        ErrorCode.MISSING_MAX: lambda: "Missing maximum value",
        ErrorCode.INVALID_MIN: lambda value: f'Invalid minimum value: "{value}"',
        ErrorCode.INVALID_MAX: lambda value: f'Invalid maximum value: "{value}"',
        ErrorCode.MISMATCHED_UNITS: lambda start, end: (
            f'Start "{start}" and end "{end}" units don\'t match'
        ),
        ErrorCode.UNSUPPORTED_UNIT: lambda unit: (
            f'Unsupported unit "{unit}" - use rem, px, or em'
        ),
        ErrorCode.NO_CHANGE: lambda value: f'Start and end values are both "{value}"',
        ErrorCode.INVALID_VIEWPORT: lambda viewport: f'Invalid viewport value: "{viewport}"',
        ErrorCode.MISMATCHED_BP_UNITS: lambda start, end: (
            f'Start breakpoint "{start}" and end breakpoint "{end}" units don\'t match'
        ),
        ErrorCode.NO_CHANGE_BP: lambda value: f'Start and end breakpoints are both "{value}"',
        ErrorCode.MISMATCHED_BP_VAL_UNITS: lambda: "Breakpoint and value units don't match",
        ErrorCode.FAILS_SC_144: lambda viewport: f"Fails WCAG SC 1.4.4 at viewport {viewport}",
        ErrorCode.FONT_TOO_SMALL: lambda min_px: (
            f"Font size {min_px}px may be too small for accessibility"
        ),
        ErrorCode.THEME_VALUE_NOT_FOUND: lambda key: f'Could not find theme value "{key}"',
        ErrorCode.PARSE_FAILED: lambda value: f'Failed to parse fluid value: "{value}"',
    }
)

_missing = set(ErrorCode) - set(ERROR_MESSAGES)
if _missing:
    raise RuntimeError(
        f"ERROR_MESSAGES has no entry for: {sorted(code.value for code in _missing)}"
    )
del _missing


class FluidError(Exception):
    """A coded failure. Raised only by the throwing helpers; otherwise carried in Err."""

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    @classmethod
    def from_code(cls, code: ErrorCode, *args: Any) -> FluidError:
        """Build an error whose message comes from the code's message generator."""
        return cls(ERROR_MESSAGES[code](*args), ErrorCode(code))

    def __repr__(self) -> str:
        return f"FluidError(code={self.code.value if self.code else None!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FluidError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))


def throw_error(code: ErrorCode, *args: Any) -> NoReturn:
    """Raise the FluidError for *code*; for call sites that prefer exceptions."""
    raise FluidError.from_code(code, *args)


# ── Result ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a coded FluidError."""

    error: FluidError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def code(self) -> ErrorCode | None:
        return self.error.code

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(code: ErrorCode, *args: Any) -> Err:
    """Build an Err from an error code and the code's message arguments."""
    return Err(FluidError.from_code(code, *args))
