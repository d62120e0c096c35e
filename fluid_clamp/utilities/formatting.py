"""
Deterministic number formatting for emitted CSS.

Every numeric that reaches a CSS string goes through a NumberFormatter bound
to an output precision: round to at most ``precision`` fractional digits, no
grouping, trailing zeros and a negative zero dropped. The same inputs
therefore always print the same text, with no float artifacts such as
``0.30000000000000004``.

Formatters for the supported precisions are built once at import time and
shared read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from types import MappingProxyType

MIN_PRECISION: int = 2
MAX_PRECISION: int = 6


@dataclass(frozen=True)
class NumberFormatter:
    """Formats floats with at most ``precision`` fractional digits."""

    precision: int

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")

    def format(self, value: float) -> str:
        number = Decimal(repr(value))
        quantum = Decimal(1).scaleb(-self.precision)
        with localcontext() as ctx:
            # quantize needs a digit for every integer place plus the fraction
            ctx.prec = max(ctx.prec, number.adjusted() + self.precision + 2)
            rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)
        text = f"{rounded:f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            return "0"
        return text

    def round(self, value: float) -> float:
        return float(self.format(value))


def decimal_places(value: float) -> int:
    """Number of fractional digits in the shortest repr of *value* (0 for integers)."""
    try:
        exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    except InvalidOperation:
        return 0
    if not isinstance(exponent, int):
        # inf / nan
        return 0
    return max(0, -exponent)


def output_precision(*values: float) -> int:
    """
    Precision for a calculation: the most fractional digits any input carries.

    Never below MIN_PRECISION, and capped at MAX_PRECISION so that repeating
    binary fractions (e.g. 1/3 rem) do not print sixteen digits.
    """
    digits = max((decimal_places(v) for v in values), default=0)
    return min(max(digits, MIN_PRECISION), MAX_PRECISION)


# ── Module-level cache ─────────────────────────────────────────────────────────
#
# Built eagerly at import so there is no lazy-init race between threads. The
# mapping is read-only after construction.

_FORMATTERS: MappingProxyType[int, NumberFormatter] = MappingProxyType(
    {p: NumberFormatter(p) for p in range(MIN_PRECISION, MAX_PRECISION + 1)}
)


def get_formatter(precision: int) -> NumberFormatter:
    """Return the shared formatter for *precision* (MIN_PRECISION..MAX_PRECISION)."""
    try:
        return _FORMATTERS[precision]
    except KeyError:
        raise ValueError(
            f"precision must be in [{MIN_PRECISION}, {MAX_PRECISION}], got {precision}"
        ) from None


def format_number(value: float, precision: int = MAX_PRECISION) -> str:
    """Format *value* with the shared formatter for *precision*."""
    return get_formatter(precision).format(value)
