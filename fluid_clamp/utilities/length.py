"""
CSS length parsing and rem/px conversion.

A Length is a number with an optional unit drawn from a fixed set. Parsing
never raises: anything that is not a single well-formed length yields None
and the caller decides the fallback.

em is converted as if it were rem. There is no cascading font-size context
at build time, so this is an approximation callers must accept.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

LENGTH_UNITS: tuple[str, ...] = (
    # absolute
    "cm", "mm", "Q", "in", "pc", "pt", "px",
    # font-relative
    "em", "ex", "ch", "rem", "lh", "rlh",
    # viewport
    "vw", "vh", "vmin", "vmax",
    # container query
    "cqw", "cqh", "cqi", "cqb",
)  # fmt: skip

SPACING_RATIO: float = 0.25
DEFAULT_ROOT_FONT_SIZE: float = 16.0

# Longest alternatives first so "rem" is not read as "em" and "vmin" not as "vm…".
_UNIT_PATTERN = "|".join(sorted(LENGTH_UNITS, key=len, reverse=True))
_LENGTH_RE = re.compile(
    rf"^\s*([+-]?[0-9]*\.?[0-9]+(?:[eE][+-]?[0-9]+)?)({_UNIT_PATTERN})?\s*$"
)
_BARE_NUMBER_RE = re.compile(r"^\s*[+-]?[0-9]*\.?[0-9]+(?:[eE][+-]?[0-9]+)?\s*$")


@dataclass(frozen=True)
class Length:
    """
    A single CSS length: number plus optional unit.

    A zero-valued Length with no unit is unit-agnostic and adopts the unit
    of whatever it is paired with (see ``with_unit``).
    """

    number: float
    unit: str | None = None

    def __post_init__(self) -> None:
        if self.unit is not None and self.unit not in LENGTH_UNITS:
            raise ValueError(f"unknown length unit {self.unit!r}")

    @property
    def css_text(self) -> str:
        return f"{_plain_number(self.number)}{self.unit or ''}"

    @property
    def is_zero(self) -> bool:
        return self.number == 0

    @property
    def is_unitless_zero(self) -> bool:
        return self.number == 0 and self.unit is None

    def negate(self) -> Length:
        return Length(-self.number, self.unit)

    def with_unit(self, unit: str | None) -> Length:
        return Length(self.number, unit)

    def __str__(self) -> str:
        return self.css_text

    # ── Parsing ──────────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, raw: Any) -> Length | None:
        """
        Parse *raw* into a Length, or return None.

        Accepts an optional sign, digits, optional fraction and exponent, and
        an optional unit, with surrounding whitespace ignored. A bare ``"0"``
        becomes a unit-less zero; ``"0px"`` keeps its unit. The integer 0 is
        accepted as a unit-less zero; any other non-string input is rejected.
        """
        if isinstance(raw, bool):
            return None
        if isinstance(raw, (int, float)) and raw == 0:
            return cls(0.0)
        if not isinstance(raw, str):
            return None

        match = _LENGTH_RE.match(raw)
        if match is None:
            return None

        number = float(match.group(1))
        unit = match.group(2)
        if not math.isfinite(number):
            return None
        if number == 0:
            # normalise -0 so zero compares and prints as plain 0
            return cls(0.0, unit)
        return cls(number, unit)

    @classmethod
    def parse_with_spacing_fallback(
        cls, raw: Any, root_font_size: float = DEFAULT_ROOT_FONT_SIZE
    ) -> Length | None:
        """
        Parse *raw*, reading a bare number as a spacing-scale index.

        A unit-qualified result is returned as-is. A bare number ``n`` becomes
        ``n * 0.25`` rem, so index 4 is 1rem. *root_font_size* is accepted so
        every parse helper shares a signature; the index is rem-based and
        does not depend on it.
        """
        if not isinstance(raw, str):
            return None

        parsed = cls.parse(raw)
        if parsed is not None and parsed.unit is not None:
            return parsed

        if _BARE_NUMBER_RE.match(raw):
            number = float(raw) * SPACING_RATIO
            if not math.isfinite(number):
                return None
            return cls(number if number != 0 else 0.0, "rem")
        return None

    # ── Conversion ───────────────────────────────────────────────────────────

    def to_rem(self, root_font_size: float = DEFAULT_ROOT_FONT_SIZE) -> Length | None:
        """Return this length in rem, or None when the unit is not convertible."""
        match self.unit:
            case "rem":
                return self
            case "px":
                return Length(self.number / root_font_size, "rem")
            case "em":
                return Length(self.number, "rem")
            case _:
                return None

    def to_px(self, root_font_size: float = DEFAULT_ROOT_FONT_SIZE) -> Length | None:
        """Return this length in px, or None when the unit is not convertible."""
        match self.unit:
            case "px":
                return self
            case "rem" | "em":
                return Length(self.number * root_font_size, "px")
            case _:
                return None


def is_bare_number(raw: str) -> bool:
    """True when *raw* is a number with no unit (e.g. a spacing-scale index)."""
    return bool(_BARE_NUMBER_RE.match(raw))


def _plain_number(number: float) -> str:
    """Shortest text for *number*: ``1.0`` prints as ``1``, ``0.25`` as ``0.25``."""
    if math.isfinite(number) and number == int(number) and abs(number) < 1e16:
        return str(int(number))
    return repr(number)
