"""
Parse a raw "min/max" token pair, resolve each side and validate the result.

Each side of the pair is one of:
  - a theme key ("base", "2xl", "4") looked up in the caller's theme table
  - a bare number read as a spacing-scale index (4 -> 1rem)
  - a unit-qualified literal ("1.5rem", "24px")
  - a bracketed arbitrary literal ("[13px]"), never looked up in the theme

The whole pair may also be bracketed ("[1rem/2rem]"). Resolution is tried in
the order above; the first that yields a literal wins.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from fluid_clamp.errors import Err, ErrorCode, FluidError, Result, err, ok
from fluid_clamp.schemas.options import ResolvedOptions
from fluid_clamp.schemas.results import FluidValuePair, ValidationResult
from fluid_clamp.utilities.formatting import format_number
from fluid_clamp.utilities.length import SPACING_RATIO, Length, is_bare_number

from .units import validate_fluid_pair

logger = logging.getLogger(__name__)

# Property names checked, in order, when a theme value is a mapping.
THEME_VALUE_PROPERTIES: tuple[str, ...] = ("fontSize", "value", "size")

_ARBITRARY_RE = re.compile(r"^\[(.*)\]$", re.DOTALL)


def is_arbitrary_value(raw: str) -> bool:
    """True when *raw* is wrapped in square brackets."""
    return isinstance(raw, str) and _ARBITRARY_RE.match(raw.strip()) is not None


def parse_arbitrary_value(raw: str) -> str | None:
    """Return the text inside ``[...]``, or None when *raw* is not bracketed."""
    if not isinstance(raw, str):
        return None
    match = _ARBITRARY_RE.match(raw.strip())
    return match.group(1) if match else None


def parse_fluid_string(raw: str) -> Result[tuple[str, str]]:
    """
    Split ``"min/max"`` into its two trimmed tokens.

    Errors:
        parse-failed: not a string, not exactly one ``/``, or both sides empty.
        missing-min / missing-max: exactly one side is empty.
    """
    if not isinstance(raw, str):
        return err(ErrorCode.PARSE_FAILED, str(raw))

    parts = raw.split("/")
    if len(parts) != 2:
        return err(ErrorCode.PARSE_FAILED, raw)

    min_key, max_key = (p.strip() for p in parts)
    if not min_key and not max_key:
        return err(ErrorCode.PARSE_FAILED, raw)
    if not min_key:
        return err(ErrorCode.MISSING_MIN)
    if not max_key:
        return err(ErrorCode.MISSING_MAX)
    return ok((min_key, max_key))


def extract_theme_literal(value: Any) -> str | None:
    """
    Pull a CSS literal out of a theme value.

    Theme values come in three shapes: a plain string; a list or tuple whose
    first item is the literal (``["1rem", {"lineHeight": "1.5rem"}]``); or a
    mapping holding the literal under one of THEME_VALUE_PROPERTIES.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        if value and isinstance(value[0], str):
            return value[0]
        return None
    if isinstance(value, Mapping):
        for prop in THEME_VALUE_PROPERTIES:
            candidate = value.get(prop)
            if isinstance(candidate, str):
                return candidate
    return None


def resolve_theme_value(key: str, theme: Mapping[str, Any] | None = None) -> str | None:
    """
    Resolve one side of a fluid pair to a CSS literal, or None.

    Tried in order: bracketed literal, exact theme key, spacing-scale index,
    unit-qualified literal.
    """
    if not isinstance(key, str):
        return None
    key = key.strip()

    arbitrary = parse_arbitrary_value(key)
    if arbitrary is not None:
        literal = arbitrary.strip()
        return literal if Length.parse(literal) is not None else None

    if theme is not None and key in theme:
        extracted = extract_theme_literal(theme[key])
        if extracted is not None:
            return extracted

    if is_bare_number(key):
        number = float(key) * SPACING_RATIO
        if not math.isfinite(number):
            return None
        return f"{format_number(number)}rem"

    parsed = Length.parse(key)
    if parsed is not None and parsed.unit is not None:
        return key

    return None


def parse_and_validate_fluid_pair(
    raw: str,
    theme: Mapping[str, Any] | None,
    options: ResolvedOptions,
) -> FluidValuePair | ValidationResult:
    """
    Parse, resolve and validate a ``"min/max"`` pair.

    Returns a FluidValuePair when every step succeeds, otherwise the failing
    ValidationResult. Exactly one of the two is returned.
    """
    text = raw
    unwrapped = parse_arbitrary_value(raw) if isinstance(raw, str) else None
    # "[13px]/[20px]" is two bracketed sides, not one bracketed pair
    if unwrapped is not None and "/" in unwrapped and not re.search(r"[\[\]]", unwrapped):
        text = unwrapped

    split = parse_fluid_string(text)
    if isinstance(split, Err):
        return _failure(split.error)
    min_key, max_key = split.value

    min_resolved = resolve_theme_value(min_key, theme)
    if min_resolved is None:
        return _failure(FluidError.from_code(ErrorCode.THEME_VALUE_NOT_FOUND, min_key))
    max_resolved = resolve_theme_value(max_key, theme)
    if max_resolved is None:
        return _failure(FluidError.from_code(ErrorCode.THEME_VALUE_NOT_FOUND, max_key))

    validation = validate_fluid_pair(min_resolved, max_resolved, options)
    if not validation.valid:
        return validation

    min_len = Length.parse(min_resolved)
    max_len = Length.parse(max_resolved)
    if min_len is None or max_len is None:
        # validate_fluid_pair has already parsed both literals
        raise AssertionError(f"validated pair failed to parse: {min_resolved!r}, {max_resolved!r}")

    if min_len.is_unitless_zero:
        min_len = min_len.with_unit(max_len.unit)
    if max_len.is_unitless_zero:
        max_len = max_len.with_unit(min_len.unit)

    return FluidValuePair(
        min=min_len,
        max=max_len,
        min_key=min_key,
        max_key=max_key,
        min_resolved=min_resolved,
        max_resolved=max_resolved,
    )


def _failure(error: FluidError) -> ValidationResult:
    code = error.code.value if error.code else "-"
    logger.debug("fluid pair rejected [%s]: %s", code, error.message)
    return ValidationResult.failure(error)
