"""
Public fluid value generation API.

generate_fluid_value() runs the whole pipeline for one ``"min/max"`` token:
resolve both sides against a theme, validate the pair, compute the clamp()
text, and (for typography) run the advisory accessibility checks. It always
returns a FluidDeclaration; on failure ``value`` is empty and
``validation`` says why, so the caller can simply skip the declaration.

Accessibility findings are reported as warnings and logged; they never
suppress the value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fluid_clamp.calculator.clamp import calculate_clamp
from fluid_clamp.checker.accessibility import ValueCategory, check_accessibility, check_sc144
from fluid_clamp.errors import Err, ErrorCode, FluidError
from fluid_clamp.scales.registry import ScaleKind, get_registry
from fluid_clamp.schemas.options import DEFAULT_OPTIONS, ClampOverrides, ResolvedOptions
from fluid_clamp.schemas.results import ClampResult, FluidValuePair, ValidationResult
from fluid_clamp.utilities.formatting import format_number
from fluid_clamp.utilities.length import Length
from fluid_clamp.validator.breakpoints import resolve_viewport_range
from fluid_clamp.validator.pair import parse_and_validate_fluid_pair

logger = logging.getLogger(__name__)

_LOG_PREFIX = "[fluid-clamp]"


@dataclass(frozen=True)
class FluidDeclaration:
    """Outcome of generating one fluid value.

    Attributes:
        value: CSS value to emit, or "" when generation failed.
        validation: The first failing check, or a success.
        warnings: Advisory messages (accessibility, constant output).
        min_key: The min token as written, when the pair parsed.
        max_key: The max token as written, when the pair parsed.
    """

    value: str
    validation: ValidationResult
    warnings: tuple[str, ...] = field(default_factory=tuple)
    min_key: str | None = None
    max_key: str | None = None

    @property
    def ok(self) -> bool:
        return self.validation.valid and bool(self.value)


def default_theme(category: ValueCategory | str) -> Mapping[str, str]:
    """The registry scale used when no theme is given: fontSize for text, else spacing."""
    kind = ScaleKind.FONT_SIZE if ValueCategory(category) is ValueCategory.TEXT else ScaleKind.SPACING
    return get_registry().get_scale(kind)


def generate_fluid_value(
    raw: str,
    theme: Mapping[str, Any] | None = None,
    options: ResolvedOptions | None = None,
    *,
    category: ValueCategory | str = ValueCategory.OTHER,
    negate: bool = False,
    overrides: ClampOverrides | None = None,
) -> FluidDeclaration:
    """
    Generate the fluid CSS value for a ``"min/max"`` token.

    Parameters
    ----------
    raw:
        ``"min/max"`` where each side is a theme key, a spacing-scale index,
        a unit-qualified literal or a bracketed literal.
    theme:
        Key -> literal table. Defaults to the registry scale for *category*.
    options:
        Resolved configuration; DEFAULT_OPTIONS when omitted.
    category:
        ``"text"`` enables the typography accessibility checks.
    negate:
        Produce the negated value (e.g. negative margins).
    overrides:
        Per-call breakpoints and container mode.

    Returns
    -------
    FluidDeclaration
        Always returned; bad input never raises.
    """
    category = ValueCategory(category)
    options = options or DEFAULT_OPTIONS
    overrides = overrides or ClampOverrides()
    if theme is None:
        theme = default_theme(category)

    viewports = resolve_viewport_range(options, overrides)
    if isinstance(viewports, Err):
        return FluidDeclaration(value="", validation=ValidationResult.failure(viewports.error))
    min_viewport, max_viewport = viewports.value
    if min_viewport > max_viewport:
        error = FluidError.from_code(ErrorCode.INVALID_VIEWPORT, f"{format_number(min_viewport)}px")
        return FluidDeclaration(value="", validation=ValidationResult.failure(error))
    effective = options.with_overrides(min_viewport=min_viewport, max_viewport=max_viewport)

    pair = parse_and_validate_fluid_pair(raw, theme, effective)
    if isinstance(pair, ValidationResult):
        return FluidDeclaration(value="", validation=pair)

    warnings: list[str] = []

    if category is ValueCategory.TEXT:
        finding = check_accessibility(_smaller_bound(pair, effective), effective, category)
        if finding.warning:
            _warn(warnings, finding.warning)

    result = calculate_clamp(
        pair.min,
        pair.max,
        effective,
        ClampOverrides(
            negate=negate or overrides.negate,
            use_container_query=overrides.use_container_query,
        ),
    )
    if result.validation.warning:
        warnings.append(result.validation.warning)

    if category is ValueCategory.TEXT and effective.check_accessibility and result.is_fluid:
        _check_zoom(result, pair, effective, warnings)

    return FluidDeclaration(
        value=result.text,
        validation=result.validation,
        warnings=tuple(warnings),
        min_key=pair.min_key,
        max_key=pair.max_key,
    )


# ── Helpers ───────────────────────────────────────────────────────────────────


def _smaller_bound(pair: FluidValuePair, options: ResolvedOptions) -> Length:
    """Whichever side renders smaller; the min token when either is not px-convertible."""
    root = options.root_font_size
    start_px = pair.min.to_px(root)
    end_px = pair.max.to_px(root)
    if start_px is None or end_px is None:
        return pair.min
    return pair.max if abs(end_px.number) < abs(start_px.number) else pair.min


def _check_zoom(
    result: ClampResult,
    pair: FluidValuePair,
    options: ResolvedOptions,
    warnings: list[str],
) -> None:
    line = result.line
    if line is None:
        return
    root = options.root_font_size
    outcome = check_sc144(
        start_num=line.at(line.min_viewport) * root,
        end_num=line.at(line.max_viewport) * root,
        start_breakpoint=line.min_viewport * root,
        end_breakpoint=line.max_viewport * root,
        slope=line.slope,
        intercept=line.intercept * root,
    )
    if isinstance(outcome, Err):
        _warn(warnings, f"{pair.min_key}/{pair.max_key}: {outcome.error.message}")


def _warn(warnings: list[str], message: str) -> None:
    warnings.append(message)
    logger.warning("%s %s", _LOG_PREFIX, message)
