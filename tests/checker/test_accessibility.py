"""Tests for checker.accessibility: minimum font size and the SC 1.4.4 zoom check."""

import pytest

from fluid_clamp.checker.accessibility import (
    MIN_FONT_SIZE_PX,
    ValueCategory,
    check_accessibility,
    check_sc144,
)
from fluid_clamp.errors import Err, ErrorCode, Ok
from fluid_clamp.schemas.options import DEFAULT_OPTIONS, resolve_options
from fluid_clamp.utilities.length import Length


def _line(start_px: float, end_px: float, start_bp: float = 375.0, end_bp: float = 1440.0):
    slope = (end_px - start_px) / (end_bp - start_bp)
    return slope, start_px - slope * start_bp


class TestCheckAccessibility:
    def test_small_text_flagged(self):
        result = check_accessibility("0.5rem", DEFAULT_OPTIONS, ValueCategory.TEXT)
        assert not result.valid
        assert result.code is ErrorCode.FONT_TOO_SMALL
        assert result.error.message == "Font size 8px may be too small for accessibility"
        assert result.warning == (
            "Fluid typography minimum size (8px) may be too small for accessibility. "
            "Consider using at least 12px for small text or 16px for body text."
        )

    def test_threshold_is_inclusive(self):
        assert check_accessibility("12px", DEFAULT_OPTIONS, "text").valid
        assert check_accessibility("0.75rem", DEFAULT_OPTIONS, "text").valid

    def test_fractional_px_shown(self):
        result = check_accessibility("11.5px", DEFAULT_OPTIONS, "text")
        assert "(11.5px)" in result.warning

    def test_spacing_index_resolved(self):
        """Index 2 is 0.5rem, i.e. 8px."""
        assert check_accessibility("2", DEFAULT_OPTIONS, "text").code is ErrorCode.FONT_TOO_SMALL

    def test_length_object(self):
        result = check_accessibility(Length(10.0, "px"), DEFAULT_OPTIONS, ValueCategory.TEXT)
        assert not result.valid

    def test_root_font_size_applies(self):
        opts = resolve_options(root_font_size=10)
        assert not check_accessibility("1rem", opts, "text").valid

    def test_non_text_ignored(self):
        assert check_accessibility("0.25rem", DEFAULT_OPTIONS, ValueCategory.OTHER).valid

    def test_disabled(self):
        opts = resolve_options(check_accessibility=False)
        assert check_accessibility("0.25rem", opts, "text").valid

    @pytest.mark.parametrize("value", ["2vw", "abc"])
    def test_unmeasurable_values_pass(self, value):
        assert check_accessibility(value, DEFAULT_OPTIONS, "text").valid

    def test_threshold_constant(self):
        assert MIN_FONT_SIZE_PX == 12


class TestCheckSc144:
    def test_gentle_ramp_passes(self):
        slope, intercept = _line(16.0, 24.0)
        result = check_sc144(16.0, 24.0, 375.0, 1440.0, slope, intercept)
        assert isinstance(result, Ok)

    def test_constant_size_passes(self):
        assert check_sc144(16.0, 16.0, 375.0, 1440.0, 0.0, 16.0).is_ok

    def test_steep_ramp_fails_at_wide_breakpoint(self):
        slope, intercept = _line(16.0, 160.0)
        result = check_sc144(16.0, 160.0, 375.0, 1440.0, slope, intercept)
        assert isinstance(result, Err)
        assert result.code is ErrorCode.FAILS_SC_144
        assert result.error.message == "Fails WCAG SC 1.4.4 at viewport 1440px"

    def test_pure_viewport_size_fails(self):
        """A size made only of vw shrinks under zoom until it reaches its floor."""
        slope, intercept = 0.05, 0.0
        result = check_sc144(18.75, 72.0, 375.0, 1440.0, slope, intercept)
        assert result.code is ErrorCode.FAILS_SC_144

    def test_decreasing_ramp_bounds_sorted(self):
        slope, intercept = _line(24.0, 16.0)
        assert check_sc144(24.0, 16.0, 375.0, 1440.0, slope, intercept).is_ok
