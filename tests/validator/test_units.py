"""Tests for validator.units: unit, no-change and breakpoint checks."""

import pytest

from fluid_clamp.errors import ErrorCode
from fluid_clamp.schemas.options import DEFAULT_OPTIONS, ResolvedOptions
from fluid_clamp.utilities.length import Length
from fluid_clamp.validator.units import (
    SUPPORTED_UNITS,
    is_supported_unit,
    validate_breakpoints_compatible,
    validate_fluid_pair,
    validate_fluid_units,
    validate_units_match,
    validate_values_are_different,
)


class TestSupportedUnits:
    @pytest.mark.parametrize("unit", SUPPORTED_UNITS)
    def test_supported(self, unit):
        assert is_supported_unit(unit)

    @pytest.mark.parametrize("unit", ["vw", "cqw", "%", None])
    def test_unsupported(self, unit):
        assert not is_supported_unit(unit)


class TestValidateUnitsMatch:
    @pytest.mark.parametrize("start, end", [("1rem", "2rem"), ("12px", "20px"), ("1em", "2em")])
    def test_matching_units(self, start, end):
        assert validate_units_match(start, end).valid

    def test_mismatched_units(self):
        result = validate_units_match("1rem", "20px")
        assert result.code is ErrorCode.MISMATCHED_UNITS
        assert result.error.message == 'Start "1rem" and end "20px" units don\'t match'

    @pytest.mark.parametrize("start, end", [("0", "2rem"), ("0px", "2rem"), ("1.5rem", "0")])
    def test_zero_side_always_compatible(self, start, end):
        assert validate_units_match(start, end).valid

    def test_unsupported_unit(self):
        result = validate_units_match("1vw", "2vw")
        assert result.code is ErrorCode.UNSUPPORTED_UNIT
        assert '"vw"' in result.error.message

    def test_invalid_min(self):
        result = validate_units_match("abc", "1rem")
        assert result.code is ErrorCode.INVALID_MIN
        assert result.error.message == 'Invalid minimum value: "abc"'

    def test_invalid_max(self):
        result = validate_units_match("1rem", "1.2.3")
        assert result.code is ErrorCode.INVALID_MAX

    def test_accepts_length_objects(self):
        assert validate_units_match(Length(1.0, "rem"), Length(2.0, "rem")).valid


class TestValidateValuesAreDifferent:
    def test_identical_values(self):
        result = validate_values_are_different("1rem", "1rem")
        assert result.code is ErrorCode.NO_CHANGE
        assert result.error.message == 'Start and end values are both "1rem"'

    def test_same_number_different_unit_passes(self):
        assert validate_values_are_different("1rem", "1px").valid

    def test_different_numbers_pass(self):
        assert validate_values_are_different("1rem", "2rem").valid


class TestValidateBreakpointsCompatible:
    def test_increasing_range(self):
        assert validate_breakpoints_compatible("1rem", 375, 1440).valid

    def test_equal_breakpoints(self):
        result = validate_breakpoints_compatible("1rem", 768, 768)
        assert result.code is ErrorCode.NO_CHANGE_BP
        assert result.error.message == 'Start and end breakpoints are both "768px"'

    def test_reversed_breakpoints(self):
        result = validate_breakpoints_compatible("1rem", 1440, 375)
        assert result.code is ErrorCode.NO_CHANGE_BP

    def test_unparseable_value(self):
        result = validate_breakpoints_compatible("abc", 375, 1440)
        assert result.code is ErrorCode.INVALID_MIN


class TestValidateFluidPair:
    def test_valid_pair(self):
        assert validate_fluid_pair("1rem", "2rem", DEFAULT_OPTIONS).valid

    def test_units_checked_first(self):
        opts = ResolvedOptions(min_viewport=768, max_viewport=768)
        result = validate_fluid_pair("1rem", "20px", opts)
        assert result.code is ErrorCode.MISMATCHED_UNITS

    def test_no_change_before_breakpoints(self):
        opts = ResolvedOptions(min_viewport=768, max_viewport=768)
        result = validate_fluid_pair("1rem", "1rem", opts)
        assert result.code is ErrorCode.NO_CHANGE

    def test_breakpoints_last(self):
        opts = ResolvedOptions(min_viewport=768, max_viewport=768)
        result = validate_fluid_pair("1rem", "2rem", opts)
        assert result.code is ErrorCode.NO_CHANGE_BP


class TestValidateFluidUnits:
    def test_ignores_breakpoints(self):
        assert validate_fluid_units("1rem", "2rem").valid

    def test_reports_no_change(self):
        assert validate_fluid_units("2px", "2px").code is ErrorCode.NO_CHANGE
