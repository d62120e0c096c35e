"""Tests for schemas.results: ValidationResult, FluidLine and ClampResult."""

import pytest

from fluid_clamp.errors import ErrorCode, FluidError
from fluid_clamp.schemas.results import VALID, ClampResult, FluidLine, ValidationResult


class TestValidationResult:
    def test_valid_singleton(self):
        assert VALID.valid
        assert VALID.error is None
        assert VALID.code is None

    def test_invalid_requires_error(self):
        with pytest.raises(ValueError, match="must carry an error"):
            ValidationResult(valid=False)

    def test_success_may_carry_warning(self):
        result = ValidationResult.success("heads up")
        assert result.valid
        assert result.warning == "heads up"

    def test_failure_exposes_code(self):
        result = ValidationResult.failure(FluidError.from_code(ErrorCode.MISSING_MAX))
        assert not result.valid
        assert result.code is ErrorCode.MISSING_MAX

    def test_raise_for_error(self):
        result = ValidationResult.failure(FluidError.from_code(ErrorCode.NO_CHANGE, "1rem"))
        with pytest.raises(FluidError, match="both"):
            result.raise_for_error()

    def test_raise_for_error_noop_on_success(self):
        VALID.raise_for_error()


class TestFluidLine:
    def test_at(self):
        line = FluidLine(slope=0.5, intercept=1.0, min_viewport=0.0, max_viewport=10.0)
        assert line.at(0.0) == 1.0
        assert line.at(4.0) == pytest.approx(3.0)


class TestClampResult:
    def test_is_fluid(self):
        assert ClampResult("clamp(1rem, 1vw, 2rem)", VALID).is_fluid
        assert not ClampResult("1rem", VALID).is_fluid
        assert not ClampResult("", VALID).is_fluid
