"""Tests for deterministic number formatting and output precision."""

import pytest

from fluid_clamp.utilities.formatting import (
    MAX_PRECISION,
    MIN_PRECISION,
    NumberFormatter,
    decimal_places,
    format_number,
    get_formatter,
    output_precision,
)


class TestNumberFormatter:
    def test_rounds_to_precision(self):
        assert NumberFormatter(4).format(1.50234741) == "1.5023"

    def test_drops_trailing_zeros(self):
        assert NumberFormatter(4).format(2.0) == "2"
        assert NumberFormatter(4).format(0.5) == "0.5"

    def test_negative_zero_prints_as_zero(self):
        assert NumberFormatter(4).format(-0.00001) == "0"
        assert NumberFormatter(2).format(-0.0) == "0"

    def test_rounds_half_up(self):
        assert NumberFormatter(2).format(0.125) == "0.13"
        assert NumberFormatter(2).format(2.675) == "2.68"

    def test_no_float_artifacts(self):
        assert NumberFormatter(6).format(0.1 + 0.2) == "0.3"

    def test_no_grouping(self):
        assert NumberFormatter(2).format(12345.5) == "12345.5"

    def test_magnitude_beyond_default_decimal_context(self):
        assert NumberFormatter(4).format(1e25) == "1" + "0" * 25
        assert NumberFormatter(6).format(-1e30) == "-1" + "0" * 30

    def test_round_returns_float(self):
        assert NumberFormatter(2).round(1.006) == pytest.approx(1.01)

    def test_negative_precision_rejected(self):
        with pytest.raises(ValueError):
            NumberFormatter(-1)


class TestDecimalPlaces:
    @pytest.mark.parametrize(
        "value, places",
        [(1.0, 0), (0.25, 2), (23.4375, 4), (1.125, 3), (0.0, 0), (-1.5, 1)],
    )
    def test_counts_fractional_digits(self, value, places):
        assert decimal_places(value) == places

    def test_infinity_has_none(self):
        assert decimal_places(float("inf")) == 0


class TestOutputPrecision:
    def test_floor(self):
        assert output_precision(1.0, 2.0) == MIN_PRECISION

    def test_most_precise_input_wins(self):
        assert output_precision(1.0, 1.125, 23.4375) == 4

    def test_capped(self):
        assert output_precision(0.1234567) == MAX_PRECISION

    def test_no_values(self):
        assert output_precision() == MIN_PRECISION


class TestSharedFormatters:
    def test_same_instance_returned(self):
        assert get_formatter(4) is get_formatter(4)

    @pytest.mark.parametrize("precision", [MIN_PRECISION - 1, MAX_PRECISION + 1])
    def test_out_of_range_rejected(self, precision):
        with pytest.raises(ValueError, match="precision must be in"):
            get_formatter(precision)

    def test_format_number_default_precision(self):
        assert format_number(0.625) == "0.625"
        assert format_number(1440.0) == "1440"
