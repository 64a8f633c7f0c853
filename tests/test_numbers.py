"""
Tests for number formatting.
"""

import pytest

from figvex.config import FormatConfig, Unit
from figvex.numbers import UNIT_FORMATTERS, clean_number, format_number


class TestCleanNumber:
    """Test clean_number()."""

    @pytest.mark.parametrize("value,expected", [
        (16, "16"),
        (16.0, "16"),
        (-4.0, "-4"),
        (1.5, "1.5"),
        (1.10, "1.1"),
        (0.123456, "0.1235"),
    ])
    def test_values(self, value, expected):
        assert clean_number(value) == expected

    def test_decimals(self):
        assert clean_number(2 / 3, decimals=2) == "0.67"

    def test_non_finite(self):
        assert clean_number(float("inf")) == "Infinity"
        assert clean_number(float("-inf")) == "-Infinity"
        assert clean_number(float("nan")) == "NaN"


class TestFormatNumber:
    """Test format_number() across units."""

    def test_every_unit_has_a_formatter(self):
        assert set(UNIT_FORMATTERS) == set(Unit)

    @pytest.mark.parametrize("value", [0, 1, 12, 1.25, -3.5, 0.333333])
    def test_px_is_clean_number_plus_suffix(self, value):
        assert format_number(value, FormatConfig(unit=Unit.PX)) == clean_number(value) + "px"

    @pytest.mark.parametrize("unit,expected", [
        (Unit.NONE, "12"),
        (Unit.EM, "12em"),
        (Unit.PERCENT, "12%"),
        (Unit.MS, "12ms"),
        (Unit.S, "12s"),
    ])
    def test_suffix_units(self, unit, expected):
        assert format_number(12, FormatConfig(unit=unit)) == expected

    def test_rem_divides_by_base(self):
        assert format_number(24, FormatConfig(unit=Unit.REM)) == "1.5rem"
        assert format_number(16, FormatConfig(unit=Unit.REM, rem_base=20)) == "0.8rem"
