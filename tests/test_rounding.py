"""Tests for rounding modes and exact decimal rounding."""

from __future__ import annotations

from decimal import Decimal

import pytest

from decimalfmt.exceptions import RoundingError
from decimalfmt.rounding import RoundingMode, round_magnitude


# =============================================================================
# RoundingMode
# =============================================================================


class TestRoundingModeFromString:
    """Name parsing for rounding modes."""

    @pytest.mark.parametrize(
        "name",
        ["half_even", "HALF_EVEN", "HalfEven", "half-even", " halfeven "],
    )
    def test_spellings(self, name):
        assert RoundingMode.from_string(name) is RoundingMode.HALF_EVEN

    def test_all_values_round_trip(self):
        for mode in RoundingMode:
            assert RoundingMode.from_string(mode.value) is mode
            assert RoundingMode.from_string(mode.name) is mode

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown rounding mode"):
            RoundingMode.from_string("sideways")


# =============================================================================
# round_magnitude
# =============================================================================


class TestRoundMagnitude:
    """Each mode applied to positive and negative magnitudes."""

    @pytest.mark.parametrize(
        "mode, negative, value, digits, expected",
        [
            (RoundingMode.UP, False, "13.12361", 4, "13.1237"),
            (RoundingMode.UP, True, "13.12361", 4, "13.1237"),
            (RoundingMode.DOWN, False, "13.13889", 4, "13.1388"),
            (RoundingMode.DOWN, True, "13.13889", 4, "13.1388"),
            (RoundingMode.CEILING, False, "13.1301", 2, "13.14"),
            (RoundingMode.CEILING, True, "13.1301", 2, "13.13"),
            (RoundingMode.FLOOR, False, "13.137", 2, "13.13"),
            (RoundingMode.FLOOR, True, "13.1301", 2, "13.14"),
            (RoundingMode.HALF_UP, False, "13.15", 1, "13.2"),
            (RoundingMode.HALF_UP, True, "13.15", 1, "13.2"),
            (RoundingMode.HALF_UP, False, "13.149", 1, "13.1"),
            (RoundingMode.HALF_DOWN, False, "13.15", 1, "13.1"),
            (RoundingMode.HALF_DOWN, False, "13.157", 1, "13.2"),
            (RoundingMode.HALF_EVEN, False, "13.25", 1, "13.2"),
            (RoundingMode.HALF_EVEN, False, "13.35", 1, "13.4"),
            (RoundingMode.HALF_EVEN, False, "13.251", 1, "13.3"),
            (RoundingMode.HALF_EVEN, False, "12.5", 0, "12"),
            (RoundingMode.HALF_EVEN, False, "12.51", 0, "13"),
        ],
    )
    def test_modes(self, mode, negative, value, digits, expected):
        result = round_magnitude(Decimal(value), digits, mode, negative)
        assert result == Decimal(expected)

    def test_exponent_matches_digits(self):
        result = round_magnitude(Decimal("6"), 3, RoundingMode.HALF_UP)
        assert result.as_tuple().exponent == -3

    def test_carry_into_integer(self):
        result = round_magnitude(Decimal("9.9996"), 3, RoundingMode.HALF_UP)
        assert str(result) == "10.000"

    def test_tiny_values(self):
        assert round_magnitude(Decimal("5E-7"), 6, RoundingMode.DOWN) == 0
        assert round_magnitude(Decimal("5E-7"), 6, RoundingMode.HALF_UP) == Decimal("0.000001")

    def test_large_values_keep_precision(self):
        value = Decimal("123456789012345678901234567890.125")
        result = round_magnitude(value, 2, RoundingMode.HALF_EVEN)
        assert str(result) == "123456789012345678901234567890.12"


class TestUnnecessary:
    """UNNECESSARY only accepts exactly representable values."""

    def test_exact_value(self):
        assert round_magnitude(Decimal("6.9"), 1, RoundingMode.UNNECESSARY) == Decimal("6.9")

    def test_integer_padded(self):
        assert str(round_magnitude(Decimal("6"), 1, RoundingMode.UNNECESSARY)) == "6.0"

    def test_trailing_zeros_are_exact(self):
        assert round_magnitude(Decimal("1.500"), 1, RoundingMode.UNNECESSARY) == Decimal("1.5")

    def test_inexact_raises(self):
        with pytest.raises(RoundingError) as exc_info:
            round_magnitude(Decimal("1.45"), 1, RoundingMode.UNNECESSARY)

        assert exc_info.value.max_fraction_digits == 1
        assert isinstance(exc_info.value, ArithmeticError)


class TestInvalidInput:
    def test_negative_magnitude(self):
        with pytest.raises(ValueError):
            round_magnitude(Decimal("-1"), 0, RoundingMode.HALF_UP)

    def test_nan(self):
        with pytest.raises(ValueError):
            round_magnitude(Decimal("NaN"), 0, RoundingMode.HALF_UP)

    def test_negative_digits(self):
        with pytest.raises(ValueError):
            round_magnitude(Decimal("1"), -1, RoundingMode.HALF_UP)
