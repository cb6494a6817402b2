"""Tests for the per-format rounder."""

from __future__ import annotations

import pytest

from fxxlib.core.exact import ExactValue
from fxxlib.core.formats import BINARY16, BINARY32, BINARY64, BINARY128, FORMATS
from fxxlib.core.rounding import RoundedResult, binary_exponent, round_all, round_to_format


def value(numerator: int, denominator: int = 1, negative: bool = False) -> ExactValue:
    return ExactValue(negative, numerator, denominator)


def dyadic(exponent: int) -> ExactValue:
    """Exact ``2**exponent`` with a power-of-ten denominator."""
    if exponent >= 0:
        return value(1 << exponent)
    return value(5**-exponent, 10**-exponent)


class TestBinaryExponent:
    @pytest.mark.parametrize(
        "num,den,expected",
        [
            (1, 1, 0),
            (2, 1, 1),
            (3, 1, 1),
            (1024, 1, 10),
            (1023, 1024, -1),
            (1, 1024, -10),
            (3, 10, -2),
            (1, 3, -2),
            (640, 1, 9),
            (10**30, 1, 99),
        ],
    )
    def test_exponent(self, num, den, expected):
        assert binary_exponent(num, den) == expected

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            binary_exponent(0, 1)


class TestNormalRounding:
    def test_point_three_binary16(self):
        assert round_to_format(value(3, 10), BINARY16) == RoundedResult(False, 13, 0xCD)

    def test_point_three_binary32(self):
        assert round_to_format(value(3, 10), BINARY32) == RoundedResult(False, 125, 0x19999A)

    def test_exact_integer(self):
        assert round_to_format(value(640), BINARY16) == RoundedResult(False, 24, 0x100)

    def test_negative(self):
        assert round_to_format(value(3, 10, negative=True), BINARY16) == RoundedResult(True, 13, 0xCD)

    @pytest.mark.parametrize("fmt", FORMATS, ids=str)
    def test_one_half_in_every_format(self, fmt):
        result = round_to_format(value(5, 10), fmt)
        assert result == RoundedResult(False, fmt.exponent_bias - 1, 0)


class TestTies:
    def test_tie_rounds_down_to_even(self):
        # 2049 lies halfway between 2048 and 2050 in binary16.
        assert round_to_format(value(2049), BINARY16) == RoundedResult(False, 26, 0)

    def test_tie_rounds_up_to_even(self):
        assert round_to_format(value(2051), BINARY16) == RoundedResult(False, 26, 2)

    def test_just_above_tie_rounds_up(self):
        assert round_to_format(value(20490001, 10000), BINARY16) == RoundedResult(False, 26, 1)

    def test_just_below_tie_rounds_down(self):
        assert round_to_format(value(20509999, 10000), BINARY16) == RoundedResult(False, 26, 1)

    def test_binary32_tie(self):
        assert round_to_format(value(2**24 + 1), BINARY32) == RoundedResult(False, 151, 0)
        assert round_to_format(value(2**24 + 3), BINARY32) == RoundedResult(False, 151, 2)

    def test_binary64_tie(self):
        assert round_to_format(value(2**53 + 1), BINARY64) == RoundedResult(False, 1076, 0)

    def test_binary128_tie(self):
        assert round_to_format(value(2**113 + 1), BINARY128) == RoundedResult(False, 16496, 0)
        assert round_to_format(value(2**113 + 3), BINARY128) == RoundedResult(False, 16496, 2)


class TestCarry:
    def test_mantissa_carry_bumps_exponent(self):
        # 2047.9 rounds up to 2048 = 1.0 * 2**11.
        assert round_to_format(value(20479, 10), BINARY16) == RoundedResult(False, 26, 0)

    def test_carry_into_infinity(self):
        result = round_to_format(value(65520), BINARY16)
        assert result == RoundedResult(False, 31, 0)
        assert result.is_infinite(BINARY16)

    def test_below_overflow_tie(self):
        assert round_to_format(value(65519), BINARY16) == RoundedResult(False, 30, 0x3FF)

    def test_subnormal_carries_into_min_normal(self):
        # Slightly below 2**-14, closer to it than to the largest subnormal.
        almost = value(5**14 * 1000 - 1, 10**17)
        assert round_to_format(almost, BINARY16) == RoundedResult(False, 1, 0)


class TestSubnormals:
    def test_min_subnormal(self):
        assert round_to_format(dyadic(-24), BINARY16) == RoundedResult(False, 0, 1)

    def test_half_min_subnormal_ties_to_zero(self):
        result = round_to_format(dyadic(-25), BINARY16)
        assert result == RoundedResult(False, 0, 0)
        assert result.is_zero()

    def test_above_half_min_subnormal(self):
        above = value(5**25 + 1, 10**25)
        assert round_to_format(above, BINARY16) == RoundedResult(False, 0, 1)

    def test_subnormal_tie_to_even(self):
        # 1.5 * 2**-24 is halfway between subnormal mantissas 1 and 2.
        result = round_to_format(value(3 * 5**25, 10**25), BINARY16)
        assert result == RoundedResult(False, 0, 2)
        assert result.is_subnormal()

    def test_negative_underflow_keeps_sign(self):
        tiny = value(1, 10**50, negative=True)
        assert round_to_format(tiny, BINARY32) == RoundedResult(True, 0, 0)

    @pytest.mark.parametrize("fmt", FORMATS, ids=str)
    def test_min_subnormal_every_format(self, fmt):
        result = round_to_format(dyadic(fmt.min_subnormal_exponent), fmt)
        assert result == RoundedResult(False, 0, 1)

    @pytest.mark.parametrize("fmt", FORMATS, ids=str)
    def test_min_normal_every_format(self, fmt):
        result = round_to_format(dyadic(fmt.min_normal_exponent), fmt)
        assert result == RoundedResult(False, 1, 0)


class TestOverflow:
    def test_far_overflow(self):
        assert round_to_format(value(10**5), BINARY16) == RoundedResult(False, 31, 0)

    def test_negative_overflow(self):
        assert round_to_format(value(10**39, negative=True), BINARY32) == RoundedResult(True, 255, 0)

    @pytest.mark.parametrize("fmt", FORMATS, ids=str)
    def test_largest_finite(self, fmt):
        p = fmt.mantissa_bits
        largest = value(((1 << (p + 1)) - 1) << (fmt.max_exponent - p))
        result = round_to_format(largest, fmt)
        assert result == RoundedResult(False, fmt.infinity_exponent - 1, fmt.mantissa_mask)

    @pytest.mark.parametrize("fmt", FORMATS, ids=str)
    def test_overflow_tie_goes_to_infinity(self, fmt):
        p = fmt.mantissa_bits
        midpoint = ((1 << (p + 2)) - 1) << (fmt.max_exponent - p - 1)
        assert round_to_format(value(midpoint), fmt).is_infinite(fmt)
        below = round_to_format(value(midpoint * 10 - 1, 10), fmt)
        assert below == RoundedResult(False, fmt.infinity_exponent - 1, fmt.mantissa_mask)


class TestZero:
    def test_positive_zero(self):
        assert round_to_format(value(0), BINARY64) == RoundedResult(False, 0, 0)

    def test_negative_zero(self):
        assert round_to_format(value(0, negative=True), BINARY128) == RoundedResult(True, 0, 0)


class TestRoundAll:
    def test_one_result_per_format(self):
        results = round_all(value(3, 10))
        assert len(results) == len(FORMATS)
        assert results[0] == RoundedResult(False, 13, 0xCD)
        assert results[2] == RoundedResult(False, 1021, 0x3333333333333)

    def test_formats_are_independent(self):
        results = round_all(value(65520))
        assert results[0].is_infinite(BINARY16)
        assert not any(r.is_infinite(fmt) for r, fmt in zip(results[1:], FORMATS[1:]))
