"""Exact decoding helpers for checking conversion results."""

from __future__ import annotations

from fractions import Fraction

from fxxlib.core.formats import FormatSpec
from fxxlib.core.packing import unpack


def decode(bits: int, fmt: FormatSpec) -> Fraction:
    """Return the exact value of a finite *fmt* pattern."""
    fields = unpack(bits, fmt)
    if fields.biased_exponent == fmt.infinity_exponent:
        raise ValueError(f"{fmt}: {bits:#x} is not finite")
    if fields.biased_exponent == 0:
        significand = fields.mantissa
        exponent = fmt.min_subnormal_exponent
    else:
        significand = fields.mantissa | (1 << fmt.mantissa_bits)
        exponent = fields.biased_exponent - fmt.exponent_bias - fmt.mantissa_bits
    value = significand * Fraction(2) ** exponent
    return -value if fields.negative else value


def ordering_key(bits: int, fmt: FormatSpec) -> int:
    """Map a sign-magnitude pattern onto an integer ordered like its value."""
    magnitude = bits & ~fmt.sign_mask
    return -magnitude if bits & fmt.sign_mask else magnitude


def overflow_threshold(fmt: FormatSpec) -> Fraction:
    """Smallest magnitude that rounds to infinity (ties included)."""
    half_ulp = Fraction(2) ** (fmt.max_exponent - fmt.mantissa_bits - 1)
    largest = ((1 << (fmt.mantissa_bits + 1)) - 1) * Fraction(2) ** (
        fmt.max_exponent - fmt.mantissa_bits
    )
    return largest + half_ulp


def exact_decimal(value: Fraction) -> str:
    """Render a dyadic rational as an exact decimal literal."""
    sign = "-" if value < 0 else ""
    value = abs(value)
    k = value.denominator.bit_length() - 1
    if value.denominator != 1 << k:
        raise ValueError(f"{value} is not dyadic")
    return f"{sign}{value.numerator * 5**k}e-{k}"
