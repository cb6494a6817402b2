"""Correct rounding of an exact value into a binary format.

All comparisons are integer cross-multiplications; no step of the
conversion goes through hardware floating point.
"""

from __future__ import annotations

from dataclasses import dataclass

from fxxlib.core.exact import ExactValue
from fxxlib.core.formats import FORMATS, FormatSpec


@dataclass(frozen=True)
class RoundedResult:
    """Sign, biased exponent and stored mantissa of an encoded number."""

    negative: bool
    biased_exponent: int
    mantissa: int

    def is_zero(self) -> bool:
        return self.biased_exponent == 0 and self.mantissa == 0

    def is_subnormal(self) -> bool:
        return self.biased_exponent == 0 and self.mantissa != 0

    def is_infinite(self, fmt: FormatSpec) -> bool:
        return self.biased_exponent == fmt.infinity_exponent and self.mantissa == 0


def infinity(negative: bool, fmt: FormatSpec) -> RoundedResult:
    return RoundedResult(negative, fmt.infinity_exponent, 0)


def binary_exponent(numerator: int, denominator: int) -> int:
    """Return ``e`` such that ``2**e <= numerator / denominator < 2**(e + 1)``.

    The bit lengths pin ``e`` down to one of two candidates; a single exact
    comparison picks between them.
    """
    if numerator <= 0 or denominator <= 0:
        raise ValueError("binary_exponent needs a positive ratio")
    e = numerator.bit_length() - denominator.bit_length()
    if e >= 0:
        below = numerator < denominator << e
    else:
        below = numerator << -e < denominator
    return e - 1 if below else e


def round_to_format(value: ExactValue, fmt: FormatSpec) -> RoundedResult:
    """Round *value* to the nearest *fmt* number, ties to even.

    Magnitudes beyond the largest finite number become infinity; magnitudes
    below the normal range are rounded on the subnormal grid and may reach
    zero.
    """
    if value.is_zero:
        return RoundedResult(value.negative, 0, 0)

    e = binary_exponent(value.numerator, value.denominator)
    if e > fmt.max_exponent:
        return infinity(value.negative, fmt)
    # Below the normal range the grid spacing stops shrinking.
    e = max(e, fmt.min_normal_exponent)

    # q + r/den == value * 2**(mantissa_bits - e), exactly.
    shift = fmt.mantissa_bits - e
    num, den = value.numerator, value.denominator
    if shift >= 0:
        num <<= shift
    else:
        den <<= -shift
    q, r = divmod(num, den)

    twice = 2 * r
    if twice > den or (twice == den and q & 1):
        q += 1

    implicit = 1 << fmt.mantissa_bits
    if q == implicit << 1:
        q = implicit
        e += 1
        if e > fmt.max_exponent:
            return infinity(value.negative, fmt)

    if q < implicit:
        return RoundedResult(value.negative, 0, q)
    return RoundedResult(value.negative, e + fmt.exponent_bias, q - implicit)


def round_all(value: ExactValue) -> tuple[RoundedResult, ...]:
    """Round *value* into every format of ``FORMATS``, in order."""
    return tuple(round_to_format(value, fmt) for fmt in FORMATS)
