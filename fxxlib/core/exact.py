"""Exact rational representation of a decimal literal."""

from __future__ import annotations

from dataclasses import dataclass

from fxxlib.core.formats import FORMATS
from fxxlib.core.literal import DecimalLiteral

# int() refuses very long digit strings on recent interpreters; stay well
# below the default limit and combine chunks arithmetically.
_CHUNK_DIGITS = 1000

# Decimal magnitude bounds, using 10 > 2**3. With k = len(digits) + exponent
# the value lies in [10**(k-1), 10**k). At or above _OVERFLOW_K the value is at
# least 2 ** (max_exponent + 1) of every format; at or below _UNDERFLOW_K it
# is below half of every format's smallest subnormal.
_OVERFLOW_K = 1 + max(-(-(fmt.max_exponent + 1) // 3) for fmt in FORMATS)
_UNDERFLOW_K = min((fmt.min_subnormal_exponent - 1) // 3 for fmt in FORMATS)


@dataclass(frozen=True)
class ExactValue:
    """Signed ratio ``numerator / denominator`` with a power-of-ten denominator."""

    negative: bool
    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.numerator < 0 or self.denominator <= 0:
            raise ValueError(
                f"invalid exact value {self.numerator}/{self.denominator}"
            )

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0


def digits_to_int(digits: str) -> int:
    """Convert an arbitrarily long ASCII digit string to an int."""
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def clamp_exponent(literal: DecimalLiteral) -> int:
    """Return the decimal exponent to materialise for *literal*.

    Exponents far outside every format's range are pulled in to the nearest
    bound that still overflows (or underflows to zero) everywhere, so the
    rounded results are unchanged while the ratio stays small.
    """
    if literal.is_zero:
        return 0
    n = len(literal.digits)
    k = n + literal.exponent
    if k > _OVERFLOW_K:
        return _OVERFLOW_K - n
    if k < _UNDERFLOW_K:
        return _UNDERFLOW_K - n
    return literal.exponent


def to_exact(literal: DecimalLiteral) -> ExactValue:
    """Build the exact ratio for *literal* using integer arithmetic only."""
    if literal.is_zero:
        return ExactValue(literal.negative, 0, 1)
    coefficient = digits_to_int(literal.digits)
    exponent = clamp_exponent(literal)
    if exponent >= 0:
        return ExactValue(literal.negative, coefficient * 10**exponent, 1)
    return ExactValue(literal.negative, coefficient, 10**-exponent)
