"""Assembly of rounded fields into IEEE-754 bit patterns."""

from __future__ import annotations

from dataclasses import dataclass

from fxxlib.core.formats import FormatSpec
from fxxlib.core.rounding import RoundedResult

_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class Float128Bits:
    """A binary128 pattern split into two 64-bit halves."""

    hi: int
    lo: int

    @property
    def value(self) -> int:
        """The full 128-bit pattern."""
        return (self.hi << 64) | self.lo

    def __str__(self) -> str:
        return f"0x{self.hi:016X}{self.lo:016X}"


def pack(result: RoundedResult, fmt: FormatSpec) -> int:
    """Return the unsigned bit pattern of *result* in *fmt*.

    Raises:
        ValueError: If a field does not fit its width.
    """
    if not 0 <= result.biased_exponent <= fmt.infinity_exponent:
        raise ValueError(
            f"{fmt}: biased exponent {result.biased_exponent} out of range"
        )
    if not 0 <= result.mantissa <= fmt.mantissa_mask:
        raise ValueError(f"{fmt}: mantissa {result.mantissa:#x} out of range")
    bits = (result.biased_exponent << fmt.mantissa_bits) | result.mantissa
    if result.negative:
        bits |= fmt.sign_mask
    return bits


def unpack(bits: int, fmt: FormatSpec) -> RoundedResult:
    """Split an unsigned *fmt* bit pattern back into its fields."""
    if not 0 <= bits < 1 << fmt.total_bits:
        raise ValueError(f"{fmt}: pattern {bits:#x} does not fit {fmt.total_bits} bits")
    return RoundedResult(
        negative=bool(bits & fmt.sign_mask),
        biased_exponent=(bits & fmt.exponent_mask) >> fmt.mantissa_bits,
        mantissa=bits & fmt.mantissa_mask,
    )


def split_128(bits: int) -> Float128Bits:
    """Split a 128-bit pattern into its high and low 64-bit halves."""
    if not 0 <= bits < 1 << 128:
        raise ValueError(f"pattern {bits:#x} does not fit 128 bits")
    return Float128Bits(hi=bits >> 64, lo=bits & _MASK64)
