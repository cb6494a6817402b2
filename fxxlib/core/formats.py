"""IEEE-754 binary interchange format descriptors.

Every conversion step is driven by one of the four constant descriptors
below; nothing else in the package branches on a format's width.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatSpec:
    """Field layout of a binary interchange format.

    ``mantissa_bits`` counts the stored trailing significand bits only; the
    implicit leading bit of normal numbers is not part of the encoding.
    """

    name: str
    total_bits: int
    exponent_bits: int
    mantissa_bits: int

    def __post_init__(self) -> None:
        if 1 + self.exponent_bits + self.mantissa_bits != self.total_bits:
            raise ValueError(
                f"{self.name}: 1 + {self.exponent_bits} + {self.mantissa_bits} "
                f"!= {self.total_bits} bits"
            )

    @property
    def exponent_bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def min_normal_exponent(self) -> int:
        """Unbiased exponent of the smallest normal number."""
        return 1 - self.exponent_bias

    @property
    def max_exponent(self) -> int:
        """Unbiased exponent of the largest finite number."""
        return self.exponent_bias

    @property
    def min_subnormal_exponent(self) -> int:
        """Exponent of the smallest subnormal, ``2 ** min_subnormal_exponent``."""
        return self.min_normal_exponent - self.mantissa_bits

    @property
    def infinity_exponent(self) -> int:
        """Biased exponent field of infinities (all ones)."""
        return (1 << self.exponent_bits) - 1

    @property
    def sign_mask(self) -> int:
        return 1 << (self.total_bits - 1)

    @property
    def exponent_mask(self) -> int:
        return self.infinity_exponent << self.mantissa_bits

    @property
    def mantissa_mask(self) -> int:
        return (1 << self.mantissa_bits) - 1

    def __str__(self) -> str:
        return self.name


BINARY16 = FormatSpec("binary16", 16, 5, 10)
BINARY32 = FormatSpec("binary32", 32, 8, 23)
BINARY64 = FormatSpec("binary64", 64, 11, 52)
BINARY128 = FormatSpec("binary128", 128, 15, 112)

# Narrowest first; ParseOutcome fields follow this order.
FORMATS: tuple[FormatSpec, ...] = (BINARY16, BINARY32, BINARY64, BINARY128)
