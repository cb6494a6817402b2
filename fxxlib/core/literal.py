"""Decomposed decimal literal produced by the grammar parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecimalLiteral:
    """Value ``(-1)**negative * int(digits) * 10**exponent``.

    ``digits`` holds ASCII decimal digits with no leading or trailing zeros,
    except for zero itself which is always ``digits="0", exponent=0``.
    The sign of zero is kept.
    """

    negative: bool
    digits: str
    exponent: int

    def __post_init__(self) -> None:
        if not self.digits:
            raise ValueError("DecimalLiteral needs at least one digit")

    @property
    def is_zero(self) -> bool:
        return self.digits == "0"

    @classmethod
    def from_parts(
        cls, negative: bool, int_digits: str, frac_digits: str, exponent: int
    ) -> DecimalLiteral:
        """Fold a decimal point position into the exponent and trim zeros.

        ``int_digits``/``frac_digits`` are the raw digit runs on either side
        of the point; ``exponent`` is the value of the ``e`` suffix.
        """
        digits = (int_digits + frac_digits).lstrip("0")
        if not digits:
            return cls(negative, "0", 0)
        exponent -= len(frac_digits)
        trimmed = digits.rstrip("0")
        exponent += len(digits) - len(trimmed)
        return cls(negative, trimmed, exponent)

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        return f"{sign}{self.digits}e{self.exponent}"
