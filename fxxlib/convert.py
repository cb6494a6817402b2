"""Decimal string to binary16/32/64/128 conversion.

The conversion runs parser -> exact ratio -> per-format rounding -> packing.
Every stage works on Python ints, so the results can serve as reference
answers for fast string-to-float parsers.
"""

from __future__ import annotations

from dataclasses import dataclass

from fxxlib.core.exact import to_exact
from fxxlib.core.formats import BINARY16, BINARY32, BINARY64, BINARY128, FORMATS, FormatSpec
from fxxlib.core.packing import Float128Bits, pack, split_128
from fxxlib.core.rounding import round_all
from fxxlib.diagnostics.collector import DiagnosticCollector
from fxxlib.parser.parser import BytesLike, parse_decimal


@dataclass(frozen=True)
class ParseOutcome:
    """Bit patterns of one decimal literal in each supported format."""

    f16: int
    f32: int
    f64: int
    f128: Float128Bits

    def bits(self, fmt: FormatSpec) -> int:
        """Return the full unsigned pattern for *fmt*."""
        if fmt == BINARY16:
            return self.f16
        if fmt == BINARY32:
            return self.f32
        if fmt == BINARY64:
            return self.f64
        if fmt == BINARY128:
            return self.f128.value
        raise ValueError(f"unsupported format: {fmt}")

    def __str__(self) -> str:
        return (
            f"f16=0x{self.f16:04X} f32=0x{self.f32:08X} "
            f"f64=0x{self.f64:016X} f128={self.f128}"
        )


def parse_float_from_bytes(
    data: BytesLike | str,
    diagnostics: DiagnosticCollector | None = None,
) -> ParseOutcome:
    """Convert a decimal literal to correctly rounded bit patterns.

    Rounding is to nearest, ties to even, with gradual underflow and
    overflow to infinity.

    Raises:
        MalformedInput: If *data* is not a decimal literal.
    """
    value = to_exact(parse_decimal(data, diagnostics))
    f16, f32, f64, f128 = (
        pack(result, fmt) for result, fmt in zip(round_all(value), FORMATS)
    )
    return ParseOutcome(f16, f32, f64, split_128(f128))
