"""fxxlib core subpackage (Layer 1 — pure arithmetic, no internal dependencies)."""

from fxxlib.core.exact import ExactValue, to_exact
from fxxlib.core.formats import (
    BINARY16,
    BINARY32,
    BINARY64,
    BINARY128,
    FORMATS,
    FormatSpec,
)
from fxxlib.core.literal import DecimalLiteral
from fxxlib.core.packing import Float128Bits, pack, split_128, unpack
from fxxlib.core.rounding import RoundedResult, binary_exponent, round_all, round_to_format

__all__ = [
    "FormatSpec",
    "BINARY16",
    "BINARY32",
    "BINARY64",
    "BINARY128",
    "FORMATS",
    "DecimalLiteral",
    "ExactValue",
    "to_exact",
    "RoundedResult",
    "binary_exponent",
    "round_to_format",
    "round_all",
    "Float128Bits",
    "pack",
    "unpack",
    "split_128",
]
