"""Correctly rounded decimal to binary16/32/64/128 conversion."""

from fxxlib.convert import ParseOutcome, parse_float_from_bytes
from fxxlib.core import (
    BINARY16,
    BINARY32,
    BINARY64,
    BINARY128,
    FORMATS,
    DecimalLiteral,
    ExactValue,
    Float128Bits,
    FormatSpec,
    RoundedResult,
    pack,
    round_to_format,
    to_exact,
    unpack,
)
from fxxlib.diagnostics import DiagnosticCollector
from fxxlib.parser import MalformedInput, ParseError, parse_decimal

__all__ = [
    "parse_float_from_bytes",
    "ParseOutcome",
    "Float128Bits",
    "MalformedInput",
    "ParseError",
    "parse_decimal",
    "to_exact",
    "round_to_format",
    "pack",
    "unpack",
    "DecimalLiteral",
    "ExactValue",
    "RoundedResult",
    "FormatSpec",
    "FORMATS",
    "BINARY16",
    "BINARY32",
    "BINARY64",
    "BINARY128",
    "DiagnosticCollector",
]
