"""fxxlib parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from fxxlib.parser.errors import MalformedInput, ParseError
from fxxlib.parser.parser import parse_decimal
from fxxlib.parser.scanner import MAX_EXPONENT_DIGITS, DecimalScanner

__all__ = [
    "DecimalScanner",
    "MAX_EXPONENT_DIGITS",
    "parse_decimal",
    "ParseError",
    "MalformedInput",
]
