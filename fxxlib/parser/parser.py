"""Entry point of the decimal literal grammar.

Accepts ``[+-] digits [. digits] [(e|E) [+-] digits]`` with at least one
digit in the mantissa, e.g. ``0.3``, ``-1.``, ``.5``, ``+6.02e23``.
"""

from __future__ import annotations

from typing import Union

from fxxlib.core.literal import DecimalLiteral
from fxxlib.diagnostics.collector import DiagnosticCollector
from fxxlib.parser.errors import MalformedInput
from fxxlib.parser.scanner import DecimalScanner

BytesLike = Union[bytes, bytearray, memoryview]


def _as_text(data: BytesLike | str) -> str:
    """Map input bytes one-to-one onto characters.

    Latin-1 never fails to decode, so non-ASCII bytes survive as single
    characters and are rejected by the scanner at their own column.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("latin-1")
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def parse_decimal(
    data: BytesLike | str,
    diagnostics: DiagnosticCollector | None = None,
    name: str = "<input>",
) -> DecimalLiteral:
    """Parse *data* into a normalised DecimalLiteral.

    Args:
        data: The literal, as bytes or str.
        diagnostics: Optional collector that receives warnings and errors.
        name: Label used in diagnostic locations.

    Raises:
        MalformedInput: If *data* is not a decimal literal.
    """
    diag = diagnostics or DiagnosticCollector()
    seen = len(diag.errors())
    literal = DecimalScanner(_as_text(data), name, diag).scan()
    if literal is None:
        errors = tuple(diag.errors()[seen:])
        first = errors[0]
        raise MalformedInput(first.message, first.location, errors)
    return literal
