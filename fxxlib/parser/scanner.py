"""Character scanner for decimal literals."""

from __future__ import annotations

from fxxlib.core.literal import DecimalLiteral
from fxxlib.diagnostics.collector import DiagnosticCollector
from fxxlib.diagnostics.location import SourceLocation

_DIGITS = frozenset("0123456789")
_SIGNS = ("+", "-")
_EXPONENT_MARKERS = ("e", "E")

# Exponent suffixes with more significant digits than this saturate. Any such
# magnitude is far outside every supported format.
MAX_EXPONENT_DIGITS = 12


class DecimalScanner:
    """Scan ``[+-] digits [. digits] [(e|E) [+-] digits]`` into a DecimalLiteral.

    At least one digit is required on either side of the point. Every
    violation is reported to the diagnostic collector and ends the scan.
    """

    def __init__(
        self,
        source: str,
        name: str = "<input>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._source = source
        self._name = name
        self._diag = diagnostics or DiagnosticCollector()
        self._pos = 0

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _loc(self, pos: int | None = None, end: int | None = None) -> SourceLocation:
        pos = self._pos if pos is None else pos
        return SourceLocation(
            source=self._name,
            column=pos + 1,
            end_column=None if end is None else end + 1,
        )

    def _scan_digits(self) -> str:
        begin = self._pos
        while not self._at_end() and self._peek() in _DIGITS:
            self._advance()
        return self._source[begin : self._pos]

    def _unexpected(self) -> None:
        self._diag.error(f"Unexpected character: {self._peek()!r}", self._loc())

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _scan_exponent(self) -> int | None:
        """Scan an exponent suffix. The marker is the current character."""
        marker = self._pos
        self._advance()
        negative = False
        if self._peek() in _SIGNS:
            negative = self._advance() == "-"
        digits = self._scan_digits()
        if not digits:
            if self._at_end():
                self._diag.error(
                    "Expected digits after exponent marker",
                    self._loc(marker, self._pos - 1),
                )
            else:
                self._unexpected()
            return None

        significant = digits.lstrip("0")
        if len(significant) > MAX_EXPONENT_DIGITS:
            self._diag.warning(
                f"Exponent has {len(significant)} significant digits; "
                f"saturated to 1e{MAX_EXPONENT_DIGITS}",
                self._loc(marker, self._pos - 1),
            )
            magnitude = 10**MAX_EXPONENT_DIGITS
        else:
            magnitude = int(significant or "0")
        return -magnitude if negative else magnitude

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def scan(self) -> DecimalLiteral | None:
        """Scan the whole input. Returns None if an error was reported."""
        if self._at_end():
            self._diag.error("Empty input", self._loc())
            return None

        negative = False
        if self._peek() in _SIGNS:
            negative = self._advance() == "-"

        int_digits = self._scan_digits()
        frac_digits = ""
        if self._peek() == ".":
            self._advance()
            frac_digits = self._scan_digits()
            if self._peek() == ".":
                self._diag.error("More than one decimal point", self._loc())
                return None

        if not int_digits and not frac_digits:
            if self._at_end() or self._peek() == "." or self._peek() in _EXPONENT_MARKERS:
                self._diag.error("Expected at least one digit", self._loc())
            else:
                self._unexpected()
            return None

        exponent = 0
        if self._peek() in _EXPONENT_MARKERS:
            scanned = self._scan_exponent()
            if scanned is None:
                return None
            exponent = scanned

        if not self._at_end():
            self._unexpected()
            return None

        return DecimalLiteral.from_parts(negative, int_digits, frac_digits, exponent)
