"""Error types for the decimal literal parser."""

from __future__ import annotations

from fxxlib.diagnostics.diagnostic import Diagnostic
from fxxlib.diagnostics.location import SourceLocation


class ParseError(Exception):
    """Raised during parsing on unrecoverable errors."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.location = location


class MalformedInput(ParseError):
    """The input is not a decimal literal.

    ``diagnostics`` holds every error reported while scanning the input.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
        diagnostics: tuple[Diagnostic, ...] = (),
    ) -> None:
        super().__init__(message, location)
        self.diagnostics = diagnostics

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.location}: {message}" if self.location else message
