"""Input position tracking for fxxlib diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A position inside a single decimal literal."""

    source: str
    column: int  # 1-indexed
    end_column: int | None = None

    def __str__(self) -> str:
        if self.end_column is not None and self.end_column != self.column:
            return f"{self.source}:{self.column}-{self.end_column}"
        return f"{self.source}:{self.column}"
