from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedLine:
    """Fields recognized in one grep-like input line.

    - prefix: inner path chunk captured ahead of the file path, if any
    - row/column: digit text exactly as it appeared, never converted to int
    - contents: everything after the location, possibly empty
    """
    filepath: str
    contents: str
    prefix: str | None = None
    row: str | None = None
    column: str | None = None

    @property
    def row_text(self) -> str:
        return self.row if self.row is not None else "0"

    @property
    def column_text(self) -> str:
        return self.column if self.column is not None else "0"


@dataclass(frozen=True)
class Span:
    """A slice of message contents, marked when it matched the highlight pattern."""
    text: str
    matched: bool = False
