"""
In-memory table types shared by the CSV reader and the extractor.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReadOptions:
    """How a CSV file should be parsed.

    Attributes:
        delimiter: Field separator character, or "auto" to detect it.
        has_headers: Whether the first row is a header and excluded from
            the numbered rows.
        encoding: Text encoding used to decode the file bytes.
    """

    delimiter: str = ","
    has_headers: bool = False
    encoding: str = "utf-8-sig"


@dataclass
class ParsedTable:
    """A CSV file parsed into rows of string cells.

    Row 1 (as typed by the user) is ``rows[0]``. When the file was read with
    ``has_headers``, the header row is kept in ``headers`` and is not part of
    ``rows``.
    """

    rows: list[list[str]] = field(default_factory=list)
    headers: list[str] | None = None
    source: str = ""
    delimiter: str = ","

    @property
    def row_count(self) -> int:
        """Number of data rows."""
        return len(self.rows)

    def get_row(self, line_number: int) -> list[str] | None:
        """Return the row for a 1-based line number, or None if out of range."""
        if line_number < 1 or line_number > len(self.rows):
            return None
        return self.rows[line_number - 1]
