"""
Numeric extraction from selected CSV rows.

Two tokenizers are available:

    - strict: a cell is split on whitespace and a piece counts only when the
      whole piece is a decimal literal ("12.5" -> 12.5, "x7" -> nothing)
    - inclusive: every decimal literal embedded in the cell text counts
      ("x7" -> 7, "5kg/10kg" -> 5, 10)

Neither tokenizer accepts nan, inf or underscore-grouped digits, which
Python's float() would otherwise allow.
"""

from __future__ import annotations

import math
import re

from line_compare.data_formats.table import ParsedTable

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

STRICT = "strict"
INCLUSIVE = "inclusive"
TOKENIZER_MODES = (STRICT, INCLUSIVE)

LineNumberMap = dict[int, list[float]]


def extract_numbers_from_cell(cell: str, mode: str = STRICT) -> list[float]:
    """Return the numeric tokens of one cell, left to right.

    Raises:
        ValueError: If mode is not a known tokenizer.

    Examples:
        >>> extract_numbers_from_cell("12.5")
        [12.5]
        >>> extract_numbers_from_cell("x7")
        []
        >>> extract_numbers_from_cell("x7", mode="inclusive")
        [7.0]
    """
    if mode == STRICT:
        tokens = [piece for piece in cell.split() if NUMBER_PATTERN.fullmatch(piece)]
    elif mode == INCLUSIVE:
        tokens = NUMBER_PATTERN.findall(cell)
    else:
        raise ValueError(
            f"Unsupported tokenizer mode '{mode}'. Use one of: {', '.join(TOKENIZER_MODES)}"
        )
    # Literals such as "1e999" overflow to inf and are not numbers either
    return [value for value in map(float, tokens) if math.isfinite(value)]


def extract_numbers_from_row(row: list[str], mode: str = STRICT) -> list[float]:
    """Return the numeric tokens of a row, cell by cell."""
    numbers: list[float] = []
    for cell in row:
        numbers.extend(extract_numbers_from_cell(cell, mode))
    return numbers


def extract_numbers_from_lines(
    table: ParsedTable,
    line_numbers: list[int],
    mode: str = STRICT,
) -> LineNumberMap:
    """Extract the numbers found on each requested line of a table.

    Args:
        table: The parsed CSV table.
        line_numbers: 1-based line numbers into ``table.rows``.
        mode: Tokenizer mode ('strict' or 'inclusive').

    Returns:
        A mapping from each requested line number to its numbers. Lines past
        the end of the table map to an empty list.

    Examples:
        >>> table = ParsedTable(rows=[["a", "1"], ["2", "3"]])
        >>> extract_numbers_from_lines(table, [2, 9])
        {2: [2.0, 3.0], 9: []}
    """
    result: LineNumberMap = {}
    for line_number in line_numbers:
        row = table.get_row(line_number)
        result[line_number] = extract_numbers_from_row(row, mode) if row else []
    return result
