"""
Line-number parsing for the comparison form.

Users type line numbers as free text (``"1, 4, 7"``). Tokens that are not
positive integers are dropped silently; only an empty result is an error,
and that check is left to the caller via require_line_numbers().
"""

from __future__ import annotations

import re

from line_compare.errors import ValidationError

# Leading optional sign and digits, the rest of the token is ignored ("3abc" -> 3)
LEADING_INT_PATTERN = re.compile(r"^[+-]?[0-9]+")

EMPTY_SELECTION_MESSAGE = "Please enter valid line numbers for both files"


def _parse_leading_int(token: str) -> int | None:
    match = LEADING_INT_PATTERN.match(token)
    if match is None:
        return None
    return int(match.group(0))


def parse_line_numbers(text: str) -> list[int]:
    """Parse a comma-separated list of 1-based line numbers.

    Args:
        text: Free text typed by the user.

    Returns:
        The positive line numbers in input order. Duplicates are kept.

    Examples:
        >>> parse_line_numbers("1, -2, abc, 3")
        [1, 3]
        >>> parse_line_numbers("2.7, 0, 5")
        [2, 5]
    """
    numbers: list[int] = []
    for token in text.split(","):
        value = _parse_leading_int(token.strip())
        if value is not None and value > 0:
            numbers.append(value)
    return numbers


def require_line_numbers(text1: str, text2: str) -> tuple[list[int], list[int]]:
    """Parse both line-number fields, rejecting an empty selection on either side.

    Raises:
        ValidationError: If either field yields no valid line numbers.
    """
    lines1 = parse_line_numbers(text1)
    lines2 = parse_line_numbers(text2)
    if not lines1 or not lines2:
        raise ValidationError(EMPTY_SELECTION_MESSAGE)
    return lines1, lines2
