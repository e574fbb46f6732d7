"""
Delimiter and file-type detection for CSV-like files.

This module maps delimiter names to characters, maps file extensions to
formats, and picks a delimiter when the user asks for "auto".
"""

from __future__ import annotations

from pathlib import Path

# Delimiter choices offered by the CLI and the TUI
DELIMITERS: dict[str, str] = {
    "comma": ",",
    "semicolon": ";",
    "tab": "\t",
    "pipe": "|",
    "space": " ",
}

AUTO_DELIMITER = "auto"

DEFAULT_DELIMITER = ","

# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".csv": "csv",
    ".tsv": "tsv",
    ".txt": "txt",
}

# Candidates checked when sniffing, in tie-break order
SNIFF_CANDIDATES = [",", ";", "\t", "|"]


def resolve_delimiter_name(name: str) -> str:
    """Turn a delimiter name or literal character into what the reader expects.

    Args:
        name: A key of DELIMITERS, "auto", or a single literal character.

    Returns:
        The delimiter character, or "auto".

    Raises:
        ValueError: If the name is neither a known choice nor a single character.

    Examples:
        >>> resolve_delimiter_name("semicolon")
        ';'
        >>> resolve_delimiter_name("|")
        '|'
    """
    if name == AUTO_DELIMITER:
        return AUTO_DELIMITER
    if name in DELIMITERS:
        return DELIMITERS[name]
    if len(name) == 1:
        return name
    raise ValueError(
        f"Unsupported delimiter '{name}'. "
        f"Choose one of: {', '.join([*DELIMITERS, AUTO_DELIMITER])} or a single character"
    )


def sniff_delimiter(first_line: str) -> str:
    """Pick the candidate delimiter that occurs most often in the first line.

    Falls back to a comma when no candidate occurs at all.
    """
    best = max(SNIFF_CANDIDATES, key=first_line.count)
    if first_line.count(best) == 0:
        return DEFAULT_DELIMITER
    return best


def detect_delimiter(filename: str, text: str) -> str:
    """Detect the delimiter of a file from its extension or its content.

    ``.tsv`` files are always tab-separated; anything else is sniffed from
    the first non-blank line.
    """
    if Path(filename).suffix.lower() == ".tsv":
        return "\t"

    for line in text.splitlines():
        if line.strip():
            return sniff_delimiter(line)
    return DEFAULT_DELIMITER
