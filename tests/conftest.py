"""Pytest configuration and shared fixtures for line_compare tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from line_compare.data_formats import ParsedTable


def write_csv(path: Path, text: str, encoding: str = "utf-8") -> Path:
    """Helper to write CSV text to a file and return its path."""
    path.write_text(text, encoding=encoding)
    return path


@pytest.fixture
def file_a(tmp_path) -> Path:
    """CSV file whose third line is '5,10'."""
    return write_csv(
        tmp_path / "a.csv",
        "name,qty\n"
        "apples,3\n"
        "5,10\n"
        "pears,n/a\n",
    )


@pytest.fixture
def file_b(tmp_path) -> Path:
    """CSV file whose second line is '3,4'."""
    return write_csv(
        tmp_path / "b.csv",
        "label,value\n"
        "3,4\n"
        "plums,1.5\n",
    )


@pytest.fixture
def item_table() -> ParsedTable:
    """Table whose fifth row is ['item', '12.5', 'x7']."""
    return ParsedTable(
        rows=[
            ["header", "a", "b"],
            ["1", "2", "3"],
            ["", "", ""],
            ["4.5", "-1", "text"],
            ["item", "12.5", "x7"],
        ]
    )
