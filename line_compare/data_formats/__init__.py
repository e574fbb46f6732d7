"""
Data formats module for reading CSV-like files.

Usage:
    from line_compare.data_formats import CSVReader, ReadOptions

    table = await CSVReader().read("data.csv", ReadOptions(delimiter=";"))
    print(table.row_count)

    # Pick a delimiter from its menu name
    from line_compare.data_formats import resolve_delimiter_name
    resolve_delimiter_name("tab")  # Returns '\\t'
"""

from line_compare.data_formats.csv_reader import CSVReader, read_table_sync
from line_compare.data_formats.directory_loader import discover_csv_files, format_file_size
from line_compare.data_formats.format_detector import (
    AUTO_DELIMITER,
    DEFAULT_DELIMITER,
    DELIMITERS,
    EXTENSION_MAP,
    detect_delimiter,
    resolve_delimiter_name,
    sniff_delimiter,
)
from line_compare.data_formats.table import ParsedTable, ReadOptions

__all__ = [
    # Reader
    "CSVReader",
    "read_table_sync",
    # Table types
    "ParsedTable",
    "ReadOptions",
    # Delimiters
    "AUTO_DELIMITER",
    "DEFAULT_DELIMITER",
    "DELIMITERS",
    "EXTENSION_MAP",
    "detect_delimiter",
    "resolve_delimiter_name",
    "sniff_delimiter",
    # Directory discovery
    "discover_csv_files",
    "format_file_size",
]
