"""
CSV Line Compare.

Sums the numbers found on chosen lines of two CSV files and compares the
sums side by side, from the command line or in a Textual terminal UI.

Usage:
    uv run line-compare compare a.csv b.csv --lines1 3 --lines2 2
    uv run line-compare-tui a.csv b.csv

Components:
    - parse_line_numbers: Line-number field parsing
    - CSVReader: Asynchronous CSV reading into ParsedTable
    - extract_numbers_from_lines: Numeric token extraction
    - build_report / render_text: Report building and rendering
    - process_request / ProcessingSlot: One guarded processing cycle
"""

__version__ = "0.1.0"
