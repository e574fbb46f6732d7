"""
TUI for CSV Line Compare.

A Textual-based terminal UI for choosing two CSV files and line numbers,
then viewing the numbers, sums and line-by-line comparison.

Usage:
    uv run python -m line_compare.tui.app sales_2023.csv sales_2024.csv --lines1 3 --lines2 3

Components:
    - LineCompareApp: Main application class
    - CompareScreen: Input form and report view
    - FilePickerScreen: Modal CSV file chooser
    - ReportView: Per-file results and comparison table
"""
