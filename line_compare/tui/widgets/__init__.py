"""TUI widgets for CSV Line Compare."""

from line_compare.tui.widgets.report_view import ReportView, file_report_text

__all__ = [
    "ReportView",
    "file_report_text",
]
