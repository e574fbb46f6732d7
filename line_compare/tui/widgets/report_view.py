"""
Report View widget showing per-file results and the comparison table.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from line_compare.report import (
    NO_NUMBERS_TEXT,
    FileReport,
    Report,
    format_number,
    format_sum,
    render_text,
)
from line_compare.tui.mixins import DataTableMixin

COMPARISON_COLUMNS: list[tuple[str, int | None]] = [
    ("FILE 1 LINE", 12),
    ("SUM 1", 14),
    ("FILE 2 LINE", 12),
    ("SUM 2", 14),
    ("DIFFERENCE", 14),
]


def file_report_text(file_report: FileReport) -> Text:
    """Build the styled text of one file's section."""
    text = Text()
    text.append(f"{file_report.label} Results\n", style="bold")
    text.append(f"Total rows: {file_report.row_count}\n", style="dim")

    for line in file_report.lines:
        text.append(f"Line {line.line_number}: ", style="bold")
        if line.has_numbers:
            text.append(", ".join(format_number(n) for n in line.numbers), style="cyan")
            text.append(f" (Sum: {format_sum(line.total)})", style="green")
        else:
            text.append(NO_NUMBERS_TEXT, style="italic yellow")
        text.append("\n")

    text.rstrip()
    return text


class ReportView(DataTableMixin, Vertical):
    """Displays a Report: one section per file and an optional comparison."""

    DEFAULT_CSS = """
    ReportView {
        height: auto;
    }

    ReportView .result-group {
        border: solid $primary;
        padding: 0 1;
        margin-bottom: 1;
        height: auto;
    }

    ReportView #comparison-header {
        text-style: bold;
        padding: 0 1;
    }

    ReportView #comparison-table {
        height: auto;
        max-height: 20;
    }
    """

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._report: Report | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="file1-result", classes="result-group")
        yield Static("", id="file2-result", classes="result-group")
        yield Static("Comparison", id="comparison-header")
        yield DataTable(id="comparison-table")

    def on_mount(self) -> None:
        self._setup_table("comparison-table", COMPARISON_COLUMNS, cursor_type="none")
        self._set_comparison_visible(False)

    @property
    def report(self) -> Report | None:
        """The report currently displayed."""
        return self._report

    @property
    def report_text(self) -> str:
        """Plain-text rendering of the displayed report ('' when empty)."""
        return render_text(self._report) if self._report else ""

    def show_report(self, report: Report) -> None:
        """Replace the displayed report."""
        self._report = report
        self.query_one("#file1-result", Static).update(file_report_text(report.file1))
        self.query_one("#file2-result", Static).update(file_report_text(report.file2))

        table = self.query_one("#comparison-table", DataTable)
        table.clear()
        if report.comparison is None:
            self._set_comparison_visible(False)
            return

        for row in report.comparison:
            table.add_row(
                str(row.line1),
                format_sum(row.sum1),
                str(row.line2),
                format_sum(row.sum2),
                format_sum(row.difference),
            )
        self._set_comparison_visible(True)

    def clear_report(self) -> None:
        self._report = None
        self.query_one("#file1-result", Static).update("")
        self.query_one("#file2-result", Static).update("")
        self.query_one("#comparison-table", DataTable).clear()
        self._set_comparison_visible(False)

    def _set_comparison_visible(self, visible: bool) -> None:
        self.query_one("#comparison-header", Static).display = visible
        self.query_one("#comparison-table", DataTable).display = visible
