"""
Compare Screen: the input form and report of CSV Line Compare.

Two panels collect a file path and line numbers for each CSV file. Shared
options (delimiter, header row, tokenizer) sit below them, followed by the
Process button, the error line and the report.

States:
    - idle: Process is disabled until both paths and both line fields are filled
    - processing: Process is disabled while the request is in flight
    - processed: the report is visible
    - errored: a single error message is visible, the report is hidden
"""

from __future__ import annotations

import logging
import os

from rich.text import Text
from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Checkbox, Footer, Header, Input, Label, Select, Static

from line_compare.data_formats import (
    AUTO_DELIMITER,
    ReadOptions,
    discover_csv_files,
    resolve_delimiter_name,
)
from line_compare.extractor import INCLUSIVE, STRICT
from line_compare.processing import CompareRequest, ProcessingSlot, ProcessResult
from line_compare.tui.mixins import ExportMixin
from line_compare.tui.screens import ExportingScreen
from line_compare.tui.views.file_picker import FilePickerScreen
from line_compare.tui.widgets import ReportView

logger = logging.getLogger(__name__)

DELIMITER_OPTIONS: list[tuple[str, str]] = [
    ("Comma (,)", "comma"),
    ("Semicolon (;)", "semicolon"),
    ("Tab", "tab"),
    ("Pipe (|)", "pipe"),
    ("Space", "space"),
    ("Auto-detect", AUTO_DELIMITER),
]

MODE_OPTIONS: list[tuple[str, str]] = [
    ("Whole numbers only (strict)", STRICT),
    ("Numbers inside text (inclusive)", INCLUSIVE),
]

NO_FILE_TEXT = "No file selected"


class CompareScreen(ExportMixin, Screen):
    """Form for choosing two files and line numbers, plus the resulting report."""

    CSS = """
    CompareScreen {
        layout: vertical;
    }

    #form-scroll {
        height: 1fr;
        padding: 0 1;
    }

    #inputs-container {
        height: auto;
    }

    .file-panel {
        width: 1fr;
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    #panel1 {
        border-right: none;
    }

    .panel-header {
        text-align: center;
        text-style: bold;
    }

    .path-row {
        height: auto;
    }

    .path-row Input {
        width: 1fr;
    }

    .file-name {
        color: $text-muted;
        padding: 0 1;
    }

    #options-row {
        height: auto;
        padding: 1 0;
    }

    #options-row Label {
        padding: 1 1 0 0;
    }

    #delimiter {
        width: 24;
    }

    #mode {
        width: 38;
    }

    #error {
        background: $error 20%;
        color: $text;
        padding: 0 1;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("f5", "process", "Process"),
        Binding("f6", "export_report", "Export Report"),
    ]

    def __init__(
        self,
        file1: str = "",
        file2: str = "",
        lines1: str = "",
        lines2: str = "",
        delimiter: str = "comma",
        has_headers: bool = False,
        mode: str = STRICT,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the CompareScreen with optional prefilled values.

        Args:
            file1: Initial path of the first file.
            file2: Initial path of the second file.
            lines1: Initial line numbers for the first file.
            lines2: Initial line numbers for the second file.
            delimiter: Delimiter menu value (see DELIMITER_OPTIONS).
            has_headers: Whether the header checkbox starts checked.
            mode: Tokenizer mode.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._initial = {
            1: (file1, lines1),
            2: (file2, lines2),
        }
        self._delimiter = delimiter
        self._has_headers = has_headers
        self._mode = mode
        self._slot = ProcessingSlot()
        self._processing = False
        self._result: ProcessResult | None = None
        self._error_message = ""

    def compose(self) -> ComposeResult:
        """Compose the form, error line and report."""
        yield Header()
        with VerticalScroll(id="form-scroll"):
            with Horizontal(id="inputs-container"):
                for index in (1, 2):
                    path, lines = self._initial[index]
                    with Vertical(id=f"panel{index}", classes="file-panel"):
                        yield Static(f"CSV File {index}", classes="panel-header")
                        with Horizontal(classes="path-row"):
                            yield Input(
                                value=path,
                                placeholder="Path to CSV file",
                                id=f"file{index}-path",
                            )
                            yield Button("Browse", id=f"browse{index}")
                        yield Static(
                            self._describe_path(path),
                            id=f"file-name{index}",
                            classes="file-name",
                            markup=False,
                        )
                        yield Input(
                            value=lines,
                            placeholder="Line numbers, e.g. 1, 3, 5",
                            id=f"lines{index}",
                        )
            with Horizontal(id="options-row"):
                yield Label("Delimiter")
                yield Select(
                    DELIMITER_OPTIONS,
                    value=self._delimiter,
                    allow_blank=False,
                    id="delimiter",
                )
                yield Checkbox("First row is a header", value=self._has_headers, id="has-headers")
                yield Select(MODE_OPTIONS, value=self._mode, allow_blank=False, id="mode")
                yield Button("Process", id="process-btn", variant="primary", disabled=True)
            yield Static("", id="error")
            yield ReportView(id="report")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#error", Static).display = False
        self.query_one("#report", ReportView).display = False
        self._update_process_button()
        self.query_one("#file1-path", Input).focus()

    # ============== Form state ==============

    @staticmethod
    def _describe_path(path: str) -> str:
        path = path.strip()
        if not path:
            return NO_FILE_TEXT
        name = os.path.basename(path) or path
        if not os.path.isfile(path):
            return f"{name} (not found)"
        return name

    def _field(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value.strip()

    @property
    def can_process(self) -> bool:
        """True when both files and both line fields are filled and nothing is running."""
        if self._processing:
            return False
        return all(
            self._field(widget_id)
            for widget_id in ("file1-path", "file2-path", "lines1", "lines2")
        )

    @property
    def processing(self) -> bool:
        return self._processing

    @property
    def result(self) -> ProcessResult | None:
        """Result of the last successful processing cycle."""
        return self._result

    def _update_process_button(self) -> None:
        self.query_one("#process-btn", Button).disabled = not self.can_process

    def on_input_changed(self, event: Input.Changed) -> None:
        input_id = event.input.id or ""
        if input_id.endswith("-path"):
            index = input_id[len("file")]
            self.query_one(f"#file-name{index}", Static).update(
                self._describe_path(event.value)
            )
        self._update_process_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.can_process:
            self.action_process()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "process-btn":
            self.action_process()
        elif button_id in ("browse1", "browse2"):
            self._browse(int(button_id[-1]))

    # ============== File picking ==============

    def _browse(self, index: int) -> None:
        """Open the file picker in the directory of the current path."""
        current = self._field(f"file{index}-path")
        directory = os.path.dirname(os.path.abspath(current)) if current else os.getcwd()
        if not os.path.isdir(directory):
            directory = os.getcwd()

        files = discover_csv_files(directory)
        if not files:
            self.notify(f"No CSV files found in {directory}", severity="warning")
            return

        def set_path(path: str | None) -> None:
            if path:
                self.query_one(f"#file{index}-path", Input).value = path

        self.app.push_screen(FilePickerScreen(directory, files), set_path)

    # ============== Processing ==============

    def _build_request(self) -> CompareRequest:
        delimiter = resolve_delimiter_name(str(self.query_one("#delimiter", Select).value))
        options = ReadOptions(
            delimiter=delimiter,
            has_headers=self.query_one("#has-headers", Checkbox).value,
        )
        return CompareRequest(
            file1=self._field("file1-path"),
            file2=self._field("file2-path"),
            lines1_text=self.query_one("#lines1", Input).value,
            lines2_text=self.query_one("#lines2", Input).value,
            options=options,
            mode=str(self.query_one("#mode", Select).value),
        )

    def action_process(self) -> None:
        """Start a processing cycle unless one is already running."""
        if not self.can_process:
            return

        self._processing = True
        self._update_process_button()
        self._hide_outputs()
        self._run_processing()

    @work(group="processing")
    async def _run_processing(self) -> None:
        """Read, extract and report; every failure ends up in the error line."""
        try:
            request = self._build_request()
            result = await self._slot.run(request)
        except Exception as e:
            logger.warning("Processing failed: %s", e)
            self._show_error(str(e))
        else:
            self._show_result(result)
        finally:
            self._processing = False
            self._update_process_button()

    def _hide_outputs(self) -> None:
        self._result = None
        self._error_message = ""
        self.query_one("#error", Static).display = False
        report_view = self.query_one("#report", ReportView)
        report_view.clear_report()
        report_view.display = False

    def _show_result(self, result: ProcessResult) -> None:
        self._result = result
        report_view = self.query_one("#report", ReportView)
        report_view.show_report(result.report)
        report_view.display = True
        report_view.scroll_visible()

    def _show_error(self, message: str) -> None:
        self._result = None
        self._error_message = f"Error: {message}"
        error = self.query_one("#error", Static)
        error.update(Text(self._error_message))
        error.display = True
        error.scroll_visible()

    @property
    def error_text(self) -> str:
        """The error line as shown, or '' when hidden."""
        return self._error_message

    # ============== Export ==============

    def action_export_report(self) -> None:
        """Export the displayed report to the output directory."""
        if self._result is None:
            self.notify("Nothing to export yet", severity="warning")
            return

        exporting_screen = ExportingScreen(title="Exporting Report...")
        self.app.push_screen(exporting_screen)
        self._run_export_report(
            exporting_screen,
            self._result.report,
            os.path.basename(self._result.table1.source) or "report",
        )
