"""
File Picker Screen for choosing a CSV file.

Displays the supported files of a directory in a modal table. Enter picks
the highlighted file; Escape cancels.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DataTable, Static

from line_compare.data_formats import format_file_size
from line_compare.tui.mixins import DataTableMixin


class FilePickerScreen(DataTableMixin, ModalScreen[str | None]):
    """Modal screen listing the CSV files of one directory.

    Dismisses with the chosen file path, or None when cancelled.
    """

    CSS = """
    FilePickerScreen {
        align: center middle;
    }

    #picker-dialog {
        width: 80%;
        height: 80%;
        border: thick $primary;
        background: $surface;
    }

    #dir-header {
        background: $primary-background;
        color: $text;
        padding: 1;
        text-align: center;
        text-style: bold;
    }

    #file-table {
        height: 1fr;
    }

    #picker-help {
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(self, directory: str, files: list[dict]) -> None:
        """Initialize the FilePickerScreen.

        Args:
            directory: Path to the directory being displayed.
            files: List of file info dicts with path, name, format, size.
        """
        super().__init__()
        self._directory = directory
        self._files = files

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-dialog"):
            yield Static(f"Directory: {self._directory}", id="dir-header", markup=False)
            yield DataTable(id="file-table")
            yield Static("Enter: choose file    Escape: cancel", id="picker-help")

    def on_mount(self) -> None:
        """Fill the table when the screen is mounted."""
        table = self._setup_table(
            "file-table",
            [
                ("FILE NAME", 50),
                ("FORMAT", 8),
                ("SIZE", 12),
            ],
        )

        for file_info in self._files:
            table.add_row(
                file_info["name"],
                file_info["format"].upper(),
                format_file_size(file_info["size"]),
                key=file_info["path"],  # Use path as row key
            )

        table.focus()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Dismiss with the selected file path."""
        self.dismiss(self._get_selected_row_key(event))

    def action_cancel(self) -> None:
        self.dismiss(None)
