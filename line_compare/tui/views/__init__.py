"""TUI views for CSV Line Compare."""

from line_compare.tui.views.compare_screen import CompareScreen
from line_compare.tui.views.file_picker import FilePickerScreen

__all__ = ["CompareScreen", "FilePickerScreen"]
