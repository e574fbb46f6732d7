"""Mixins for the TUI application."""

from line_compare.tui.mixins.data_table import DataTableMixin
from line_compare.tui.mixins.export import ExportMixin

__all__ = [
    "DataTableMixin",
    "ExportMixin",
]
