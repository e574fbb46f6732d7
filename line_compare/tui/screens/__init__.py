"""Reusable screen components for the TUI application."""

from line_compare.tui.screens.progress import ExportingScreen, ProgressScreen

__all__ = [
    "ProgressScreen",
    "ExportingScreen",
]
