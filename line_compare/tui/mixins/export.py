"""
Export Mixin for writing the current report in a background thread.

Provides:
- _get_output_dir(): Output directory from the app or the default
- _get_export_format(): Export format from the app or the default
- _run_export_report(): Threaded export that updates an ExportingScreen
- _dismiss_export_screen(): Dismiss the progress screen after a delay

Usage:
    class MyScreen(ExportMixin, Screen):
        def action_export_report(self):
            screen = ExportingScreen(title="Exporting Report...")
            self.app.push_screen(screen)
            self._run_export_report(screen, report, "sales.csv")
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from textual import work

from line_compare.export import DEFAULT_OUTPUT_DIR, export_report
from line_compare.report import Report

if TYPE_CHECKING:
    from line_compare.tui.screens import ExportingScreen

logger = logging.getLogger(__name__)


class ExportMixin:
    """Mixin providing report export helpers for screens."""

    # Delay before dismissing the export completion screen
    EXPORT_COMPLETION_DELAY: float = 1.5

    def _get_output_dir(self) -> str:
        """Get the output directory from app or use default."""
        output_dir = getattr(self.app, "output_dir", None)
        if not output_dir:
            output_dir = DEFAULT_OUTPUT_DIR
        return output_dir

    def _get_export_format(self) -> str:
        return getattr(self.app, "export_format", None) or "json"

    def _dismiss_export_screen(self) -> None:
        """Dismiss the export screen after a brief delay (worker thread only)."""
        time.sleep(self.EXPORT_COMPLETION_DELAY)
        self.app.call_from_thread(self.app.pop_screen)

    @work(thread=True)
    def _run_export_report(
        self,
        exporting_screen: "ExportingScreen",
        report: Report,
        source_filename: str,
    ) -> None:
        """Run the report export in a background thread."""
        output_dir = self._get_output_dir()
        export_format = self._get_export_format()
        self.app.call_from_thread(
            exporting_screen.update_progress, 0, 1, source_filename
        )

        try:
            output_path = export_report(
                report,
                output_dir=output_dir,
                source_filename=source_filename,
                format=export_format,
            )
        except (OSError, ValueError) as e:
            logger.warning("Export failed: %s", e)
            self.app.call_from_thread(exporting_screen.set_error, f"Export failed: {e}")
        else:
            self.app.call_from_thread(exporting_screen.update_progress, 1, 1, source_filename)
            self.app.call_from_thread(
                exporting_screen.set_complete, f"Exported to {output_path}"
            )

        self._dismiss_export_screen()
