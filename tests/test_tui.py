"""Tests for the Textual UI in line_compare/tui.

The app is driven headlessly with App.run_test(); each test wraps its
scenario in asyncio.run().
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from textual.widgets import Button, DataTable, Input

from line_compare.tui.app import LineCompareApp
from line_compare.tui.mixins import ExportMixin
from line_compare.tui.views import CompareScreen, FilePickerScreen
from line_compare.tui.widgets import ReportView


def run_scenario(app: LineCompareApp, scenario) -> None:
    """Run an async scenario(app, pilot) against a headless app."""

    async def runner() -> None:
        async with app.run_test(size=(140, 50)) as pilot:
            await pilot.pause()
            await scenario(app, pilot)

    asyncio.run(runner())


async def process(app: LineCompareApp, pilot) -> CompareScreen:
    """Trigger processing and wait for the worker to finish."""
    screen = app.screen
    screen.action_process()
    await app.workers.wait_for_complete()
    await pilot.pause()
    return screen


def make_app(file_a: Path, file_b: Path, lines1: str = "3", lines2: str = "2", **kwargs):
    return LineCompareApp(
        file1=str(file_a), file2=str(file_b), lines1=lines1, lines2=lines2, **kwargs
    )


class TestProcessButton:
    """The Process button is enabled only when the form is complete."""

    def test_disabled_when_empty(self):
        async def scenario(app, pilot):
            assert isinstance(app.screen, CompareScreen)
            assert app.screen.query_one("#process-btn", Button).disabled

        run_scenario(LineCompareApp(), scenario)

    def test_enabled_after_filling_fields(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = app.screen
            assert screen.query_one("#process-btn", Button).disabled

            screen.query_one("#lines1", Input).value = "3"
            await pilot.pause()
            assert screen.query_one("#process-btn", Button).disabled

            screen.query_one("#lines2", Input).value = "2"
            await pilot.pause()
            assert not screen.query_one("#process-btn", Button).disabled

        run_scenario(make_app(file_a, file_b, lines1="", lines2=""), scenario)

    def test_file_name_is_displayed(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = app.screen
            assert screen._describe_path(str(file_a)) == "a.csv"
            assert screen._describe_path("") == "No file selected"
            assert screen._describe_path(str(file_a) + ".gone") == "a.csv.gone (not found)"

        run_scenario(make_app(file_a, file_b), scenario)


class TestProcessing:
    """Processing from the form."""

    def test_end_to_end_report(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = await process(app, pilot)

            assert screen.error_text == ""
            report_view = screen.query_one("#report", ReportView)
            assert report_view.display
            assert screen.result.report.comparison[0].difference == 8.0
            assert "Line 3: 5, 10 (Sum: 15.00)" in report_view.report_text
            assert screen.query_one("#comparison-table", DataTable).row_count == 1
            assert not screen.processing
            assert not screen.query_one("#process-btn", Button).disabled

        run_scenario(make_app(file_a, file_b), scenario)

    def test_f5_triggers_processing(self, file_a, file_b):
        async def scenario(app, pilot):
            await pilot.press("f5")
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert app.screen.result is not None

        run_scenario(make_app(file_a, file_b), scenario)

    def test_no_comparison_for_unequal_selections(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = await process(app, pilot)
            assert screen.result.report.comparison is None
            assert not screen.query_one("#comparison-table", DataTable).display

        run_scenario(make_app(file_a, file_b, lines1="1,3", lines2="2"), scenario)

    def test_validation_error(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = await process(app, pilot)
            assert screen.error_text == "Error: Please enter valid line numbers for both files"
            assert screen.result is None
            assert not screen.query_one("#report", ReportView).display

        run_scenario(make_app(file_a, file_b, lines1="abc"), scenario)

    def test_read_error_then_recovery(self, file_a, file_b, tmp_path):
        missing = tmp_path / "missing.csv"

        async def scenario(app, pilot):
            screen = await process(app, pilot)
            assert screen.error_text.startswith("Error: Could not read")
            assert screen.result is None

            screen.query_one("#file2-path", Input).value = str(file_b)
            await pilot.pause()
            await process(app, pilot)
            assert screen.error_text == ""
            assert screen.result.report.comparison[0].difference == 8.0

        run_scenario(make_app(file_a, missing), scenario)

    def test_processing_twice_gives_identical_report(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = await process(app, pilot)
            first = screen.query_one("#report", ReportView).report_text
            await process(app, pilot)
            second = screen.query_one("#report", ReportView).report_text
            assert first == second
            assert first

        run_scenario(make_app(file_a, file_b), scenario)

    def test_headers_option(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = await process(app, pilot)
            assert screen.result.report.file1.row_count == 3
            assert screen.result.report.comparison[0].difference == 8.0

        run_scenario(make_app(file_a, file_b, lines1="2", lines2="1", has_headers=True), scenario)


class TestFilePicker:
    """Browsing for a file."""

    def test_pick_file_fills_path(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = app.screen
            screen._browse(1)
            await pilot.pause()
            assert isinstance(app.screen, FilePickerScreen)

            await pilot.press("down")
            await pilot.press("enter")
            await pilot.pause()
            assert app.screen is screen
            assert screen.query_one("#file1-path", Input).value == str(file_b)

        run_scenario(make_app(file_a, file_a), scenario)

    def test_cancel_keeps_path(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = app.screen
            screen._browse(2)
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert app.screen is screen
            assert screen.query_one("#file2-path", Input).value == str(file_b)

        run_scenario(make_app(file_a, file_b), scenario)


class TestExport:
    """Exporting the displayed report."""

    def test_export_writes_report(self, file_a, file_b, tmp_path, monkeypatch):
        monkeypatch.setattr(ExportMixin, "EXPORT_COMPLETION_DELAY", 0)
        out_dir = tmp_path / "reports"

        async def scenario(app, pilot):
            screen = await process(app, pilot)
            screen.action_export_report()
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert app.screen is screen

        run_scenario(make_app(file_a, file_b, output_dir=str(out_dir)), scenario)

        records = json.loads((out_dir / "a_report.json").read_text(encoding="utf-8"))
        assert records[-1]["difference"] == 8.0

    def test_export_without_report_does_nothing(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = app.screen
            screen.action_export_report()
            await pilot.pause()
            assert app.screen is screen

        run_scenario(make_app(file_a, file_b), scenario)

    def test_new_cycle_forgets_previous_report(self, file_a, file_b):
        async def scenario(app, pilot):
            screen = await process(app, pilot)
            assert screen.result is not None

            screen.query_one("#lines1", Input).value = "abc"
            await process(app, pilot)
            assert screen.result is None
            assert screen.error_text.startswith("Error:")

            screen.action_export_report()
            await pilot.pause()
            assert app.screen is screen

        run_scenario(make_app(file_a, file_b), scenario)


def test_quit_binding_lives_on_the_app():
    assert [b.key for b in LineCompareApp.BINDINGS] == ["ctrl+q"]
    assert "ctrl+q" not in [b.key for b in CompareScreen.BINDINGS]
