"""Tests for report building and rendering in line_compare/report.py."""

from __future__ import annotations

import pytest

from line_compare.data_formats import ParsedTable
from line_compare.report import (
    ComparisonRow,
    LineResult,
    build_comparison,
    build_report,
    format_number,
    format_sum,
    render_text,
    report_to_records,
)


def make_report(lines1, lines2, numbers1, numbers2):
    table1 = ParsedTable(rows=[["x"]] * 4, source="a.csv")
    table2 = ParsedTable(rows=[["y"]] * 3, source="b.csv")
    return build_report(table1, table2, numbers1, numbers2, lines1, lines2)


class TestFormatting:
    """Tests for format_number() and format_sum()."""

    @pytest.mark.parametrize(
        "value,expected",
        [(5.0, "5"), (12.5, "12.5"), (-3.0, "-3"), (0.1, "0.1"), (1e20, "1e+20")],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, "0.00"), (15.0, "15.00"), (1.005, "1.00"), (-0.001, "0.00"), (-2.5, "-2.50")],
    )
    def test_format_sum(self, value, expected):
        assert format_sum(value) == expected


class TestLineResult:
    """Tests for LineResult totals."""

    def test_empty_sum_is_zero(self):
        line = LineResult(3)
        assert line.total == 0.0
        assert not line.has_numbers
        assert format_sum(line.total) == "0.00"

    def test_sum(self):
        assert LineResult(1, [1.5, 2.5]).total == 4.0


class TestBuildComparison:
    """Tests for build_comparison()."""

    def test_equal_lengths_pair_by_position(self):
        rows = build_comparison({1: [2.0], 2: [3.0]}, {5: [1.0], 6: []}, [1, 2], [5, 6])
        assert rows == [
            ComparisonRow(line1=1, line2=5, sum1=2.0, sum2=1.0),
            ComparisonRow(line1=2, line2=6, sum1=3.0, sum2=0.0),
        ]
        assert rows[0].difference == 1.0
        assert rows[1].difference == 3.0

    def test_different_lengths_produce_nothing(self):
        assert build_comparison({1: [1.0]}, {1: [1.0], 2: [2.0]}, [1], [1, 2]) is None

    def test_row_count_matches_selection(self):
        rows = build_comparison({}, {}, [1, 2, 3], [4, 5, 6])
        assert len(rows) == 3


class TestBuildReport:
    """Tests for build_report()."""

    def test_sections_follow_requested_order(self):
        report = make_report([3, 1], [2], {1: [1.0], 3: [5.0, 10.0]}, {2: [3.0, 4.0]})
        assert [line.line_number for line in report.file1.lines] == [3, 1]
        assert report.file1.row_count == 4
        assert report.file2.row_count == 3
        assert report.file1.source == "a.csv"
        assert not report.has_comparison

    def test_missing_line_in_map_is_empty(self):
        report = make_report([9], [9], {}, {})
        assert report.file1.lines[0].numbers == []
        assert report.comparison[0].sum1 == 0.0


class TestRenderText:
    """Tests for render_text()."""

    def test_full_report(self):
        report = make_report([3], [2], {3: [5.0, 10.0]}, {2: [3.0, 4.0]})
        assert render_text(report) == (
            "CSV File 1 Results\n"
            "Total rows: 4\n"
            "  Line 3: 5, 10 (Sum: 15.00)\n"
            "\n"
            "CSV File 2 Results\n"
            "Total rows: 3\n"
            "  Line 2: 3, 4 (Sum: 7.00)\n"
            "\n"
            "Comparison\n"
            "  File 1 Line 3: 15.00 | File 2 Line 2: 7.00 | Difference: 8.00\n"
        )

    def test_no_numbers_found(self):
        report = make_report([1], [1, 2], {1: []}, {1: [1.0], 2: [2.0]})
        text = render_text(report)
        assert "Line 1: No numbers found" in text
        assert "Comparison" not in text

    def test_rendering_is_deterministic(self):
        report = make_report([3, 1], [2, 2], {1: [0.1, 0.2], 3: [5.0]}, {2: [3.0]})
        assert render_text(report) == render_text(report)


class TestReportToRecords:
    """Tests for report_to_records()."""

    def test_records(self):
        report = make_report([3], [2], {3: [5.0, 10.0]}, {2: [3.0, 4.0]})
        records = report_to_records(report)

        assert len(records) == 3
        assert records[0]["kind"] == "line"
        assert records[0]["file"] == 1
        assert records[0]["line1"] == 3
        assert records[0]["sum1"] == 15.0
        assert records[1]["line2"] == 2
        assert records[1]["sum2"] == 7.0
        assert records[2] == {
            "kind": "comparison",
            "file": None,
            "source": None,
            "line1": 3,
            "line2": 2,
            "numbers": [],
            "sum1": 15.0,
            "sum2": 7.0,
            "difference": 8.0,
        }

    def test_all_records_share_keys(self):
        report = make_report([1, 2], [1, 2], {1: [1.0]}, {2: [2.0]})
        keys = {tuple(sorted(record)) for record in report_to_records(report)}
        assert len(keys) == 1
