"""
Report building and rendering for a two-file line comparison.

The report lists, for each file, every requested line with its numbers and
their sum. When both files have the same number of requested lines, a
positional comparison pairs the i-th line of file 1 with the i-th line of
file 2.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from line_compare.data_formats.table import ParsedTable
from line_compare.extractor import LineNumberMap

DEFAULT_LABELS = ("CSV File 1", "CSV File 2")

NO_NUMBERS_TEXT = "No numbers found"


def format_number(value: float) -> str:
    """Render an extracted number the way it is listed in the report.

    Examples:
        >>> format_number(5.0)
        '5'
        >>> format_number(12.5)
        '12.5'
    """
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_sum(value: float) -> str:
    """Render a sum or difference with two decimals."""
    text = f"{value:.2f}"
    # Avoid "-0.00" for tiny negative values
    if text == "-0.00":
        return "0.00"
    return text


@dataclass
class LineResult:
    """Numbers extracted from one requested line."""

    line_number: int
    numbers: list[float] = field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(self.numbers, 0.0)

    @property
    def has_numbers(self) -> bool:
        return bool(self.numbers)


@dataclass
class FileReport:
    """Per-file section of the report."""

    label: str
    row_count: int
    lines: list[LineResult] = field(default_factory=list)
    source: str = ""


@dataclass
class ComparisonRow:
    """One positional pair of the comparison section."""

    line1: int
    line2: int
    sum1: float
    sum2: float

    @property
    def difference(self) -> float:
        return self.sum1 - self.sum2


@dataclass
class Report:
    """The full result of one processing cycle."""

    file1: FileReport
    file2: FileReport
    comparison: list[ComparisonRow] | None = None

    @property
    def has_comparison(self) -> bool:
        return self.comparison is not None


def build_file_report(
    label: str,
    table: ParsedTable,
    numbers: LineNumberMap,
    line_numbers: list[int],
) -> FileReport:
    """Build one file's section, in the order the lines were requested."""
    lines = [
        LineResult(line_number, list(numbers.get(line_number, [])))
        for line_number in line_numbers
    ]
    return FileReport(label=label, row_count=table.row_count, lines=lines, source=table.source)


def build_comparison(
    numbers1: LineNumberMap,
    numbers2: LineNumberMap,
    lines1: list[int],
    lines2: list[int],
) -> list[ComparisonRow] | None:
    """Pair requested lines position by position.

    Returns:
        One ComparisonRow per position, or None when the two selections have
        different lengths.
    """
    if len(lines1) != len(lines2):
        return None

    rows = []
    for line1, line2 in zip(lines1, lines2):
        rows.append(
            ComparisonRow(
                line1=line1,
                line2=line2,
                sum1=sum(numbers1.get(line1, []), 0.0),
                sum2=sum(numbers2.get(line2, []), 0.0),
            )
        )
    return rows


def build_report(
    table1: ParsedTable,
    table2: ParsedTable,
    numbers1: LineNumberMap,
    numbers2: LineNumberMap,
    lines1: list[int],
    lines2: list[int],
    labels: tuple[str, str] = DEFAULT_LABELS,
) -> Report:
    """Build the report for a comparison.

    Args:
        table1: Parsed table of the first file.
        table2: Parsed table of the second file.
        numbers1: Numbers extracted from the first file.
        numbers2: Numbers extracted from the second file.
        lines1: Line numbers requested in the first file.
        lines2: Line numbers requested in the second file.
        labels: Section titles for the two files.

    Returns:
        The report. ``comparison`` is None when the selections differ in length.
    """
    return Report(
        file1=build_file_report(labels[0], table1, numbers1, lines1),
        file2=build_file_report(labels[1], table2, numbers2, lines2),
        comparison=build_comparison(numbers1, numbers2, lines1, lines2),
    )


def format_line_result(line: LineResult) -> str:
    """Render one line as ``Line N: a, b (Sum: x.xx)``."""
    if not line.has_numbers:
        return f"Line {line.line_number}: {NO_NUMBERS_TEXT}"
    numbers = ", ".join(format_number(n) for n in line.numbers)
    return f"Line {line.line_number}: {numbers} (Sum: {format_sum(line.total)})"


def format_comparison_row(row: ComparisonRow) -> str:
    return (
        f"File 1 Line {row.line1}: {format_sum(row.sum1)} | "
        f"File 2 Line {row.line2}: {format_sum(row.sum2)} | "
        f"Difference: {format_sum(row.difference)}"
    )


def render_file_section(file_report: FileReport) -> list[str]:
    lines = [
        f"{file_report.label} Results",
        f"Total rows: {file_report.row_count}",
    ]
    lines.extend(f"  {format_line_result(line)}" for line in file_report.lines)
    return lines


def render_text(report: Report) -> str:
    """Render the report as plain text.

    The output depends only on the report contents, so rendering the same
    inputs twice gives identical text.
    """
    lines = render_file_section(report.file1)
    lines.append("")
    lines.extend(render_file_section(report.file2))

    if report.comparison is not None:
        lines.append("")
        lines.append("Comparison")
        lines.extend(f"  {format_comparison_row(row)}" for row in report.comparison)

    return "\n".join(lines) + "\n"


def report_to_records(report: Report) -> list[dict[str, Any]]:
    """Flatten a report into records for export.

    Every requested line becomes a ``line`` record and every comparison pair a
    ``comparison`` record. All records share the same keys so they fit in a
    single table.
    """
    records: list[dict[str, Any]] = []

    for file_index, file_report in enumerate((report.file1, report.file2), start=1):
        for line in file_report.lines:
            records.append({
                "kind": "line",
                "file": file_index,
                "source": file_report.source,
                "line1": line.line_number if file_index == 1 else None,
                "line2": line.line_number if file_index == 2 else None,
                "numbers": list(line.numbers),
                "sum1": round(line.total, 2) if file_index == 1 else None,
                "sum2": round(line.total, 2) if file_index == 2 else None,
                "difference": None,
            })

    for row in report.comparison or []:
        records.append({
            "kind": "comparison",
            "file": None,
            "source": None,
            "line1": row.line1,
            "line2": row.line2,
            "numbers": [],
            "sum1": round(row.sum1, 2),
            "sum2": round(row.sum2, 2),
            "difference": round(row.difference, 2),
        })

    return records
