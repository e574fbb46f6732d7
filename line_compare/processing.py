"""
One processing cycle: validate, read both files, extract, report.

The request object carries everything the cycle needs, so nothing is
shared between the form that collects input and the code that processes it.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from line_compare.data_formats import CSVReader, ParsedTable, ReadOptions
from line_compare.errors import BusyError
from line_compare.extractor import STRICT, LineNumberMap, extract_numbers_from_lines
from line_compare.line_numbers import require_line_numbers
from line_compare.report import DEFAULT_LABELS, Report, build_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompareRequest:
    """Everything needed to compare two files.

    Attributes:
        file1: Path to the first CSV file.
        file2: Path to the second CSV file.
        lines1_text: Line numbers for the first file, as typed.
        lines2_text: Line numbers for the second file, as typed.
        options: Parsing options applied to both files.
        mode: Tokenizer mode ('strict' or 'inclusive').
    """

    file1: str
    file2: str
    lines1_text: str
    lines2_text: str
    options: ReadOptions = field(default_factory=ReadOptions)
    mode: str = STRICT


@dataclass
class ProcessResult:
    """Tables, extracted numbers and report of a finished cycle."""

    table1: ParsedTable
    table2: ParsedTable
    numbers1: LineNumberMap
    numbers2: LineNumberMap
    lines1: list[int]
    lines2: list[int]
    report: Report


async def process_request(
    request: CompareRequest,
    reader: CSVReader | None = None,
    labels: tuple[str, str] = DEFAULT_LABELS,
) -> ProcessResult:
    """Run a full comparison.

    Line numbers are validated before any file is opened. Both files are
    then read concurrently and both reads must succeed.

    Raises:
        ValidationError: If either line-number field has no valid entries.
        CSVReadError: If either file cannot be read or parsed.
    """
    lines1, lines2 = require_line_numbers(request.lines1_text, request.lines2_text)
    reader = reader or CSVReader()

    logger.info("Comparing %s lines %s with %s lines %s",
                request.file1, lines1, request.file2, lines2)

    table1, table2 = await asyncio.gather(
        reader.read(request.file1, request.options),
        reader.read(request.file2, request.options),
    )

    numbers1 = extract_numbers_from_lines(table1, lines1, request.mode)
    numbers2 = extract_numbers_from_lines(table2, lines2, request.mode)

    report = build_report(table1, table2, numbers1, numbers2, lines1, lines2, labels)
    return ProcessResult(
        table1=table1,
        table2=table2,
        numbers1=numbers1,
        numbers2=numbers2,
        lines1=lines1,
        lines2=lines2,
        report=report,
    )


class ProcessingSlot:
    """Single-slot guard that allows one processing cycle at a time.

    A request submitted while another is running is rejected with BusyError
    rather than queued.

    Usage:
        slot = ProcessingSlot()
        result = await slot.run(request)
    """

    def __init__(self, reader: CSVReader | None = None) -> None:
        self._reader = reader or CSVReader()
        self._busy = False

    @property
    def busy(self) -> bool:
        """True while a request is in flight."""
        return self._busy

    async def run(self, request: CompareRequest) -> ProcessResult:
        """Process a request, or reject it if the slot is taken.

        Raises:
            BusyError: If another request is still running.
        """
        if self._busy:
            raise BusyError("A comparison is already running")

        self._busy = True
        try:
            return await process_request(request, self._reader)
        finally:
            self._busy = False
