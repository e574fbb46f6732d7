"""
CSV reader producing ParsedTable objects.

Reading is asynchronous so that the two files of a comparison can be
fetched concurrently; parsing is a plain synchronous step on the decoded
text and can be used on its own.
"""

from __future__ import annotations

import asyncio
import csv
import io
import logging

import aiofiles

from line_compare.data_formats.format_detector import AUTO_DELIMITER, detect_delimiter
from line_compare.data_formats.table import ParsedTable, ReadOptions
from line_compare.errors import CSVReadError

logger = logging.getLogger(__name__)


class CSVReader:
    """Reads delimited text files into row-oriented tables.

    One reader can be shared by concurrent reads; it keeps no per-file state.
    """

    async def read(self, filename: str, options: ReadOptions | None = None) -> ParsedTable:
        """Read and parse a CSV file.

        Args:
            filename: Path to the file.
            options: Parsing options. Defaults to ReadOptions().

        Returns:
            The parsed table.

        Raises:
            CSVReadError: If the file cannot be opened, decoded or parsed.

        Examples:
            >>> table = await CSVReader().read("a.csv", ReadOptions(has_headers=True))
            >>> table.row_count
            12
        """
        options = options or ReadOptions()
        logger.debug("Reading %s", filename)

        try:
            async with aiofiles.open(filename, "rb") as f:
                data = await f.read()
        except OSError as e:
            raise CSVReadError(filename, e.strerror or str(e)) from e

        try:
            text = data.decode(options.encoding)
        except UnicodeDecodeError as e:
            raise CSVReadError(
                filename, f"file is not valid {options.encoding} text"
            ) from e
        except LookupError as e:
            raise CSVReadError(filename, f"unknown encoding '{options.encoding}'") from e

        return self.parse(text, options, source=filename)

    def parse(
        self,
        text: str,
        options: ReadOptions | None = None,
        source: str = "",
    ) -> ParsedTable:
        """Parse already-decoded CSV text.

        Blank lines are kept as empty rows so that line numbers line up with
        what the user sees in an editor.

        Args:
            text: The CSV content.
            options: Parsing options. Defaults to ReadOptions().
            source: Name used in error messages and on the returned table.

        Returns:
            The parsed table.

        Raises:
            CSVReadError: If the csv module rejects the content.
        """
        options = options or ReadOptions()
        delimiter = options.delimiter
        if delimiter == AUTO_DELIMITER:
            delimiter = detect_delimiter(source, text)
            logger.debug("Detected delimiter %r for %s", delimiter, source or "<text>")

        try:
            reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
            rows = [row for row in reader]
        except csv.Error as e:
            raise CSVReadError(source or "<text>", f"malformed CSV: {e}") from e

        headers = None
        if options.has_headers and rows:
            headers = rows[0]
            rows = rows[1:]

        logger.debug("Parsed %d rows from %s", len(rows), source or "<text>")
        return ParsedTable(rows=rows, headers=headers, source=source, delimiter=delimiter)


def read_table_sync(filename: str, options: ReadOptions | None = None) -> ParsedTable:
    """Read a CSV file without an event loop (for scripts and tests)."""
    return asyncio.run(CSVReader().read(filename, options))
