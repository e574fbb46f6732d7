"""
Main Textual application for CSV Line Compare.

Opens the compare form, optionally prefilled from the command line.
"""

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from line_compare.data_formats import AUTO_DELIMITER, DELIMITERS
from line_compare.export import DEFAULT_OUTPUT_DIR, EXPORT_FORMATS
from line_compare.extractor import STRICT, TOKENIZER_MODES
from line_compare.tui.views.compare_screen import CompareScreen


class LineCompareApp(App):
    """A Textual app for summing and comparing numbers on CSV lines."""

    TITLE = "CSV Line Compare"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    Static {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        file1: str = "",
        file2: str = "",
        lines1: str = "",
        lines2: str = "",
        delimiter: str = "comma",
        has_headers: bool = False,
        mode: str = STRICT,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        export_format: str = "json",
    ):
        """Initialize the app.

        Args:
            file1: Path to the first CSV file (may be empty).
            file2: Path to the second CSV file (may be empty).
            lines1: Line numbers for the first file.
            lines2: Line numbers for the second file.
            delimiter: Delimiter menu value ('comma', 'tab', ..., 'auto').
            has_headers: Whether the first row of each file is a header.
            mode: Tokenizer mode ('strict' or 'inclusive').
            output_dir: Output directory for report export.
            export_format: Export format ('json', 'jsonl' or 'parquet').
        """
        super().__init__()
        self._file1 = file1
        self._file2 = file2
        self._lines1 = lines1
        self._lines2 = lines2
        self._delimiter = delimiter
        self._has_headers = has_headers
        self._mode = mode
        self.output_dir = output_dir
        self.export_format = export_format

    def on_mount(self) -> None:
        """Push the compare form."""
        self.push_screen(
            CompareScreen(
                file1=self._file1,
                file2=self._file2,
                lines1=self._lines1,
                lines2=self._lines2,
                delimiter=self._delimiter,
                has_headers=self._has_headers,
                mode=self._mode,
            )
        )


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Sum the numbers on chosen lines of two CSV files and compare "
        "them in a terminal UI."
    )
    parser.add_argument("file1", nargs="?", default="", help="First CSV file")
    parser.add_argument("file2", nargs="?", default="", help="Second CSV file")
    parser.add_argument("--lines1", default="", help="Line numbers for file 1, e.g. '1,3'")
    parser.add_argument("--lines2", default="", help="Line numbers for file 2, e.g. '2,4'")
    parser.add_argument(
        "-d",
        "--delimiter",
        choices=[*DELIMITERS, AUTO_DELIMITER],
        default="comma",
        help="Field delimiter (default: comma)",
    )
    parser.add_argument("--headers", action="store_true", help="First row is a header")
    parser.add_argument("--mode", choices=TOKENIZER_MODES, default=STRICT,
                        help="Numeric token rule (default: strict)")
    parser.add_argument(
        "-O",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for export operations (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("--export-format", choices=EXPORT_FORMATS, default="json",
                        help="Format used by the export action (default: json)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Send debug logs to the textual devtools console")
    args = parser.parse_args()

    for path in (args.file1, args.file2):
        if path and not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        handlers=[TextualHandler()],
    )

    app = LineCompareApp(
        file1=args.file1,
        file2=args.file2,
        lines1=args.lines1,
        lines2=args.lines2,
        delimiter=args.delimiter,
        has_headers=args.headers,
        mode=args.mode,
        output_dir=args.output_dir,
        export_format=args.export_format,
    )
    app.run()


if __name__ == "__main__":
    main()
