#!/usr/bin/env python3
"""
CSV Line Compare

A CLI tool for summing the numbers found on chosen lines of two CSV files
and comparing the sums side by side.

Usage:
    line-compare compare <file1> <file2> --lines1 1,2 --lines2 3,4
    line-compare extract <file> --lines 5,6

Options shared by both commands:
    -d, --delimiter   comma, semicolon, tab, pipe, space, auto, or one character
    --headers         treat the first row as a header (not a numbered line)
    --mode            strict (whole tokens only) or inclusive (embedded numbers)
"""

import argparse
import asyncio
import logging
import os
import sys

from line_compare.data_formats import CSVReader, ReadOptions, resolve_delimiter_name
from line_compare.errors import LineCompareError, ValidationError
from line_compare.export import DEFAULT_OUTPUT_DIR, EXPORT_FORMATS, export_report
from line_compare.extractor import STRICT, TOKENIZER_MODES, extract_numbers_from_lines
from line_compare.line_numbers import parse_line_numbers
from line_compare.processing import CompareRequest, process_request
from line_compare.report import build_file_report, render_file_section, render_text

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; -v enables debug output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def check_readable(path: str) -> None:
    """Exit with an error message if path is missing or unreadable."""
    if not os.path.exists(path):
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    if not os.access(path, os.R_OK):
        print(f"Error: Permission denied: {path}", file=sys.stderr)
        sys.exit(1)


def build_read_options(args) -> ReadOptions:
    return ReadOptions(
        delimiter=resolve_delimiter_name(args.delimiter),
        has_headers=args.headers,
        encoding=args.encoding,
    )


# ============== Commands ==============

def cmd_compare(args):
    """Compare the chosen lines of two files."""
    check_readable(args.file1)
    check_readable(args.file2)

    request = CompareRequest(
        file1=args.file1,
        file2=args.file2,
        lines1_text=args.lines1,
        lines2_text=args.lines2,
        options=build_read_options(args),
        mode=args.mode,
    )
    result = asyncio.run(process_request(request))
    print(render_text(result.report), end="")

    if args.export:
        path = export_report(result.report, args.output_dir, args.file1, format=args.export)
        print(f"\nExported to {path}")


def cmd_extract(args):
    """Show the numbers found on the chosen lines of one file."""
    check_readable(args.file)

    line_numbers = parse_line_numbers(args.lines)
    if not line_numbers:
        raise ValidationError("Please enter valid line numbers")

    table = asyncio.run(CSVReader().read(args.file, build_read_options(args)))
    numbers = extract_numbers_from_lines(table, line_numbers, args.mode)
    file_report = build_file_report(os.path.basename(args.file), table, numbers, line_numbers)
    print("\n".join(render_file_section(file_report)))


def add_read_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-d', '--delimiter',
        default='comma',
        help='Field delimiter: comma, semicolon, tab, pipe, space, auto, '
             'or a single character (default: comma)'
    )
    parser.add_argument('--headers', action='store_true',
                        help='First row is a header and is not numbered')
    parser.add_argument('--encoding', default='utf-8-sig',
                        help='File encoding (default: utf-8-sig)')
    parser.add_argument(
        '--mode',
        choices=TOKENIZER_MODES,
        default=STRICT,
        help='strict: only whole numeric tokens; inclusive: numbers embedded '
             'in text too (default: strict)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logs')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CSV Line Compare - sum numbers on chosen lines of two CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Compare command
    compare_parser = subparsers.add_parser('compare', help='Compare lines of two files')
    compare_parser.add_argument('file1', help='First CSV file')
    compare_parser.add_argument('file2', help='Second CSV file')
    compare_parser.add_argument('--lines1', required=True,
                                help='Comma-separated line numbers for file 1 (1-based)')
    compare_parser.add_argument('--lines2', required=True,
                                help='Comma-separated line numbers for file 2 (1-based)')
    compare_parser.add_argument('--export', choices=EXPORT_FORMATS,
                                help='Also write the report in this format')
    compare_parser.add_argument(
        '-O', '--output-dir',
        default=DEFAULT_OUTPUT_DIR,
        help=f'Output directory for --export (default: {DEFAULT_OUTPUT_DIR})'
    )
    add_read_arguments(compare_parser)
    compare_parser.set_defaults(func=cmd_compare)

    # Extract command
    extract_parser = subparsers.add_parser('extract', help='Show numbers on lines of one file')
    extract_parser.add_argument('file', help='CSV file')
    extract_parser.add_argument('--lines', required=True,
                                help='Comma-separated line numbers (1-based)')
    add_read_arguments(extract_parser)
    extract_parser.set_defaults(func=cmd_extract)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)

    try:
        args.func(args)
    except (LineCompareError, ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
