"""
Exception types raised while comparing CSV lines.

Every error is raised where it is detected and caught once at the top level
(the CLI entry point or the TUI's process worker), which turns it into a
single user-visible message.
"""

from __future__ import annotations


class LineCompareError(Exception):
    """Base class for all errors raised by line_compare."""


class ValidationError(LineCompareError):
    """Raised when user input is rejected before any file is read."""


class CSVReadError(LineCompareError):
    """Raised when a CSV file cannot be read, decoded or parsed.

    Attributes:
        filename: Path of the file that failed.
    """

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not read {filename}: {reason}")


class BusyError(LineCompareError):
    """Raised when a comparison is requested while another one is running."""
