"""
Export of comparison reports to JSON, JSONL or Parquet files.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from line_compare.report import Report, report_to_records

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "jsonl", "parquet")

DEFAULT_OUTPUT_DIR = "comparison_reports"


def export_report(
    report: Report,
    output_dir: str,
    source_filename: str,
    format: str = "json",
) -> str:
    """
    Export a report to an output directory.

    Creates the output directory if it doesn't exist and writes the flattened
    report records to a file named {source_stem}_report.{format}.

    Args:
        report: The report to export.
        output_dir: Directory path for output files.
        source_filename: Name the output file is derived from (usually file 1).
        format: Output format ('json', 'jsonl' or 'parquet').

    Returns:
        The path to the created output file.

    Raises:
        ValueError: If format is not supported.
        OSError: If the output directory cannot be created or file cannot be written.

    Examples:
        >>> path = export_report(report, "comparison_reports", "sales.csv")
        >>> print(path)  # "comparison_reports/sales_report.json"
    """
    if format not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format: {format}. Use one of: {', '.join(EXPORT_FORMATS)}."
        )

    os.makedirs(output_dir, exist_ok=True)

    output_path = Path(output_dir) / f"{Path(source_filename).stem}_report.{format}"
    records = report_to_records(report)

    if format == "parquet":
        pq.write_table(pa.Table.from_pylist(records), output_path)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            if format == "json":
                json.dump(records, f, indent=2, ensure_ascii=False)
            else:  # jsonl
                for record in records:
                    f.write(json.dumps(record, ensure_ascii=False) + "\n")

    logger.info("Exported %d records to %s", len(records), output_path)
    return str(output_path)
