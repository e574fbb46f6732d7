"""
Directory discovery for CSV files.

Used by the TUI file picker to list candidate files next to the ones the
user already chose.
"""

from __future__ import annotations

from pathlib import Path

from line_compare.data_formats.format_detector import EXTENSION_MAP


def discover_csv_files(directory: str) -> list[dict]:
    """
    Discover all supported CSV-like files in a directory.

    Args:
        directory: Path to the directory to scan.

    Returns:
        List of dicts with:
        - path: absolute path to file
        - name: filename
        - format: format derived from the extension (csv, tsv, txt)
        - size: file size in bytes
    """
    dir_path = Path(directory)
    files = []

    # Check extensions case-insensitively (glob patterns are case-sensitive on Linux)
    try:
        for file_path in dir_path.iterdir():
            if not file_path.is_file():
                continue

            ext_lower = file_path.suffix.lower()
            if ext_lower not in EXTENSION_MAP:
                continue

            try:
                files.append({
                    "path": str(file_path.absolute()),
                    "name": file_path.name,
                    "format": EXTENSION_MAP[ext_lower],
                    "size": file_path.stat().st_size,
                })
            except OSError:
                # Skip files we can't access
                continue
    except OSError:
        return []

    return sorted(files, key=lambda f: f["name"].lower())


def format_file_size(size_bytes: float) -> str:
    """Format file size for display (e.g., '1.2 MB')."""
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"
