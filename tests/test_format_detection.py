"""Tests for delimiter detection and directory discovery in line_compare/data_formats."""

from __future__ import annotations

import pytest

from line_compare.data_formats import (
    AUTO_DELIMITER,
    DEFAULT_DELIMITER,
    detect_delimiter,
    discover_csv_files,
    format_file_size,
    resolve_delimiter_name,
    sniff_delimiter,
)


class TestResolveDelimiterName:
    """Tests for resolve_delimiter_name()."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("comma", ","),
            ("semicolon", ";"),
            ("tab", "\t"),
            ("pipe", "|"),
            ("space", " "),
            ("auto", AUTO_DELIMITER),
            (":", ":"),
        ],
    )
    def test_known_names(self, name, expected):
        assert resolve_delimiter_name(name) == expected

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unsupported delimiter"):
            resolve_delimiter_name("colon-ish")


class TestDetectDelimiter:
    """Tests for sniff_delimiter() and detect_delimiter()."""

    def test_most_frequent_wins(self):
        assert sniff_delimiter("a;b;c,d") == ";"

    def test_fallback_to_comma(self):
        assert sniff_delimiter("single") == DEFAULT_DELIMITER

    def test_tsv_extension(self):
        assert detect_delimiter("data.TSV", "a,b,c") == "\t"

    def test_skips_leading_blank_lines(self):
        assert detect_delimiter("data.csv", "\n\na|b|c\n") == "|"

    def test_empty_text(self):
        assert detect_delimiter("data.csv", "") == DEFAULT_DELIMITER


class TestDiscoverCsvFiles:
    """Tests for discover_csv_files()."""

    def test_lists_supported_files_sorted(self, tmp_path):
        (tmp_path / "b.csv").write_text("1\n")
        (tmp_path / "A.TSV").write_text("1\n")
        (tmp_path / "notes.md").write_text("x\n")
        (tmp_path / "sub").mkdir()

        files = discover_csv_files(str(tmp_path))
        assert [f["name"] for f in files] == ["A.TSV", "b.csv"]
        assert files[0]["format"] == "tsv"
        assert files[1]["size"] == 2

    def test_missing_directory(self, tmp_path):
        assert discover_csv_files(str(tmp_path / "nope")) == []


@pytest.mark.parametrize(
    "size,expected",
    [(0, "0.0 B"), (1536, "1.5 KB"), (5 * 1024 * 1024, "5.0 MB")],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected
