"""
Tests for the bookmarks file import interface.
"""

import pytest

from rofi_bookmarks.core.data_models import SourceFormat
from rofi_bookmarks.core.import_module import BookmarkImporter
from rofi_bookmarks.utils.error_handler import (
    MissingDelimiterError,
    ReadError,
    StructuralParseError,
)


class TestDetectFormat:
    """Test format selection."""

    def test_auto_toml_suffix(self):
        """.toml files are hierarchical."""
        importer = BookmarkImporter()
        assert importer.detect_format("bookmarks.toml") is SourceFormat.HIERARCHICAL
        assert importer.detect_format("BOOKMARKS.TOML") is SourceFormat.HIERARCHICAL

    def test_auto_other_suffix(self):
        """Everything else is flat."""
        importer = BookmarkImporter()
        assert importer.detect_format("bookmarks.txt") is SourceFormat.FLAT
        assert importer.detect_format("bookmarks") is SourceFormat.FLAT

    def test_forced_format(self):
        """A configured format overrides the suffix."""
        assert BookmarkImporter("flat").detect_format("x.toml") is SourceFormat.FLAT
        assert BookmarkImporter("toml").detect_format("x.txt") is SourceFormat.HIERARCHICAL


class TestImportFile:
    """Test loading files from disk."""

    def test_import_toml(self, toml_bookmarks_file, sample_tree):
        """Should parse a TOML file into the sample tree."""
        assert BookmarkImporter().import_file(toml_bookmarks_file) == sample_tree

    def test_import_flat(self, flat_bookmarks_file):
        """Should parse a flat file."""
        bookmarks = BookmarkImporter().import_file(flat_bookmarks_file)
        assert bookmarks.source_format is SourceFormat.FLAT
        assert len(bookmarks.items) == 3

    def test_forced_toml_on_flat_file(self, flat_bookmarks_file):
        """Forcing the wrong format surfaces a parse error."""
        with pytest.raises(StructuralParseError):
            BookmarkImporter("toml").import_file(flat_bookmarks_file)

    def test_parse_error_propagates(self, tmp_path):
        """Parse errors are raised unchanged."""
        path = tmp_path / "broken.txt"
        path.write_text("# NoDelimiterHere\n", encoding="utf-8")
        with pytest.raises(MissingDelimiterError):
            BookmarkImporter().import_file(path)

    def test_missing_file(self, tmp_path):
        """A missing file is a ReadError."""
        with pytest.raises(ReadError, match="file not found"):
            BookmarkImporter().import_file(tmp_path / "absent.toml")

    def test_directory(self, tmp_path):
        """A directory cannot be read as a bookmarks file."""
        with pytest.raises(ReadError):
            BookmarkImporter().import_file(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        """Undecodable bytes are a ReadError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"# Title :: https://x.example \xff\xfe\n")
        with pytest.raises(ReadError, match="UTF-8"):
            BookmarkImporter().import_file(path)


class TestGetFileInfo:
    """Test file summaries."""

    def test_toml_info(self, toml_bookmarks_file):
        """Should report format and counts."""
        info = BookmarkImporter().get_file_info(toml_bookmarks_file)
        assert info["exists"] is True
        assert info["format"] == "toml"
        assert info["items"] == 5
        assert info["groups"] == 2
        assert info["size_bytes"] == toml_bookmarks_file.stat().st_size

    def test_flat_info(self, flat_bookmarks_file):
        """Flat files never have groups."""
        info = BookmarkImporter().get_file_info(flat_bookmarks_file)
        assert info["format"] == "flat"
        assert (info["items"], info["groups"]) == (3, 0)

    def test_missing_file(self, tmp_path):
        """Read errors propagate."""
        with pytest.raises(ReadError):
            BookmarkImporter().get_file_info(tmp_path / "absent.txt")
