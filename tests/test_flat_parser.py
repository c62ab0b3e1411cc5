"""
Tests for the flat, line-oriented bookmarks parser.
"""

import pytest

from rofi_bookmarks.core.data_models import BookmarkItem, SourceFormat
from rofi_bookmarks.core.flat_parser import FlatBookmarkParser
from rofi_bookmarks.utils.error_handler import (
    MissingDelimiterError,
    MissingUrlError,
    StructuralParseError,
)


class TestFlatBookmarkParser:
    """Test cases for FlatBookmarkParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = FlatBookmarkParser()

    def test_parse_sample(self, sample_flat_text):
        """Should keep record lines in order and skip everything else."""
        bookmarks = self.parser.parse(sample_flat_text)
        assert bookmarks.source_format is SourceFormat.FLAT
        assert [item.title for item in bookmarks.items] == [
            "Example",
            "Python docs",
            "Rust",
        ]

    def test_record_fields(self):
        """Title, URL and extra text are split out of one line."""
        (item,) = self.parser.parse("# Example :: https://example.com extra info\n").items
        assert item == BookmarkItem(
            title="Example", url="https://example.com", extra="extra info"
        )

    def test_no_extra(self):
        """A record without trailing text has empty extra."""
        (item,) = self.parser.parse("# Rust :: https://www.rust-lang.org   \n").items
        assert item.url == "https://www.rust-lang.org"
        assert item.extra == ""

    def test_whitespace_runs(self):
        """URL ends at the first whitespace run; extra keeps inner spacing."""
        (item,) = self.parser.parse("#Docs::   https://d.example \t a  b  \n").items
        assert item.title == "Docs"
        assert item.url == "https://d.example"
        assert item.extra == "a  b"

    def test_splits_on_first_delimiter(self):
        """Later '::' belong to the URL."""
        (item,) = self.parser.parse("# IPv6 :: http://[::1]:8080/ local\n").items
        assert item.title == "IPv6"
        assert item.url == "http://[::1]:8080/"
        assert item.extra == "local"

    def test_indented_record(self):
        """Leading whitespace before '#' is allowed."""
        (item,) = self.parser.parse("    # Indented :: https://i.example\n").items
        assert item.title == "Indented"

    def test_non_record_lines_skipped(self):
        """Blank lines and lines without '#' are ignored."""
        bookmarks = self.parser.parse("\n\nfree text :: not a record\n   \n")
        assert bookmarks.items == ()

    def test_missing_delimiter(self):
        """A record without '::' reports its 1-based line number."""
        with pytest.raises(MissingDelimiterError) as exc_info:
            self.parser.parse("header\n# Fine :: https://f.example\n# NoDelimiterHere\n")
        assert exc_info.value.line_number == 3
        assert "Line 3" in str(exc_info.value)

    def test_bare_hash_is_a_record(self):
        """A lone '#' is a record line without a delimiter."""
        with pytest.raises(MissingDelimiterError) as exc_info:
            self.parser.parse("#\n")
        assert exc_info.value.line_number == 1

    def test_missing_url(self):
        """A record with nothing after '::' is rejected."""
        with pytest.raises(MissingUrlError) as exc_info:
            self.parser.parse("\n# Empty ::   \n")
        assert exc_info.value.line_number == 2

    def test_empty_title(self):
        """A record needs a title to be selectable."""
        with pytest.raises(StructuralParseError) as exc_info:
            self.parser.parse("# :: https://untitled.example\n")
        assert exc_info.value.key_path == "line 1"

    def test_duplicate_titles_kept(self):
        """Duplicate titles are kept; resolution picks the first."""
        bookmarks = self.parser.parse("# A :: https://one.example\n# A :: https://two.example\n")
        assert [item.url for item in bookmarks.items] == [
            "https://one.example",
            "https://two.example",
        ]
