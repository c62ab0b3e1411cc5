"""
Bookmarks file import interface.

This module reads a bookmarks file from disk, picks the parser for its
format and returns the parsed tree.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..utils.error_handler import ParseError, ReadError
from .data_models import Bookmarks, SourceFormat
from .flat_parser import FlatBookmarkParser
from .toml_parser import TomlBookmarkParser

AUTO_FORMAT = "auto"
TOML_SUFFIXES = (".toml",)


class BookmarkImporter:
    """
    High-level interface for loading a bookmarks file.

    The format is either fixed by configuration or detected from the file
    suffix: ``.toml`` files are hierarchical, anything else is flat.
    """

    def __init__(self, source_format: str = AUTO_FORMAT):
        """
        Initialize the bookmark importer.

        Args:
            source_format: "auto", "toml" or "flat"
        """
        self.source_format = source_format
        self.logger = logging.getLogger(__name__)
        self.parsers = {
            SourceFormat.HIERARCHICAL: TomlBookmarkParser(),
            SourceFormat.FLAT: FlatBookmarkParser(),
        }

    def detect_format(self, file_path: Union[str, Path]) -> SourceFormat:
        """
        Decide which encoding a file uses.

        Args:
            file_path: Path of the bookmarks file

        Returns:
            The configured format, or the one implied by the suffix
        """
        if self.source_format != AUTO_FORMAT:
            return SourceFormat(self.source_format)
        if Path(file_path).suffix.lower() in TOML_SUFFIXES:
            return SourceFormat.HIERARCHICAL
        return SourceFormat.FLAT

    def import_file(self, file_path: Union[str, Path]) -> Bookmarks:
        """
        Read and parse a bookmarks file.

        Args:
            file_path: Path of the bookmarks file

        Returns:
            Parsed Bookmarks

        Raises:
            ReadError: If the file is missing, unreadable or not UTF-8
            ParseError: If the contents are malformed
        """
        file_path = Path(file_path)
        source_format = self.detect_format(file_path)
        self.logger.info(f"Loading {source_format.value} bookmarks from {file_path}")

        raw_text = self.read_text(file_path)
        try:
            return self.parse_text(raw_text, source_format)
        except ParseError as e:
            self.logger.error(f"Error parsing bookmarks file {file_path}: {e}")
            raise

    def parse_text(self, raw_text: str, source_format: SourceFormat) -> Bookmarks:
        """Parse already-loaded text with the parser for ``source_format``."""
        return self.parsers[source_format].parse(raw_text)

    def read_text(self, file_path: Path) -> str:
        """
        Read a bookmarks file as UTF-8 text.

        Raises:
            ReadError: If the file cannot be read
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            raise ReadError(file_path, "file not found") from e
        except UnicodeDecodeError as e:
            raise ReadError(file_path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise ReadError(file_path, e.strerror or str(e)) from e

    def get_file_info(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Get information about a bookmarks file.

        Args:
            file_path: Path to the file

        Returns:
            Dictionary with file information. Parsing errors propagate.
        """
        file_path = Path(file_path)
        info: Dict[str, Optional[Any]] = {
            "path": str(file_path),
            "exists": file_path.exists(),
            "size_bytes": 0,
            "format": self.detect_format(file_path).value,
            "items": 0,
            "groups": 0,
        }

        bookmarks = self.import_file(file_path)
        info["size_bytes"] = file_path.stat().st_size
        info["items"], info["groups"] = bookmarks.count()
        return info
