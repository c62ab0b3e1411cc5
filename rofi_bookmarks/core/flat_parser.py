"""
Flat, line-oriented bookmarks parser.

Every record is a comment line of the form::

    # Example :: https://example.com extra info

Lines that do not start with '#' are ignored, so the file may hold free-form
notes between records. There is no grouping in this format.
"""

import logging
import re

from ..utils.error_handler import (
    MissingDelimiterError,
    MissingUrlError,
    StructuralParseError,
)
from .data_models import BookmarkItem, Bookmarks, SourceFormat

RECORD_PREFIX = "#"
DELIMITER = "::"

_WHITESPACE_RUN = re.compile(r"\s+")


class FlatBookmarkParser:
    """Parser for flat '# title :: url extra' bookmark files."""

    def __init__(self):
        """Initialize the flat bookmark parser."""
        self.logger = logging.getLogger(__name__)

    def parse(self, raw_text: str) -> Bookmarks:
        """
        Parse flat bookmark text.

        Args:
            raw_text: Contents of the bookmarks file

        Returns:
            Bookmarks holding only BookmarkItem entries, in file order

        Raises:
            MissingDelimiterError: A record line has no '::'
            MissingUrlError: A record line has an empty URL
            StructuralParseError: A record line has an empty title
        """
        items = []
        skipped = 0

        for line_number, line in enumerate(raw_text.split("\n"), start=1):
            record = line.lstrip()
            if not record.startswith(RECORD_PREFIX):
                skipped += 1
                continue
            items.append(self._parse_record(record[len(RECORD_PREFIX):], line_number))

        self.logger.debug(
            f"Parsed {len(items)} flat bookmarks, skipped {skipped} other lines"
        )
        return Bookmarks(items=tuple(items), source_format=SourceFormat.FLAT)

    def _parse_record(self, record: str, line_number: int) -> BookmarkItem:
        """
        Split one record body into title, url and extra text.

        Args:
            record: Line text after the leading '#'
            line_number: 1-based physical line number, for error reporting

        Returns:
            BookmarkItem for the record
        """
        title, delimiter, rest = record.partition(DELIMITER)
        if not delimiter:
            raise MissingDelimiterError(line_number)

        title = title.strip()
        parts = _WHITESPACE_RUN.split(rest.lstrip(), maxsplit=1)
        url = parts[0]
        extra = parts[1].strip() if len(parts) > 1 else ""

        if not url:
            raise MissingUrlError(line_number)
        if not title:
            raise StructuralParseError(f"line {line_number}", "title must not be empty")

        return BookmarkItem(title=title, url=url, extra=extra)
