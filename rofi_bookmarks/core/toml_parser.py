"""
Hierarchical (TOML) bookmarks parser.

A bookmarks document is a table of named entries. Each entry is either a
bookmark or a group:

    [search]
    url = "https://duckduckgo.com"
    keywords = ["web", "search"]

    [dev]
    title = "Development"

    [dev.python]
    title = "Python docs"
    url = "https://docs.python.org/3/"

An entry is decoded by trying the bookmark shape first and falling back to
the group shape. Key order in the document becomes sibling order.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

import toml
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ..utils.error_handler import StructuralParseError
from .data_models import (
    BookmarkGroup,
    BookmarkItem,
    BookmarkNode,
    Bookmarks,
    SourceFormat,
)


class LeafRecord(BaseModel):
    """Shape of a bookmark entry. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[StrictStr] = None
    url: StrictStr = Field(min_length=1)
    keywords: List[StrictStr] = Field(default_factory=list)


class GroupHeader(BaseModel):
    """The only non-entry key a group table may carry."""

    title: Optional[StrictStr] = None


class _GroupFrame:
    """A group whose children are still being decoded."""

    __slots__ = ("path", "title", "entries", "children")

    def __init__(self, path: str, title: str, entries: Iterator[Tuple[str, Any]]):
        self.path = path
        self.title = title
        self.entries = entries
        self.children: List[BookmarkNode] = []


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _first_error(path: str, error: ValidationError) -> StructuralParseError:
    detail = error.errors()[0]
    loc = ".".join(str(part) for part in detail.get("loc", ()))
    return StructuralParseError(_join(path, loc) if loc else path, detail["msg"])


class TomlBookmarkParser:
    """
    Parser for hierarchical bookmark files.

    Decoding walks the document with an explicit stack of group frames so
    deeply nested tables never grow the interpreter call stack.
    """

    def __init__(self):
        """Initialize the TOML bookmark parser."""
        self.logger = logging.getLogger(__name__)

    def parse(self, raw_text: str) -> Bookmarks:
        """
        Parse TOML text into a bookmark tree.

        Args:
            raw_text: Contents of the bookmarks file

        Returns:
            Bookmarks with ``source_format`` set to HIERARCHICAL

        Raises:
            StructuralParseError: If the text is not TOML or an entry matches
                neither the bookmark nor the group shape
        """
        try:
            document = toml.loads(raw_text)
        except toml.TomlDecodeError as e:
            raise StructuralParseError("", f"invalid TOML: {e}") from e

        root = _GroupFrame("", "", iter(document.items()))
        stack = [root]

        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)

            if entry is None:
                stack.pop()
                if stack:
                    stack[-1].children.append(
                        BookmarkGroup(title=frame.title, children=tuple(frame.children))
                    )
                continue

            key, value = entry
            path = _join(frame.path, key)
            node = self._decode_entry(path, key, value)

            if isinstance(node, _GroupFrame):
                stack.append(node)
            else:
                frame.children.append(node)

        bookmarks = Bookmarks(
            items=tuple(root.children), source_format=SourceFormat.HIERARCHICAL
        )
        item_count, group_count = bookmarks.count()
        self.logger.debug(
            f"Parsed {item_count} bookmarks in {group_count} groups from TOML"
        )
        return bookmarks

    def _decode_entry(self, path: str, key: str, value: Any):
        """
        Decode one entry as a bookmark, or open a frame for a group.

        Args:
            path: Dotted key path of the entry
            key: The entry's own key, used as its default title
            value: Raw decoded TOML value

        Returns:
            BookmarkItem for a leaf, or a _GroupFrame whose children are
            still to be decoded
        """
        if not isinstance(value, dict):
            raise StructuralParseError(
                path,
                f"expected a bookmark or group table, got {type(value).__name__}",
            )

        try:
            leaf = LeafRecord.model_validate(value)
        except ValidationError as leaf_error:
            # A non-table 'url' can only ever be a broken bookmark.
            if "url" in value and not isinstance(value["url"], dict):
                raise _first_error(path, leaf_error) from leaf_error
        else:
            return BookmarkItem(
                title=self._effective_title(path, leaf.title, key),
                url=leaf.url,
                keywords=tuple(leaf.keywords),
            )

        return self._open_group(path, key, value)

    def _open_group(self, path: str, key: str, value: Dict[str, Any]) -> _GroupFrame:
        header_fields = {"title": value["title"]} if "title" in value else {}
        try:
            header = GroupHeader.model_validate(header_fields)
        except ValidationError as e:
            raise _first_error(path, e) from e

        entries = [(k, v) for k, v in value.items() if k != "title"]
        for child_key, child in entries:
            if not isinstance(child, dict):
                raise StructuralParseError(
                    path,
                    f"missing 'url' field; '{child_key}' is not a bookmark "
                    f"or group table",
                )

        return _GroupFrame(
            path, self._effective_title(path, header.title, key), iter(entries)
        )

    @staticmethod
    def _effective_title(path: str, title: Optional[str], key: str) -> str:
        effective = key if title is None else title
        if not effective:
            raise StructuralParseError(path, "title must not be empty")
        return effective
