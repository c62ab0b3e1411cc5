"""
Data models for rofi-bookmarks.

This module defines the in-memory bookmark tree shared by both file
formats. The tree is built once per invocation and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class SourceFormat(Enum):
    """Encodings a bookmarks file may use."""

    HIERARCHICAL = "toml"  # nested tables, groups allowed
    FLAT = "flat"  # one '# title :: url extra' record per line

    @property
    def open_failure_is_fatal(self) -> bool:
        """Whether a failed URL open should fail the whole invocation."""
        return self is SourceFormat.FLAT


@dataclass(frozen=True)
class BookmarkItem:
    """A leaf bookmark pointing at a URL."""

    title: str
    url: str
    keywords: Tuple[str, ...] = ()
    extra: Optional[str] = None

    def __post_init__(self):
        if not self.url:
            raise ValueError(f"Bookmark '{self.title}' has an empty url")
        if not self.title:
            raise ValueError(f"Bookmark for {self.url} has an empty title")


@dataclass(frozen=True)
class BookmarkGroup:
    """A named container of bookmarks and nested groups."""

    title: str
    children: Tuple[Union["BookmarkItem", "BookmarkGroup"], ...] = field(
        default_factory=tuple
    )


BookmarkNode = Union[BookmarkItem, BookmarkGroup]


@dataclass(frozen=True)
class Bookmarks:
    """
    Root of a parsed bookmarks file.

    The root behaves like an unnamed group: ``items`` keeps the order in
    which entries were declared in the file.
    """

    items: Tuple[BookmarkNode, ...] = ()
    source_format: SourceFormat = SourceFormat.HIERARCHICAL

    def count(self) -> Tuple[int, int]:
        """
        Count every item and group in the tree.

        Returns:
            Tuple of (item_count, group_count)
        """
        items = 0
        groups = 0
        stack = [iter(self.items)]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
            elif isinstance(node, BookmarkGroup):
                groups += 1
                stack.append(iter(node.children))
            else:
                items += 1
        return items, groups
