"""
Selector resolution.

rofi runs the script again with the title of whatever entry the user
picked. Nothing is remembered between runs, so the selector is looked up
against the whole tree every time.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from ..utils.error_handler import SelectorNotFoundError
from .data_models import BookmarkGroup, BookmarkItem, BookmarkNode


@dataclass(frozen=True)
class OpenUrl:
    """The selector named a bookmark; its URL should be opened."""

    url: str


@dataclass(frozen=True)
class ShowGroup:
    """The selector named a group; its direct children should be listed."""

    title: str
    children: Tuple[BookmarkNode, ...]


@dataclass(frozen=True)
class NotFound:
    """Nothing in the tree carries the selector as its title."""

    selector: str

    def raise_error(self):
        raise SelectorNotFoundError(self.selector)


Outcome = Union[OpenUrl, ShowGroup, NotFound]


class SelectionResolver:
    """
    Finds the first node whose title equals a selector.

    The search is a pre-order walk: a group that does not match is entered
    before its later siblings are looked at. A bookmark nested inside an
    earlier group therefore wins over a top-level entry further down with
    the same title. The walk keeps an explicit stack of sibling iterators
    instead of recursing, so nesting depth has no effect on the call stack.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def resolve(self, items: Sequence[BookmarkNode], selector: str) -> Outcome:
        """
        Resolve a selector against a bookmark tree.

        Args:
            items: Root sequence of the tree
            selector: Title chosen by the user

        Returns:
            OpenUrl, ShowGroup or NotFound
        """
        stack: List[Iterator[BookmarkNode]] = [iter(items)]

        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                continue

            if isinstance(node, BookmarkGroup):
                if node.title == selector:
                    self.logger.debug(f"Selector '{selector}' matched a group")
                    return ShowGroup(title=node.title, children=node.children)
                stack.append(iter(node.children))
            elif node.title == selector:
                self.logger.debug(f"Selector '{selector}' matched {node.url}")
                return OpenUrl(url=node.url)

        self.logger.debug(f"Selector '{selector}' matched nothing")
        return NotFound(selector=selector)

    def resolve_flat(self, items: Sequence[BookmarkItem], selector: str) -> Outcome:
        """Linear first-match lookup for a list without groups."""
        for item in items:
            if item.title == selector:
                return OpenUrl(url=item.url)
        return NotFound(selector=selector)
