"""
Core bookmark modules.

This package contains the bookmark tree, the TOML and flat file parsers,
selector resolution and the rofi menu writer.
"""

from .data_models import BookmarkGroup, BookmarkItem, Bookmarks, SourceFormat
from .flat_parser import FlatBookmarkParser
from .import_module import BookmarkImporter
from .menu_emitter import MenuEmitter
from .resolver import NotFound, OpenUrl, SelectionResolver, ShowGroup
from .toml_parser import TomlBookmarkParser

__all__ = [
    'BookmarkGroup',
    'BookmarkItem',
    'Bookmarks',
    'SourceFormat',
    'FlatBookmarkParser',
    'BookmarkImporter',
    'MenuEmitter',
    'NotFound',
    'OpenUrl',
    'SelectionResolver',
    'ShowGroup',
    'TomlBookmarkParser',
]
