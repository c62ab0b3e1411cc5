"""
Utility modules for rofi-bookmarks.

This package contains the exception hierarchy and logging setup.
"""

from .error_handler import (
    ConfigurationError,
    EmitError,
    MissingDelimiterError,
    MissingUrlError,
    OpenError,
    ParseError,
    ReadError,
    ResolutionError,
    RofiBookmarksError,
    SelectorNotFoundError,
    StructuralParseError,
)
from .logging_setup import setup_logging

__all__ = [
    "ConfigurationError",
    "EmitError",
    "MissingDelimiterError",
    "MissingUrlError",
    "OpenError",
    "ParseError",
    "ReadError",
    "ResolutionError",
    "RofiBookmarksError",
    "SelectorNotFoundError",
    "StructuralParseError",
    "setup_logging",
]
