"""
Exception hierarchy for rofi-bookmarks.

Every error raised while serving a menu request derives from
RofiBookmarksError. All of them end the current invocation; the CLI turns
each one into a single diagnostic line and a non-zero exit code.
"""

from typing import Optional


# ============================================================================
# Unified Exception Hierarchy
# ============================================================================
# Import these exceptions from rofi_bookmarks.utils.error_handler
# ============================================================================


class RofiBookmarksError(Exception):
    """Base exception for all rofi-bookmarks errors."""

    pass


# ============================================================================
# Configuration / Input Errors
# ============================================================================


class ConfigurationError(RofiBookmarksError):
    """Missing or invalid environment configuration."""

    pass


class ReadError(RofiBookmarksError):
    """The bookmarks file could not be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read bookmarks file at {path}: {reason}")


# ============================================================================
# Parse Errors
# ============================================================================


class ParseError(RofiBookmarksError):
    """Base class for bookmarks file parse errors."""

    pass


class StructuralParseError(ParseError):
    """A hierarchical document does not match the bookmark schema."""

    def __init__(self, key_path: str, reason: str):
        self.key_path = key_path
        self.reason = reason
        location = key_path or "<root>"
        super().__init__(f"Invalid bookmark at '{location}': {reason}")


class MissingDelimiterError(ParseError):
    """A flat record line has no '::' between title and URL."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: missing '::' delimiter")


class MissingUrlError(ParseError):
    """A flat record line has nothing after its '::' delimiter."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: missing URL after '::'")


# ============================================================================
# Resolution Errors
# ============================================================================


class ResolutionError(RofiBookmarksError):
    """Base class for selector resolution errors."""

    pass


class SelectorNotFoundError(ResolutionError):
    """No item or group carries the requested title."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Selector '{selector}' not found!")


# ============================================================================
# Output / Side Effect Errors
# ============================================================================


class EmitError(RofiBookmarksError):
    """Writing menu lines to the output stream failed."""

    pass


class OpenError(RofiBookmarksError):
    """The URL could not be handed to the default handler."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason or "the system did not acknowledge the request"
        super().__init__(f"Failed to open url. Reason: {self.reason}")
