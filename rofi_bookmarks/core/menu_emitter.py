"""
Writer for rofi's script-mode protocol.

Each menu entry is one line. Row options follow the entry text after a NUL
byte, with the option name and value separated by the unit separator
(0x1f). A line that starts with NUL sets a mode option instead of adding an
entry; ``message`` shows text above the list.
"""

import logging
from typing import Optional, Sequence, TextIO

from ..utils.error_handler import EmitError
from .data_models import BookmarkGroup, BookmarkNode, SourceFormat

NUL = "\x00"
UNIT_SEPARATOR = "\x1f"
GROUP_ICON = "folder"


class MenuEmitter:
    """Serializes bookmark entries into rofi menu lines."""

    def __init__(
        self,
        stream: TextIO,
        source_format: SourceFormat = SourceFormat.HIERARCHICAL,
    ):
        """
        Initialize the emitter.

        Args:
            stream: Text stream rofi reads from, normally sys.stdout
            source_format: Decides how a bookmark's metadata is rendered
        """
        self.stream = stream
        self.source_format = source_format
        self.logger = logging.getLogger(__name__)

    def emit(self, header: Optional[str], items: Sequence[BookmarkNode]) -> None:
        """
        Write an optional header line followed by one line per entry.

        Args:
            header: Message shown above the list, or None
            items: Entries to list, in order

        Raises:
            EmitError: If writing to the stream fails
        """
        if header is not None:
            self._write(self.format_message(header))
        for item in items:
            self._write(self.format_entry(item))
        self._flush()
        self.logger.debug(f"Emitted {len(items)} menu entries")

    def emit_message(self, text: str) -> None:
        """Write a lone message line, used to surface errors inside rofi."""
        self._write(self.format_message(text))
        self._flush()

    @staticmethod
    def format_message(text: str) -> str:
        return f"{NUL}message{UNIT_SEPARATOR}{text}\n"

    def format_entry(self, node: BookmarkNode) -> str:
        """
        Render one entry line.

        Groups get a folder icon. Bookmarks carry searchable metadata:
        their keywords for TOML files, their URL and extra text for flat
        files.
        """
        if isinstance(node, BookmarkGroup):
            return f"{node.title}{NUL}icon{UNIT_SEPARATOR}{GROUP_ICON}\n"

        if self.source_format is SourceFormat.FLAT:
            meta = f"{node.url},{node.extra or ''}"
        else:
            meta = "".join(f"{keyword}," for keyword in node.keywords)
        return f"{node.title}{NUL}meta{UNIT_SEPARATOR}{meta}{UNIT_SEPARATOR}\n"

    def _write(self, line: str) -> None:
        try:
            self.stream.write(line)
        except OSError as e:
            raise EmitError(f"Failed to write menu output: {e}") from e

    def _flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise EmitError(f"Failed to write menu output: {e}") from e
