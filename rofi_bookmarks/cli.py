"""
Command-line interface for rofi-bookmarks.

rofi runs the script once with no arguments to fill the menu, then again
with the title of the chosen entry. A chosen bookmark is opened in the
browser; a chosen group lists its own entries.

    rofi -show bookmarks -modes "bookmarks:rofi-bookmarks"
"""

import argparse
import logging
import os
import sys
from typing import Callable, List, Mapping, Optional, TextIO

from rofi_bookmarks import __version__
from rofi_bookmarks.config.pydantic_config import (
    RETV_VARIABLE,
    ConfigurationManager,
)
from rofi_bookmarks.core.data_models import Bookmarks, SourceFormat
from rofi_bookmarks.core.import_module import BookmarkImporter
from rofi_bookmarks.core.menu_emitter import MenuEmitter
from rofi_bookmarks.core.resolver import NotFound, OpenUrl, SelectionResolver
from rofi_bookmarks.core.url_opener import open_url
from rofi_bookmarks.utils.error_handler import (
    EmitError,
    OpenError,
    RofiBookmarksError,
)
from rofi_bookmarks.utils.logging_setup import setup_logging

PROG = "rofi-bookmarks"


class LauncherArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class CLIInterface:
    """Script-mode entry point driven by argv and the environment."""

    # Only recognised as the first argument; anything else is a selector.
    OPTION_FLAGS = ("-h", "--help", "-V", "--version", "--check")

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        opener: Callable[[str], None] = open_url,
    ):
        self.environ = environ
        self.stdout = stdout
        self.stderr = stderr
        self.opener = opener
        self.resolver = SelectionResolver()
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = LauncherArgumentParser(
            prog=PROG,
            description="Bookmarks menu for rofi's script mode",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Environment:
  ROFI_BOOKMARKS_PATH       bookmarks file (required)
  ROFI_BOOKMARKS_FORMAT     auto (default), toml or flat
  ROFI_BOOKMARKS_LOG_LEVEL  DEBUG, INFO, WARNING (default), ERROR
  ROFI_BOOKMARKS_LOG_FILE   also write the log to this file
  ROFI_RETV                 set by rofi; errors are shown inside the menu

File formats:
  *.toml  nested tables; a table with 'url' is a bookmark, others are groups
  other   lines like '# Title :: https://example.com extra text'
            """,
        )
        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Parse the bookmarks file, print a summary to stderr and exit",
        )
        parser.add_argument(
            "selector",
            nargs="?",
            help="Title of the entry picked in rofi. Omit to list the top level.",
        )
        return parser

    def parse_args(self, args: List[str]) -> argparse.Namespace:
        """Parse argv, treating a leading non-option as a literal selector."""
        if args and args[0] not in self.OPTION_FLAGS:
            args = ["--", *args]
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """Execute one script-mode invocation and return the exit code."""
        if args is None:
            args = sys.argv[1:]
        parsed_args = self.parse_args(args)

        environ = self._get_environ()
        # Until the configuration loads, configuration errors need this directly.
        echo_errors = RETV_VARIABLE in environ
        stdout = self.stdout if self.stdout is not None else sys.stdout

        try:
            config = ConfigurationManager(environ).config
            echo_errors = config.echo_errors
            setup_logging(config)

            logger = logging.getLogger(__name__)
            logger.info(f"Bookmarks file: {config.bookmarks_path}")
            if parsed_args.selector is not None:
                logger.info(f"Selector: {parsed_args.selector}")

            importer = BookmarkImporter(config.source_format)
            if parsed_args.check:
                return self._handle_check(importer, config.bookmarks_path)

            bookmarks = importer.import_file(config.bookmarks_path)
            emitter = MenuEmitter(stdout, bookmarks.source_format)

            if parsed_args.selector is None:
                emitter.emit(None, bookmarks.items)
                return 0

            return self._handle_selection(bookmarks, parsed_args.selector, emitter)

        except RofiBookmarksError as e:
            return self._fail(e, echo_errors, stdout)
        except Exception as e:
            logging.getLogger(__name__).exception("Unexpected error in CLI")
            return self._fail(e, echo_errors, stdout)

    def _handle_selection(
        self, bookmarks: Bookmarks, selector: str, emitter: MenuEmitter
    ) -> int:
        if bookmarks.source_format is SourceFormat.FLAT:
            outcome = self.resolver.resolve_flat(bookmarks.items, selector)
        else:
            outcome = self.resolver.resolve(bookmarks.items, selector)

        if isinstance(outcome, NotFound):
            outcome.raise_error()

        if isinstance(outcome, OpenUrl):
            try:
                self.opener(outcome.url)
            except OpenError as e:
                if bookmarks.source_format.open_failure_is_fatal:
                    raise
                logging.getLogger(__name__).error(f"{e} ({e.url})")
            return 0

        emitter.emit(outcome.title, outcome.children)
        return 0

    def _handle_check(self, importer: BookmarkImporter, bookmarks_path) -> int:
        info = importer.get_file_info(bookmarks_path)
        print(
            f"{info['path']}: {info['format']} format, {info['items']} bookmarks, "
            f"{info['groups']} groups",
            file=self._get_stderr(),
        )
        return 0

    def _fail(self, error: Exception, echo_errors: bool, stdout: TextIO) -> int:
        """Report an error on stderr, and inside rofi when it is listening."""
        print(f"{PROG}: {error}", file=self._get_stderr())
        if echo_errors and not isinstance(error, EmitError):
            try:
                MenuEmitter(stdout).emit_message(str(error))
            except EmitError as e:
                logging.getLogger(__name__).warning(f"Could not echo error: {e}")
        return 1

    def _get_environ(self) -> Mapping[str, str]:
        if self.environ is not None:
            return self.environ
        return os.environ

    def _get_stderr(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
