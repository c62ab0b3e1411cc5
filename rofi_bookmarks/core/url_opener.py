"""Hands a URL to the desktop's default handler."""

import logging
import os
import sys
import webbrowser
from contextlib import contextmanager

from ..utils.error_handler import OpenError

logger = logging.getLogger(__name__)

STDOUT_FILENO = 1


@contextmanager
def stdout_detached():
    """
    Point fd 1 at the null device for the duration of the block.

    rofi reads the script's stdout until every writer has closed it, so a
    browser started from here must not inherit it. The original descriptor
    is restored afterwards so later output still reaches rofi.
    """
    if sys.stdout is not None:
        sys.stdout.flush()
    try:
        saved = os.dup(STDOUT_FILENO)
    except OSError:
        # fd 1 is already closed; there is nothing to hold open.
        yield
        return

    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, STDOUT_FILENO)
        yield
    finally:
        os.dup2(saved, STDOUT_FILENO)
        os.close(saved)
        os.close(devnull)


def open_url(url: str) -> None:
    """
    Open a URL with the system's default browser.

    Raises:
        OpenError: If no browser could be launched or the launch was not
            acknowledged
    """
    logger.info(f"Opening {url}")
    try:
        with stdout_detached():
            opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise OpenError(url, str(e)) from e
    if not opened:
        raise OpenError(url)
