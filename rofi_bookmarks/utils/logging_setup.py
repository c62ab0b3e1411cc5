"""
Logging configuration for rofi-bookmarks.

stdout carries the menu protocol, so console logging goes to stderr, which
rofi leaves alone.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config=None, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        config: LauncherConfig supplying log_level and log_file, or None
        log_file: Optional log file path override
    """
    log_level = getattr(config, "log_level", "WARNING")
    if log_file is None and config is not None and config.log_file is not None:
        log_file = str(config.log_file)

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=getattr(logging, log_level.upper()), handlers=handlers)

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file:
        logger.debug(f"Log file: {log_file}")
