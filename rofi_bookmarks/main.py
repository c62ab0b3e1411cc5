#!/usr/bin/env python3
"""
Main entry point for rofi-bookmarks.

Point rofi's script mode at this file when running from a checkout.
"""

import sys
from rofi_bookmarks.cli import main


if __name__ == "__main__":
    sys.exit(main())
