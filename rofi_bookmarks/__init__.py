"""
rofi-bookmarks: a bookmarks menu for rofi's script mode.

Lists bookmarks from a TOML or flat text file, opens the one the user picks
and lets groups be browsed one level at a time.
"""

__version__ = "1.0.0"
