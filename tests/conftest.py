"""
Pytest configuration and shared fixtures for rofi-bookmarks tests.

This module provides sample bookmark files in both formats and the trees
they parse into.
"""

from pathlib import Path

import pytest

from rofi_bookmarks.core.data_models import (
    BookmarkGroup,
    BookmarkItem,
    Bookmarks,
    SourceFormat,
)

# ============================================================================
# Sample Files
# ============================================================================

SAMPLE_TOML = """\
[search]
url = "https://duckduckgo.com"
keywords = ["web", "search"]

[news]
title = "Hacker News"
url = "https://news.ycombinator.com"

[dev]
title = "Development"

[dev.python]
title = "Python docs"
url = "https://docs.python.org/3/"

[dev.tools]

[dev.tools.git]
url = "https://git-scm.com"
keywords = ["vcs"]

[dev.rust]
url = "https://www.rust-lang.org"
"""

SAMPLE_FLAT = """\
Bookmarks for the rofi menu
===========================

# Example :: https://example.com extra info
  # Python docs :: https://docs.python.org/3/
# Rust :: https://www.rust-lang.org
"""


@pytest.fixture
def sample_toml_text() -> str:
    """Hierarchical bookmarks document with nested groups."""
    return SAMPLE_TOML


@pytest.fixture
def sample_flat_text() -> str:
    """Flat bookmarks document with a free-form header."""
    return SAMPLE_FLAT


@pytest.fixture
def toml_bookmarks_file(tmp_path) -> Path:
    """SAMPLE_TOML written to a .toml file."""
    path = tmp_path / "bookmarks.toml"
    path.write_text(SAMPLE_TOML, encoding="utf-8")
    return path


@pytest.fixture
def flat_bookmarks_file(tmp_path) -> Path:
    """SAMPLE_FLAT written to a plain text file."""
    path = tmp_path / "bookmarks.txt"
    path.write_text(SAMPLE_FLAT, encoding="utf-8")
    return path


# ============================================================================
# Sample Trees
# ============================================================================


@pytest.fixture
def sample_tree() -> Bookmarks:
    """The tree SAMPLE_TOML parses into."""
    return Bookmarks(
        items=(
            BookmarkItem(
                title="search",
                url="https://duckduckgo.com",
                keywords=("web", "search"),
            ),
            BookmarkItem(title="Hacker News", url="https://news.ycombinator.com"),
            BookmarkGroup(
                title="Development",
                children=(
                    BookmarkItem(title="Python docs", url="https://docs.python.org/3/"),
                    BookmarkGroup(
                        title="tools",
                        children=(
                            BookmarkItem(
                                title="git",
                                url="https://git-scm.com",
                                keywords=("vcs",),
                            ),
                        ),
                    ),
                    BookmarkItem(title="rust", url="https://www.rust-lang.org"),
                ),
            ),
        ),
        source_format=SourceFormat.HIERARCHICAL,
    )


@pytest.fixture
def bookmarks_env(toml_bookmarks_file):
    """Minimal environment pointing at the TOML sample."""
    return {"ROFI_BOOKMARKS_PATH": str(toml_bookmarks_file)}
