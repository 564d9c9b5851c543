"""Engine package - search and replace over glob-selected files."""

from __future__ import annotations

from ._helpers import _split_lines
from .replace import replace_in_files
from .search import search_files

__all__ = [
    "replace_in_files",
    "search_files",
    # Helpers (used by tests)
    "_split_lines",
]
