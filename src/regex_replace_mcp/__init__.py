"""Regex Replace MCP - regex search and find-and-replace across glob-selected files."""

from importlib.metadata import version as _pkg_version

from .config import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, SEARCH_EXACT_TOTAL
from .core import compile_template, escape_replacement, expand_glob
from .engine import replace_in_files, search_files
from .server import mcp
from .types import (
    FileChange,
    FileWriteError,
    InvalidGlobError,
    InvalidPatternError,
    LineChange,
    ReplaceResult,
    SearchHit,
    SearchResult,
    SkippedFile,
)

__version__ = _pkg_version("regex-replace-mcp")

__all__ = [
    # Engine
    "search_files",
    "replace_in_files",
    # Core
    "escape_replacement",
    "compile_template",
    "expand_glob",
    # Results
    "SearchHit",
    "SearchResult",
    "LineChange",
    "FileChange",
    "SkippedFile",
    "ReplaceResult",
    # Errors
    "InvalidPatternError",
    "InvalidGlobError",
    "FileWriteError",
    # Server
    "mcp",
    # Configuration
    "DEFAULT_SEARCH_LIMIT",
    "MAX_SEARCH_LIMIT",
    "SEARCH_EXACT_TOTAL",
]
