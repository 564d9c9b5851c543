"""MCP tool implementations."""

from __future__ import annotations

import logging

from ..config import DEFAULT_SEARCH_LIMIT
from ..engine import replace_in_files, search_files
from ._mcp import mcp
from .response import _render_error, _render_replace, _render_search

logger = logging.getLogger(__name__)


@mcp.tool()
def regex_replace(
    pattern: str,
    replacement: str,
    files: str,
    dry_run: bool = False,
) -> str:
    """Replace text matching a regex pattern across multiple files.

    Supports capture groups ($1, $2, etc.) in replacement. Returns a summary
    of changes made.

    Any other "$" in the replacement is kept literally, so code such as
    "$request->get" needs no escaping. "$$" is also a literal "$".

    Args:
        pattern: Regex pattern to match (Python re syntax)
        replacement: Replacement string. Use $1, $2 for capture groups, $0 for entire match
        files: Glob pattern for files (e.g., 'src/**/*.php')
        dry_run: Preview changes without writing (default: false)
    """
    try:
        result = replace_in_files(pattern, replacement, files, dry_run=dry_run)
        return _render_replace(result)
    except ValueError as e:
        return _render_error(str(e))
    except OSError as e:
        logger.warning(f"I/O error in regex_replace: {e}")
        return _render_error(str(e))
    except Exception:
        logger.exception("Unexpected error in regex_replace")
        return _render_error("Internal error occurred while replacing")


@mcp.tool()
def regex_search(
    pattern: str,
    files: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> str:
    """Search for regex pattern matches across files.

    Returns matching lines with file paths and line numbers.

    Args:
        pattern: Regex pattern to search for (Python re syntax)
        files: Glob pattern for files (e.g., 'src/**/*.php')
        limit: Maximum matches to return (default: 50)
    """
    try:
        result = search_files(pattern, files, limit=limit)
        return _render_search(result)
    except ValueError as e:
        return _render_error(str(e))
    except OSError as e:
        logger.warning(f"I/O error in regex_search: {e}")
        return _render_error(str(e))
    except Exception:
        logger.exception("Unexpected error in regex_search")
        return _render_error("Internal error occurred while searching")
