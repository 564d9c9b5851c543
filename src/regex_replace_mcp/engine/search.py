"""Regex search across a glob-selected file set."""

from __future__ import annotations

import logging

from ..config import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, SEARCH_EXACT_TOTAL
from ..core.globbing import expand_glob
from ..types import SearchHit, SearchResult
from ._helpers import _compile_pattern, _read_text, _split_lines

logger = logging.getLogger(__name__)


def search_files(
    pattern: str,
    files: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    exact_total: bool = SEARCH_EXACT_TOTAL,
) -> SearchResult:
    """Find lines matching a regex across files.

    Scanning stops as soon as ``limit`` lines are collected, so once the
    limit is hit ``total_matches`` only covers what was scanned. With
    ``exact_total`` the scan continues counting (without collecting) to the
    end of the file set.

    Unreadable and non-UTF-8 files are skipped.

    Args:
        pattern: Regex pattern (Python ``re`` syntax)
        files: Glob pattern selecting files
        limit: Max lines to collect (clamped to MAX_SEARCH_LIMIT)
        exact_total: Keep counting after the limit is reached

    Returns:
        SearchResult with collected hits and match total

    Raises:
        InvalidPatternError: Regex does not compile
        InvalidGlobError: Glob is malformed
        ValueError: limit is negative
    """
    rx = _compile_pattern(pattern)
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    limit = min(limit, MAX_SEARCH_LIMIT)

    paths = expand_glob(files)
    hits: list[SearchHit] = []
    total = 0
    collecting = True

    for path in paths:
        try:
            content = _read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping {path}: {e}")
            continue

        for line_number, line in enumerate(_split_lines(content), start=1):
            if not rx.search(line):
                continue
            total += 1
            if collecting and len(hits) < limit:
                hits.append(SearchHit(path=str(path), line_number=line_number, text=line.strip()))
            if len(hits) >= limit:
                collecting = False
                if not exact_total:
                    break
        if not collecting and not exact_total:
            break

    return SearchResult(hits=hits, total_matches=total, files_matched=len(paths), limit=limit)
