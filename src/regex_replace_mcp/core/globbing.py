"""Glob expansion to an ordered list of regular files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..types import InvalidGlobError

logger = logging.getLogger(__name__)

GLOB_CHARS = frozenset("*?[")


def _validate_component(part: str) -> None:
    """Reject malformed wildcard syntax in one path component."""
    if "**" in part and part != "**":
        raise InvalidGlobError(
            f"Invalid glob pattern: '**' must be a whole path component, got {part!r}"
        )
    i = 0
    while i < len(part):
        if part[i] == "[":
            # "]" directly after "[" or "[!" is a literal member of the class
            j = i + 1
            if j < len(part) and part[j] == "!":
                j += 1
            if j < len(part) and part[j] == "]":
                j += 1
            close = part.find("]", j)
            if close == -1:
                raise InvalidGlobError(f"Invalid glob pattern: unclosed '[' in {part!r}")
            i = close + 1
        else:
            i += 1


def _split_pattern(pattern: str) -> tuple[Path, str | None]:
    """Split into literal base directory and relative glob remainder.

    Returns (path, None) when the pattern has no wildcard at all.
    """
    pp = Path(pattern)
    base_parts: list[str] = []
    pattern_parts: list[str] = []
    found_glob = False
    for part in pp.parts:
        if not found_glob and not any(c in part for c in GLOB_CHARS):
            base_parts.append(part)
        else:
            found_glob = True
            _validate_component(part)
            pattern_parts.append(part)

    if not pattern_parts:
        return pp, None
    base = Path(*base_parts) if base_parts else Path(".")
    return base, "/".join(pattern_parts)


def expand_glob(pattern: str) -> list[Path]:
    """Expand a glob pattern to the regular files it matches.

    Directories are skipped. Entries that fail to stat are logged and skipped,
    and a walk interrupted by an OS error keeps what it found so far.

    Returned paths are pathlib-normalized: a leading "./" is dropped
    ("./*.txt" yields "a.txt") and repeated slashes collapse.

    Args:
        pattern: Glob pattern, absolute or relative (e.g., "src/**/*.php")

    Returns:
        Matching file paths sorted by path components, so the files of one
        directory stay grouped (may be empty)

    Raises:
        InvalidGlobError: Pattern syntax is malformed
    """
    if not pattern:
        return []

    base, remainder = _split_pattern(pattern)

    try:
        if remainder is None:
            return [base] if base.is_file() else []
        if not base.is_dir():
            return []
    except OSError as e:
        logger.warning(f"Glob error: {base}: {e}")
        return []

    files: list[Path] = []
    try:
        for entry in base.glob(remainder):
            try:
                if not entry.is_file():
                    continue
            except OSError as e:
                logger.warning(f"Glob error: {entry}: {e}")
                continue
            files.append(entry)
    except OSError as e:
        logger.warning(f"Glob error while walking {base}: {e}")
    except ValueError as e:
        raise InvalidGlobError(f"Invalid glob pattern: {e}") from e

    files.sort(key=lambda p: p.parts)
    logger.debug(f"Glob {pattern!r} matched {len(files)} file(s)")
    return files
