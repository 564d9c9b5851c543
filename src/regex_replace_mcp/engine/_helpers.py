"""Private helpers shared by search and replace."""

from __future__ import annotations

import re
from pathlib import Path

from ..types import FileWriteError, InvalidPatternError


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile caller regex, mapping syntax errors to InvalidPatternError."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(f"Invalid regex pattern: {e}") from e


def _split_lines(content: str) -> list[str]:
    """Split on "\\n" only, dropping one trailing "\\r" per line.

    A final newline does not produce an empty last line. Unlike
    str.splitlines(), form feeds and unicode separators do not split.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_text(path: Path) -> str:
    """Read strict UTF-8 without newline translation.

    Raises:
        OSError: File could not be read
        UnicodeDecodeError: Content is not valid UTF-8
    """
    return path.read_bytes().decode("utf-8")


def _write_text(path: Path, content: str) -> None:
    """Write UTF-8 without newline translation."""
    try:
        path.write_bytes(content.encode("utf-8"))
    except OSError as e:
        raise FileWriteError(f'Failed to write "{path}": {e}') from e
