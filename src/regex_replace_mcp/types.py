"""Data models and error types for regex-replace-mcp."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class InvalidPatternError(ValueError):
    """Regex source failed to compile."""


class InvalidGlobError(ValueError):
    """Glob pattern is syntactically malformed."""


class FileWriteError(OSError):
    """Writing substituted content back to disk failed. Aborts the batch."""


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class SearchHit:
    """One matching line collected by search."""

    path: str
    line_number: int
    text: str


@dataclass(slots=True)
class SearchResult:
    """Result of a regex search across a file set.

    Attributes:
        hits: Collected matching lines, at most ``limit`` of them.
        total_matches: Matching lines counted. A lower bound once the limit
            short-circuits the scan.
        files_matched: Size of the glob expansion.
        limit: Effective (clamped) collection limit.
    """

    hits: list[SearchHit]
    total_matches: int
    files_matched: int
    limit: int

    @property
    def truncated(self) -> bool:
        return self.total_matches > self.limit


# ---------------------------------------------------------------------------
# Replace
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class LineChange:
    """Before/after pair for one original line (1-based)."""

    line_number: int
    before: str
    after: str


@dataclass(slots=True)
class FileChange:
    """A file whose substituted content differs from the original.

    Attributes:
        path: Path as produced by glob expansion.
        lines: Per-line before/after pairs, in line order.
        match_count: Regex matches in the original content. Used for totals,
            may differ from ``len(lines)``.
    """

    path: str
    lines: list[LineChange] = field(default_factory=list)
    match_count: int = 0


@dataclass(slots=True, frozen=True)
class SkippedFile:
    """A file that could not be read during replace."""

    path: str
    reason: str


ReplaceOutcome: TypeAlias = FileChange | SkippedFile


@dataclass(slots=True)
class ReplaceResult:
    """Result of a regex replace across a file set.

    Outcomes keep processing order so skipped files render inline.
    """

    outcomes: list[ReplaceOutcome]
    files_matched: int
    dry_run: bool

    @property
    def changes(self) -> list[FileChange]:
        return [o for o in self.outcomes if isinstance(o, FileChange)]

    @property
    def files_modified(self) -> int:
        return len(self.changes)

    @property
    def total_replacements(self) -> int:
        return sum(c.match_count for c in self.changes)
