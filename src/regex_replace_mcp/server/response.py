"""Report rendering helpers for the MCP server.

Report shapes are consumed verbatim by downstream clients; keep them stable.
"""

from __future__ import annotations

from ..types import FileChange, ReplaceResult, SearchResult

NO_FILES_MATCHED = "No files matched the glob pattern."
NO_MATCHES = "No matches found."


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _render_file_change(change: FileChange) -> str:
    out = [f"--- {change.path}\n"]
    for line in change.lines:
        out.append(f"{line.line_number}:- {line.before}\n")
        out.append(f"{line.line_number}:+ {line.after}\n")
    out.append("\n")
    return "".join(out)


def _render_replace(result: ReplaceResult) -> str:
    """Render replace result as per-file diff blocks plus a total line."""
    if result.files_matched == 0:
        return NO_FILES_MATCHED
    if result.files_modified == 0:
        return NO_MATCHES

    out: list[str] = []
    for outcome in result.outcomes:
        if isinstance(outcome, FileChange):
            out.append(_render_file_change(outcome))
        else:
            out.append(f'Skipping "{outcome.path}": {outcome.reason}\n')

    mode = " (dry run)" if result.dry_run else ""
    out.append(
        f"Total: {_plural(result.total_replacements, 'replacement')} "
        f"in {_plural(result.files_modified, 'file')}{mode}\n"
    )
    return "".join(out)


def _render_search(result: SearchResult) -> str:
    """Render search hits as ``path:line: text`` entries plus a total line."""
    if result.files_matched == 0:
        return NO_FILES_MATCHED
    if not result.hits:
        return NO_MATCHES

    body = "\n".join(f"{h.path}:{h.line_number}: {h.text}" for h in result.hits)
    if result.truncated:
        body += f"\n\n... and more (showing first {result.limit})"
    body += f"\n\nTotal: {result.total_matches} matches"
    return body


def _render_error(message: str) -> str:
    """Render consistent error responses."""
    return f"Error: {message}"
