"""Tests for report rendering and the MCP tools."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from fastmcp import Client

from regex_replace_mcp.server import mcp
from regex_replace_mcp.server.response import _render_replace, _render_search
from regex_replace_mcp.types import (
    FileChange,
    LineChange,
    ReplaceResult,
    SearchHit,
    SearchResult,
    SkippedFile,
)


def _call(tool: str, arguments: dict[str, Any]) -> str:
    """Call a tool through the in-memory client and return its text."""

    async def run() -> str:
        async with Client(mcp) as client:
            result = await client.call_tool(tool, arguments)
        content = getattr(result, "content", result)
        return content[0].text

    return asyncio.run(run())


class TestRenderReplace:
    """Tests for replace report format."""

    def test_blocks_and_total(self) -> None:
        """Per-file block, blank separator, pluralized total."""
        result = ReplaceResult(
            outcomes=[
                SkippedFile("bad.txt", "boom"),
                FileChange("a.txt", [LineChange(2, "x = 1", "y = 1")], match_count=1),
            ],
            files_matched=2,
            dry_run=False,
        )

        assert _render_replace(result) == (
            'Skipping "bad.txt": boom\n'
            "--- a.txt\n"
            "2:- x = 1\n"
            "2:+ y = 1\n"
            "\n"
            "Total: 1 replacement in 1 file\n"
        )

    def test_plural_and_dry_run(self) -> None:
        """Plural forms and the dry-run suffix."""
        result = ReplaceResult(
            outcomes=[
                FileChange("a.txt", [LineChange(1, "a a", "b b")], match_count=2),
                FileChange("b.txt", [LineChange(1, "a", "b")], match_count=1),
            ],
            files_matched=2,
            dry_run=True,
        )

        assert _render_replace(result).endswith("Total: 3 replacements in 2 files (dry run)\n")

    def test_sentinels(self) -> None:
        """Empty glob and no modified files use fixed strings."""
        assert (
            _render_replace(ReplaceResult(outcomes=[], files_matched=0, dry_run=False))
            == "No files matched the glob pattern."
        )
        skipped_only = ReplaceResult(
            outcomes=[SkippedFile("bad.txt", "boom")], files_matched=1, dry_run=False
        )
        assert _render_replace(skipped_only) == "No matches found."


class TestRenderSearch:
    """Tests for search report format."""

    def test_hits_and_total(self) -> None:
        """Hits joined by newline, then a total line."""
        result = SearchResult(
            hits=[SearchHit("a.txt", 1, "hello world"), SearchHit("a.txt", 3, "hello again")],
            total_matches=2,
            files_matched=1,
            limit=50,
        )

        assert _render_search(result) == (
            "a.txt:1: hello world\na.txt:3: hello again\n\nTotal: 2 matches"
        )

    def test_truncation_notice(self) -> None:
        """Known overflow adds the truncation notice with the limit."""
        result = SearchResult(
            hits=[SearchHit("a.txt", 1, "x")], total_matches=4, files_matched=1, limit=1
        )

        assert _render_search(result) == (
            "a.txt:1: x\n\n... and more (showing first 1)\n\nTotal: 4 matches"
        )

    def test_sentinels(self) -> None:
        """Empty glob and empty hits use fixed strings."""
        assert (
            _render_search(SearchResult(hits=[], total_matches=0, files_matched=0, limit=50))
            == "No files matched the glob pattern."
        )
        assert (
            _render_search(SearchResult(hits=[], total_matches=0, files_matched=3, limit=50))
            == "No matches found."
        )


class TestTools:
    """End-to-end tests through the MCP client."""

    def test_search(self, sample_files: dict[str, Path], temp_dir: Path) -> None:
        """regex_search lists both matching lines and the total."""
        text = _call("regex_search", {"pattern": "hello", "files": str(temp_dir / "greeting.txt")})

        assert "hello world" in text
        assert "hello again" in text
        assert "Total: 2 matches" in text

    def test_search_no_matches(self, sample_files: dict[str, Path], temp_dir: Path) -> None:
        """regex_search with no matching line."""
        text = _call("regex_search", {"pattern": "xyz", "files": str(temp_dir / "*.txt")})

        assert text == "No matches found."

    def test_replace(self, sample_files: dict[str, Path], temp_dir: Path) -> None:
        """regex_replace rewrites files and reports the count."""
        text = _call(
            "regex_replace",
            {
                "pattern": r"fn (\w+)\(\)",
                "replacement": "fn $1_v2()",
                "files": str(temp_dir / "*.rs"),
            },
        )

        assert "2 replacements" in text
        assert f"--- {sample_files['source']}" in text
        assert "1:+ fn hello_v2() {}" in text
        assert sample_files["source"].read_text() == "fn hello_v2() {}\nfn world_v2() {}"

    def test_replace_dry_run(self, sample_files: dict[str, Path], temp_dir: Path) -> None:
        """dry_run reports but does not write."""
        path = sample_files["greeting"]
        text = _call(
            "regex_replace",
            {"pattern": "hello", "replacement": "goodbye", "files": str(path), "dry_run": True},
        )

        assert "(dry run)" in text
        assert path.read_text() == "hello world\nfoo bar\nhello again"

    def test_no_files_matched(self, temp_dir: Path) -> None:
        """Both tools report an empty glob the same way."""
        files = str(temp_dir / "*.xyz")

        assert (
            _call("regex_search", {"pattern": "test", "files": files})
            == "No files matched the glob pattern."
        )
        assert (
            _call("regex_replace", {"pattern": "test", "replacement": "x", "files": files})
            == "No files matched the glob pattern."
        )

    def test_errors_rendered(self, sample_files: dict[str, Path], temp_dir: Path) -> None:
        """Invalid regex and glob come back as Error strings."""
        bad_regex = _call("regex_search", {"pattern": "(", "files": str(temp_dir / "*.txt")})
        bad_glob = _call(
            "regex_replace",
            {"pattern": "a", "replacement": "b", "files": str(temp_dir / "[abc")},
        )

        assert bad_regex.startswith("Error: Invalid regex pattern")
        assert bad_glob.startswith("Error: Invalid glob pattern")

    def test_write_failure_rendered(self, write_blocked: list[Path], temp_dir: Path) -> None:
        """A failed write aborts the tool with the path and OS error."""
        first, second, third = write_blocked

        text = _call(
            "regex_replace",
            {"pattern": "old", "replacement": "new", "files": str(temp_dir / "*.txt")},
        )

        assert text.startswith(f'Error: Failed to write "{second}": ')
        assert "Permission denied" in text
        assert first.read_text() == "new\n"
        assert third.read_text() == "old\n"
