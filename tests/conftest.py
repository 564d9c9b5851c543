"""Pytest fixtures for regex-replace-mcp tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_files(temp_dir: Path) -> dict[str, Path]:
    """Create sample test files."""
    files = {}

    # Plain text
    greeting = temp_dir / "greeting.txt"
    greeting.write_text("hello world\nfoo bar\nhello again")
    files["greeting"] = greeting

    # Rust-ish source with functions
    source = temp_dir / "lib.rs"
    source.write_text("fn hello() {}\nfn world() {}")
    files["source"] = source

    # PHP with dollar variables
    php = temp_dir / "page.php"
    php.write_text("$page = intval(array_get($request->get, 'p', 1));")
    files["php"] = php

    # Nested directory
    nested_dir = temp_dir / "src" / "deep"
    nested_dir.mkdir(parents=True)
    nested = nested_dir / "nested.txt"
    nested.write_text("nested hello\n")
    files["nested"] = nested

    return files


@pytest.fixture
def binary_file(temp_dir: Path) -> Path:
    """Create a binary file (not valid UTF-8)."""
    binary_path = temp_dir / "binary.txt"
    binary_path.write_bytes(b"hello \xff\xfe\x80\x81\n")
    return binary_path


@pytest.fixture
def write_blocked(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> list[Path]:
    """Create a.txt, b.txt, c.txt ("old\\n"); writing b.txt raises PermissionError."""
    paths = [temp_dir / name for name in ("a.txt", "b.txt", "c.txt")]
    for p in paths:
        p.write_text("old\n")

    original_write_bytes = Path.write_bytes

    def write_bytes(self: Path, data: bytes) -> int:
        if self.name == "b.txt":
            raise PermissionError(13, "Permission denied", str(self))
        return original_write_bytes(self, data)

    monkeypatch.setattr(Path, "write_bytes", write_bytes)
    return paths
