"""Server package - MCP server entry point."""

from __future__ import annotations

from . import tools  # noqa: F401 - side-effect: registers @mcp.tool() decorators
from ._mcp import mcp

__all__ = ["mcp", "main"]


def main() -> None:
    """Run the MCP server."""
    mcp.run()
