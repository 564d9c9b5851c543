"""FastMCP instance and application lifespan."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from ..config import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, SEARCH_EXACT_TOTAL

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Regex find-and-replace MCP server. "
    "Use regex_replace for replacements, regex_search for searching."
)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, object]]:
    """Log startup and shutdown. Tool calls share no state."""
    logger.info("Regex replace MCP server starting...")
    logger.info(
        f"Search limits: default={DEFAULT_SEARCH_LIMIT}, max={MAX_SEARCH_LIMIT}, "
        f"exact_total={SEARCH_EXACT_TOTAL}"
    )
    try:
        yield {}
    finally:
        logger.info("Regex replace MCP server stopped")


mcp = FastMCP("regex-replace-mcp", instructions=INSTRUCTIONS, lifespan=app_lifespan)
