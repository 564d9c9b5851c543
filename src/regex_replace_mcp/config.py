"""Configuration constants for regex-replace-mcp."""

import logging
from os import environ
from typing import Final

# Logging configuration (stderr, stdout carries the MCP stdio channel)
LOG_LEVEL: Final = environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def _env_int(name: str, default: int) -> int:
    """Read integer env var with fallback."""
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    """Read boolean env var (1/true/yes/on) with fallback."""
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Search limits
DEFAULT_SEARCH_LIMIT: Final = _env_int("DEFAULT_SEARCH_LIMIT", 50)
MAX_SEARCH_LIMIT: Final = _env_int("MAX_SEARCH_LIMIT", 1000)  # DoS cap on collected lines

# Keep counting matches after the limit is reached (exact totals, slower)
SEARCH_EXACT_TOTAL: Final = _env_bool("SEARCH_EXACT_TOTAL", False)

# ---------------------------------------------------------------------------
# Configuration validation
# ---------------------------------------------------------------------------


def _validate_config() -> None:
    """Validate configuration constants at module load time."""
    errors: list[str] = []

    if DEFAULT_SEARCH_LIMIT < 0:
        errors.append(f"DEFAULT_SEARCH_LIMIT ({DEFAULT_SEARCH_LIMIT}) must be >= 0")

    if MAX_SEARCH_LIMIT <= 0:
        errors.append(f"MAX_SEARCH_LIMIT ({MAX_SEARCH_LIMIT}) must be > 0")

    if DEFAULT_SEARCH_LIMIT > MAX_SEARCH_LIMIT:
        errors.append(
            f"DEFAULT_SEARCH_LIMIT ({DEFAULT_SEARCH_LIMIT}) must be <= "
            f"MAX_SEARCH_LIMIT ({MAX_SEARCH_LIMIT})"
        )

    if errors:
        raise ValueError("Configuration errors:\n  " + "\n  ".join(errors))


_validate_config()
