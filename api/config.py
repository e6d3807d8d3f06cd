"""Application configuration and constants."""
import logging
import os
from pathlib import Path


def _resource_path(relative: str) -> Path:
    """Get path to a resource relative to the project root."""
    return Path(__file__).resolve().parent.parent / relative


def _parse_log_level_env(name: str, default: int) -> int:
    """Parse logging level (name or number) from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return default


# Catalog
CATALOG_PATH = Path(
    os.environ.get("QUIZ_CATALOG_PATH", _resource_path("data/data.json"))
)

# Logging
LOG_LEVEL = _parse_log_level_env("QUIZ_LOG_LEVEL", logging.INFO)
