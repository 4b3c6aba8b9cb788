"""
Content context logger.

Provides logging interface for content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[content]"


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_content_loaded(source: Path, counts: dict) -> None:
    """Log collection sizes after a content file is loaded."""
    summary = ", ".join(f"{name}: {count}" for name, count in counts.items())
    _log_info(f"Loaded content from {source}")
    _log_debug(f"  {summary}")
