"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

from folio.utils.text_processing import truncate_display

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_sanitized_fragment(removed_elements: list, removed_attributes: list) -> None:
    """Log what the sanitizer stripped from a fragment (debug level only)."""
    if not removed_elements and not removed_attributes:
        return
    if removed_elements:
        _log_debug(f"Sanitizer removed elements: {', '.join(removed_elements)}")
    if removed_attributes:
        _log_debug(f"Sanitizer removed attributes: {', '.join(removed_attributes)}")


def log_sanitizer_fallback(raw_html: str, error: Exception) -> None:
    """Log that the parser rejected markup and the fragment was escaped as text."""
    _log_warning(f"HTML parser rejected fragment, escaping as text: {error}")
    _log_debug(f"  Fragment: {truncate_display(raw_html, 120)!r}")


def log_page_composed(page_name: str, section_counts: dict) -> None:
    """Log block counts per section for a composed page."""
    summary = ", ".join(f"{section}: {count}" for section, count in section_counts.items())
    _log_info(f"Composed {page_name} page ({summary})")
