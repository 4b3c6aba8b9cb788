"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, content_path: Path, output_dir: Path) -> Path:
    """
    Setup logger for a site build.

    Args:
        log_dir: Directory for this build session
        content_path: Content file being built (recorded in the build header)
        output_dir: Site output directory (recorded in the build header)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        build_context={"Content file": content_path, "Output directory": output_dir},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(content_path: Path, output_dir: Path) -> None:
    """Log start of a site build with context."""
    _log_info(f"Starting site build: {content_path}")
    _log_info(f"Writing to {output_dir}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log build result.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken to build
    """
    if result.success:
        _log_success(f"Site build succeeded: {len(result.pages)} pages ({elapsed_time:.2f}s)")
        for path in result.pages.values():
            _log_debug(f"  Page: {path}")
    else:
        _log_error(f"Site build failed ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
