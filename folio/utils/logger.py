"""
Build session logging.

Each site build gets its own log directory. The log file records DEBUG output
for the whole pipeline (content, template and render prefixes interleaved)
while the console shows INFO and above. The file opens with a build header
naming the folio version, the content file and the output directory, so any
log can be traced back to the site it produced.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()
CONSOLE_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}"
HEADER_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    build_context: Optional[Mapping[str, object]] = None,
) -> Path:
    """
    Route loguru output to <log_dir>/<context_name>.log and the console.

    Any sinks from a previous build are removed first, so consecutive builds
    in one process never write into each other's log files.

    Args:
        context_name: Log file stem (e.g., "render")
        log_dir: Directory for this build session
        build_context: Inputs of the build recorded in the header
            (e.g., {"Content file": ..., "Output directory": ...})

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_build_header(context_name, build_context)
    return log_file


def log_build_header(context_name: str, build_context: Optional[Mapping[str, object]] = None) -> None:
    """
    Write the build header to the log file only (DEBUG level).

    Example output:
        ================================================================
        folio 0.1.0 | render session started 2025-11-14T12:34:56
        Content file: data/content/site.yaml
        Output directory: outs/site
        ================================================================
    """
    started = datetime.now().isoformat(timespec="seconds")
    logger.debug(HEADER_RULE)
    logger.debug(f"folio {__version__} | {context_name} session started {started}")
    for key, value in (build_context or {}).items():
        logger.debug(f"{key}: {value}")
    logger.debug(HEADER_RULE)
