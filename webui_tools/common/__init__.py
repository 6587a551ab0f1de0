"""
================================================================================
Common Utilities
================================================================================

Centralized Loguru logging setup shared by the test suites and the runner.

Usage:
    from webui_tools.common import init_logger

    init_logger(level="DEBUG", log_file="reports/logs/run.log")

================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_str: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Runs once per process unless `force` is set.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR).
               Defaults to LOG_LEVEL env var, then INFO.
        log_file: Optional file sink with rotation and retention
        format_str: Custom log format string
        force: Re-initialize even if already configured
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_format = format_str or DEFAULT_LOG_FORMAT

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


__all__ = [
    "init_logger",
]
