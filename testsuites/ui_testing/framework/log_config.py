"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration shared by the pytest session and the
test runner script.

Usage:
    from testsuites.ui_testing.framework.log_config import init_logger

    init_logger()                      # level/file from configuration
    init_logger(level="DEBUG")         # explicit override

================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Safe to call repeatedly; only the first call (or a call with
    ``force=True``) replaces the handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to `logging.level`.
        format_string: Log format string. Uses DEFAULT_FORMAT if not provided.
        log_file: Optional file path to write logs to. Defaults to `logging.file`.
        force: Reconfigure even if already initialized.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    config = ConfigLoader()
    level = (level or config.get("logging.level", "INFO")).upper()
    format_string = format_string or DEFAULT_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or config.get("logging.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


__all__ = [
    "init_logger",
    "DEFAULT_FORMAT",
]
