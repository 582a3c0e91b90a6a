"""Centralized logging configuration for dirsort.

This module sets up the ``dirsort`` logger with Rich console output on
stderr and optional file rotation based on the loaded settings.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from dirsort.shared.constants import LogConfig


def _create_rich_console() -> Console:
    """Create the stderr console used by the log handler."""
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_logging(
    log_level: str = LogConfig.DEFAULT_LEVEL,
    log_file: str | Path | None = None,
    *,
    max_bytes: int = LogConfig.MAX_BYTES,
    backup_count: int = LogConfig.BACKUP_COUNT,
    console_output: bool = True,
) -> logging.Logger:
    """Set up the application logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to a log file. File logging is disabled when empty.
        max_bytes: Maximum size of the log file before rotation.
        backup_count: Number of rotated files to keep.
        console_output: Whether to log to stderr through Rich.

    Returns:
        The configured ``dirsort`` logger.
    """
    level = LogConfig.LEVELS[log_level.upper()]

    logger = logging.getLogger(LogConfig.LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console_output:
        console_handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=LogConfig.DEFAULT_ENCODING,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt=LogConfig.DEFAULT_FORMAT,
                datefmt=LogConfig.DEFAULT_DATE_FORMAT,
            )
        )
        logger.addHandler(file_handler)

    return logger
