"""
Logging Configuration Constants

This module contains all constants related to logging configuration,
log levels, and log formatting.
"""

import logging


class LogConfig:
    """Log configuration constants."""

    LOGGER_NAME = "dirsort"

    # Console stays quiet unless asked, stdout belongs to the move report
    DEFAULT_LEVEL = "WARNING"
    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    DEFAULT_ENCODING = "utf-8"

    # File rotation
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5

    LEVELS = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }


class LogMessages:
    """Log message templates."""

    ORGANIZE_START = "Starting organization of directory: %s"
    ORGANIZE_COMPLETE = "Finished organizing %s: %d moved, %d skipped"
    ENTRY_SKIPPED = "Skipping %s (%s)"
    ENTRY_MOVED = "Moved %s -> %s"
