"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user-facing messages.
"""

from typing import Literal


class CLIDefaults:
    """CLI default values."""

    # Version information
    VERSION = "0.1.0"

    # Exit codes
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1

    # Default boolean values
    DEFAULT_JSON = False
    DEFAULT_DRY_RUN = False

    # Default numeric values
    DEFAULT_VERBOSE = 0


class CLIOptions:
    """CLI option names."""

    DRY_RUN = "--dry-run"
    JSON = "--json"
    VERBOSE = "--verbose"
    VERBOSE_SHORT = "-v"
    LOG_LEVEL = "--log-level"
    CONFIG = "--config"
    CONFIG_SHORT = "-c"
    VERSION = "--version"
    VERSION_SHORT = "-V"


class CLIHelp:
    """CLI help text and descriptions."""

    # Version
    VERSION_HELP = "Show version information and exit."
    VERSION_TEXT = "dirsort v{version}"

    # App info
    APP_NAME = "dirsort"
    APP_DESCRIPTION = "dirsort - Sort the files of a directory into category folders"
    APP_STYLE: Literal["rich"] = "rich"

    # Organize command
    DIRECTORY_HELP = "Directory whose files should be sorted into category folders"
    DRY_RUN_HELP = "Show what would be moved without touching the filesystem"
    JSON_HELP = "Enable machine-readable JSON output instead of human-readable format."
    VERBOSE_HELP = (
        "Enable verbose output (equivalent to --log-level DEBUG). "
        "Use multiple times for increased verbosity."
    )
    LOG_LEVEL_HELP = (
        "Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). "
        "Default: WARNING."
    )
    CONFIG_HELP = "Path to a TOML settings file"

    USAGE = "Usage: {program} <directory_path>"


class CLIMessages:
    """CLI message templates."""

    COMMAND_NAME = "organize"

    MOVED = "Moved: {name} -> {category}/"
    WOULD_MOVE = "Would move: {name} -> {category}/"
    COMPLETED = "Organization completed successfully!"
    DRY_RUN_COMPLETED = "Dry run completed, nothing was moved."

    class Error:
        """Error message templates."""

        MISSING_DIRECTORY = (
            "ERROR: Please provide the path of the directory you want to organize."
        )
        OCCURRED = "An error occurred: {error}"
        CHECK_PATH_HINT = "Check that the directory path is correct."
