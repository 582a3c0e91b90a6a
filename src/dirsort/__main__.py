"""
dirsort Package Main Entry Point

This module serves as the entry point for ``python -m dirsort`` and for the
installed ``dirsort`` console script.
"""

import logging
import sys

from dirsort.cli.common.error_handler import handle_cli_error
from dirsort.cli.typer_app import app
from dirsort.shared.constants import CLIMessages

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the CLI application."""
    try:
        app()
    except KeyboardInterrupt as e:
        logger.info("Command interrupted by user")
        sys.exit(handle_cli_error(e, CLIMessages.COMMAND_NAME))


if __name__ == "__main__":
    main()
