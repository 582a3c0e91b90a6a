"""
dirsort Typer CLI Application

The application exposes a single command, so it is invoked directly as
``dirsort DIRECTORY`` without a sub-command name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from dirsort.cli.common.context import CliContext, LogLevel, set_cli_context
from dirsort.cli.common.error_handler import handle_cli_error
from dirsort.cli.common.models import OrganizeOptions
from dirsort.cli.common.options import (
    config_option,
    dry_run_option,
    json_output_option,
    log_level_option,
    verbose_option,
    version_option,
)
from dirsort.cli.organize_handler import handle_organize_command
from dirsort.core.config import load_settings
from dirsort.core.logging import setup_logging
from dirsort.core.organizer import running_program_name
from dirsort.shared.constants import CLIDefaults, CLIHelp, CLIMessages
from dirsort.shared.errors import ErrorCode, create_cli_error

app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
)


@app.command()
def organize_command(
    directory: Annotated[
        Optional[Path],
        typer.Argument(help=CLIHelp.DIRECTORY_HELP, show_default=False),
    ] = None,
    dry_run: Annotated[bool, dry_run_option] = CLIDefaults.DEFAULT_DRY_RUN,
    json_output: Annotated[bool, json_output_option] = CLIDefaults.DEFAULT_JSON,
    verbose: Annotated[int, verbose_option] = CLIDefaults.DEFAULT_VERBOSE,
    log_level: Annotated[Optional[LogLevel], log_level_option] = None,
    config: Annotated[Optional[Path], config_option] = None,
    version: Annotated[bool, version_option] = False,
) -> None:
    """
    Sort the files of DIRECTORY into category folders by extension.

    Files directly inside DIRECTORY are moved into images/, documents/,
    videos/, audio/, archives/, code/ or outros/. Subdirectories, files
    without an extension and this program itself are left in place.

    Examples:
        dirsort ~/Downloads

        dirsort . --dry-run

        dirsort ./messy --json
    """
    del version  # handled eagerly by its callback
    try:
        if directory is None:
            raise create_cli_error(
                message=CLIMessages.Error.MISSING_DIRECTORY,
                command=CLIMessages.COMMAND_NAME,
                operation="parse_arguments",
                code=ErrorCode.CLI_INVALID_ARGUMENTS,
            )

        settings = load_settings(config)
        context = CliContext(
            verbose=verbose,
            log_level=log_level or LogLevel(settings.logging.level),
            json_output=json_output,
        )
        set_cli_context(context)
        setup_logging(
            context.get_effective_log_level(),
            settings.logging.file,
            max_bytes=settings.logging.max_bytes,
            backup_count=settings.logging.backup_count,
        )

        options = OrganizeOptions(
            directory=directory,
            dry_run=dry_run,
            exclude_names=[running_program_name()],
        )
        exit_code = handle_organize_command(options)
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(
            e,
            CLIMessages.COMMAND_NAME,
            json_output=json_output,
        )

    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)
