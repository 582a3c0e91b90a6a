"""
CLI Error Handling Utilities

This module turns any exception raised while running a command into a
single diagnostic on stderr (or a JSON document on stdout) and an exit code.
"""

from __future__ import annotations

import logging
from typing import Any

import typer

from dirsort.cli.json_formatter import format_json_output
from dirsort.shared.constants import CLIDefaults, CLIHelp, CLIMessages
from dirsort.shared.errors import (
    CliError,
    DirsortError,
    ErrorCode,
    PathError,
    create_cli_error,
)

logger = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    cli_error = map_error_to_cli_error(error, command)
    hints = _hints_for(error)

    # Full traceback only surfaces with --verbose or a DEBUG log file
    logger.debug(
        "CLI error in %s: %s",
        command,
        cli_error.message,
        exc_info=(type(error), error, error.__traceback__),
        extra={"context": cli_error.context.safe_dict()},
    )

    if json_output:
        _output_json_error(cli_error, error, command, hints)
    else:
        _output_error(cli_error, hints)

    return cli_error.exit_code


def map_error_to_cli_error(error: BaseException, command: str) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        return error

    if isinstance(error, DirsortError):
        return CliError(
            error.code,
            error.message,
            error.context,
            error,
            command,
            CLIDefaults.EXIT_ERROR,
        )

    if isinstance(error, OSError):
        return create_cli_error(
            message=f"File system error: {error}",
            command=command,
            original_error=error,
        )

    if isinstance(error, KeyboardInterrupt):
        return create_cli_error(
            message="Command interrupted by user",
            command=command,
            exit_code=INTERRUPTED_EXIT_CODE,
            code=ErrorCode.CLI_COMMAND_INTERRUPTED,
        )

    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error if isinstance(error, Exception) else None,
    )


def _hints_for(error: BaseException) -> list[str]:
    if isinstance(error, PathError) and error.is_not_found:
        return [CLIMessages.Error.CHECK_PATH_HINT]
    if isinstance(error, CliError) and error.code == ErrorCode.CLI_INVALID_ARGUMENTS:
        return [CLIHelp.USAGE.format(program=CLIHelp.APP_NAME)]
    return []


def _output_error(cli_error: CliError, hints: list[str]) -> None:
    if cli_error.code == ErrorCode.CLI_INVALID_ARGUMENTS:
        typer.echo(cli_error.message, err=True)
    else:
        typer.echo(CLIMessages.Error.OCCURRED.format(error=cli_error.message), err=True)
    for hint in hints:
        typer.echo(hint, err=True)


def _output_json_error(
    cli_error: CliError,
    error: BaseException,
    command: str,
    hints: list[str],
) -> None:
    data: dict[str, Any] = {
        "error_code": cli_error.code.value,
        "error_type": type(error).__name__,
        "exit_code": cli_error.exit_code,
        "context": cli_error.context.safe_dict(),
    }
    output = format_json_output(
        success=False,
        command=command,
        data=data,
        errors=[cli_error.message],
        warnings=hints,
    )
    typer.echo(output.decode("utf-8"))
