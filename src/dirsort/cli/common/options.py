"""
Reusable Typer Options Module

This module centralizes the Typer option definitions used by the dirsort
command so names and help texts stay consistent.
"""

from __future__ import annotations

import typer

from dirsort.shared.constants import CLIDefaults, CLIHelp, CLIOptions


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=CLIDefaults.VERSION))
        raise typer.Exit


# Verbose option - count-based for multiple -v flags
verbose_option = typer.Option(
    CLIOptions.VERBOSE,
    CLIOptions.VERBOSE_SHORT,
    count=True,
    help=CLIHelp.VERBOSE_HELP,
)

# Log level option - enum-based with case-insensitive choices
log_level_option = typer.Option(
    CLIOptions.LOG_LEVEL,
    case_sensitive=False,
    help=CLIHelp.LOG_LEVEL_HELP,
    show_default=False,
)

# JSON output option - flag-based
json_output_option = typer.Option(
    CLIOptions.JSON,
    help=CLIHelp.JSON_HELP,
)

dry_run_option = typer.Option(
    CLIOptions.DRY_RUN,
    help=CLIHelp.DRY_RUN_HELP,
)

config_option = typer.Option(
    CLIOptions.CONFIG,
    CLIOptions.CONFIG_SHORT,
    help=CLIHelp.CONFIG_HELP,
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    show_default=False,
)

# Version option - eager so it runs before argument validation
version_option = typer.Option(
    CLIOptions.VERSION,
    CLIOptions.VERSION_SHORT,
    help=CLIHelp.VERSION_HELP,
    callback=version_callback,
    is_eager=True,
)
