"""Organize command handler for dirsort CLI.

Runs the DirectoryOrganizer and narrates each move as it happens.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from dirsort.cli.common.context import get_cli_context
from dirsort.cli.common.models import OrganizeOptions
from dirsort.cli.json_formatter import format_json_output
from dirsort.core.models import FileOperation
from dirsort.core.organizer import DirectoryOrganizer
from dirsort.shared.constants import CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


def handle_organize_command(
    options: OrganizeOptions,
    console: Console | None = None,
) -> int:
    """Handle the organize command.

    Args:
        options: Validated organize command options
        console: Console used for the per-file report

    Returns:
        Exit code (0 for success)

    Raises:
        RuntimeError: If the CLI context has not been set.
        PathError: If the target directory cannot be listed.
        FileOperationError: If a stat, mkdir or move fails mid-run.
    """
    json_output = get_cli_context().is_json_output_enabled()
    # File names are printed verbatim, no markup or :emoji: codes
    console = console or Console(soft_wrap=True, highlight=False, emoji=False)
    template = CLIMessages.WOULD_MOVE if options.dry_run else CLIMessages.MOVED

    def report(operation: FileOperation) -> None:
        if json_output:
            return
        console.print(
            template.format(name=operation.name, category=operation.category),
            markup=False,
        )

    organizer = DirectoryOrganizer(
        options.directory,
        exclude_names=options.exclude_names,
    )
    result = organizer.organize(dry_run=options.dry_run, on_move=report)

    if json_output:
        output = format_json_output(
            success=True,
            command=CLIMessages.COMMAND_NAME,
            data=result.to_summary(),
        )
        typer.echo(output.decode("utf-8"))
    elif options.dry_run:
        console.print(CLIMessages.DRY_RUN_COMPLETED, markup=False)
    else:
        console.print(f"[green]{CLIMessages.COMPLETED}[/green]")

    logger.info("Organize command completed: %d file(s)", result.moved_count)
    return CLIDefaults.EXIT_SUCCESS
