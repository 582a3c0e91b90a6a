"""
Directory organization engine for dirsort.

This module provides the DirectoryOrganizer class that sorts the files found
directly inside a target directory into per-category subfolders.
"""

from __future__ import annotations

import logging
import stat
import sys
from pathlib import Path
from typing import Callable, Iterable, Iterator, Mapping

from dirsort.core.categories import classify, extract_extension
from dirsort.core.models import FileOperation, OrganizeResult, SkippedEntry
from dirsort.shared.constants import CATEGORY_TABLE, LogMessages, SkipReason
from dirsort.shared.errors import (
    ErrorCode,
    create_file_operation_error,
    create_path_error,
)

logger = logging.getLogger(__name__)

MoveCallback = Callable[[FileOperation], None]


def running_program_name() -> str:
    """Return the file name of the running program, or '' if unknown."""
    if not sys.argv or not sys.argv[0]:
        return ""
    return Path(sys.argv[0]).name


class DirectoryOrganizer:
    """
    Single-pass organizer for one target directory.

    Entries are handled strictly one at a time in listing order: each entry
    is stat-ed, classified, and moved before the next one is looked at. The
    first filesystem failure aborts the run; files moved before it stay
    where they are.
    """

    def __init__(
        self,
        target_directory: str | Path,
        *,
        exclude_names: Iterable[str] | None = None,
        table: Mapping[str, frozenset[str]] = CATEGORY_TABLE,
    ) -> None:
        """
        Initialize the DirectoryOrganizer.

        Args:
            target_directory: Directory to organize. Relative paths are
                resolved against the current working directory.
            exclude_names: Entry names that are never moved. Defaults to the
                running program's own file name.
            table: Category table used for classification.
        """
        self.target_directory = Path(target_directory).resolve()
        if exclude_names is None:
            exclude_names = [running_program_name()]
        self.exclude_names = frozenset(name for name in exclude_names if name)
        self.table = table

    def list_entries(self) -> list[Path]:
        """List the immediate entries of the target directory.

        Raises:
            PathError: If the directory is missing, not a directory, or
                cannot be read.
        """
        try:
            return list(self.target_directory.iterdir())
        except OSError as e:
            raise create_path_error(self.target_directory, e) from e

    def iter_operations(
        self,
        skipped: list[SkippedEntry] | None = None,
    ) -> Iterator[FileOperation]:
        """Yield the move for each eligible entry, lazily and in order.

        Args:
            skipped: Optional list that receives every entry left in place.

        Raises:
            PathError: If the target directory cannot be listed.
            FileOperationError: If an entry cannot be stat-ed.
        """
        for entry in self.list_entries():
            reason = self._skip_reason(entry)
            if reason is not None:
                logger.debug(LogMessages.ENTRY_SKIPPED, entry.name, reason.value)
                if skipped is not None:
                    skipped.append(SkippedEntry(name=entry.name, reason=reason))
                continue

            category = classify(extract_extension(entry.name), self.table)
            yield FileOperation(
                source_path=entry,
                destination_path=self.target_directory / category / entry.name,
                category=category,
            )

    def _skip_reason(self, entry: Path) -> SkipReason | None:
        try:
            mode = entry.stat().st_mode
        except OSError as e:
            raise create_file_operation_error(
                ErrorCode.FILE_ACCESS_ERROR,
                entry,
                "stat",
                e,
            ) from e

        if stat.S_ISDIR(mode):
            return SkipReason.DIRECTORY
        if entry.name in self.exclude_names:
            return SkipReason.SELF
        if not extract_extension(entry.name):
            return SkipReason.NO_EXTENSION
        return None

    def execute(self, operation: FileOperation) -> None:
        """Create the category folder if needed and move the file into it.

        Raises:
            FileOperationError: If the folder cannot be created or the
                rename fails.
        """
        destination_dir = operation.destination_path.parent
        try:
            destination_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise create_file_operation_error(
                ErrorCode.DIRECTORY_CREATION_FAILED,
                destination_dir,
                "create_directory",
                e,
            ) from e

        try:
            # Same-filesystem rename; an existing destination is replaced
            operation.source_path.replace(operation.destination_path)
        except OSError as e:
            raise create_file_operation_error(
                ErrorCode.FILE_MOVE_FAILED,
                operation.source_path,
                "move",
                e,
                destination=operation.destination_path,
            ) from e

        logger.debug(
            LogMessages.ENTRY_MOVED,
            operation.source_path,
            operation.destination_path,
        )

    def organize(
        self,
        *,
        dry_run: bool = False,
        on_move: MoveCallback | None = None,
    ) -> OrganizeResult:
        """
        Sort every eligible file of the target directory into its category.

        Args:
            dry_run: If True, report the moves without creating folders or
                moving anything.
            on_move: Called after each move (or planned move) in order.

        Returns:
            OrganizeResult describing what was moved and what was skipped.

        Raises:
            PathError: If the target directory cannot be listed.
            FileOperationError: On the first stat, mkdir or rename failure.
        """
        logger.info(LogMessages.ORGANIZE_START, self.target_directory)
        result = OrganizeResult(target_directory=self.target_directory, dry_run=dry_run)

        for operation in self.iter_operations(result.skipped):
            if not dry_run:
                self.execute(operation)
            result.operations.append(operation)
            if on_move is not None:
                on_move(operation)

        logger.info(
            LogMessages.ORGANIZE_COMPLETE,
            self.target_directory,
            result.moved_count,
            len(result.skipped),
        )
        return result
