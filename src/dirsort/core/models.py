"""
Data models for dirsort core operations.

This module defines the data structures passed between the organizer and
the CLI layer.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from dirsort.shared.constants import SkipReason


class FileOperation(BaseModel):
    """A single move of one entry into its category folder."""

    source_path: Path = Field(
        ...,
        description="Current path of the file",
    )
    destination_path: Path = Field(
        ...,
        description="Path the file is moved to",
    )
    category: str = Field(
        ...,
        description="Category folder the file was classified into",
    )

    @property
    def name(self) -> str:
        """File name, identical at source and destination."""
        return self.source_path.name

    def __str__(self) -> str:
        return f"move: {self.source_path} -> {self.destination_path}"


class SkippedEntry(BaseModel):
    """An entry that was left in place."""

    name: str
    reason: SkipReason


class OrganizeResult(BaseModel):
    """
    Outcome of one organizer run.

    ``operations`` holds the moves in the order they were performed (or, for
    a dry run, the order they would have been performed).
    """

    target_directory: Path
    dry_run: bool = False
    operations: list[FileOperation] = Field(default_factory=list)
    skipped: list[SkippedEntry] = Field(default_factory=list)

    @property
    def moved_count(self) -> int:
        return len(self.operations)

    def to_summary(self) -> dict[str, object]:
        """Serializable summary used for JSON output."""
        return {
            "target_directory": str(self.target_directory),
            "dry_run": self.dry_run,
            "moved": [
                {
                    "name": operation.name,
                    "category": operation.category,
                    "source": str(operation.source_path),
                    "destination": str(operation.destination_path),
                }
                for operation in self.operations
            ],
            "skipped": [
                {"name": entry.name, "reason": entry.reason.value}
                for entry in self.skipped
            ],
        }
