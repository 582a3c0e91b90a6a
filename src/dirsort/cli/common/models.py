"""Validated option models for dirsort CLI commands."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class OrganizeOptions(BaseModel):
    """Options for the organize command."""

    directory: Path = Field(..., description="Directory to organize")
    dry_run: bool = Field(default=False, description="Report moves without moving")
    exclude_names: list[str] = Field(
        default_factory=list,
        description="Entry names that must never be moved",
    )
