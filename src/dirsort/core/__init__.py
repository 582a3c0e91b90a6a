"""Core dirsort functionality: classification and directory organization."""

from .categories import classify, extract_extension
from .models import FileOperation, OrganizeResult, SkippedEntry
from .organizer import DirectoryOrganizer, running_program_name

__all__ = [
    "DirectoryOrganizer",
    "FileOperation",
    "OrganizeResult",
    "SkippedEntry",
    "classify",
    "extract_extension",
    "running_program_name",
]
