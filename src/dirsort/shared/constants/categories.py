"""
Category Table Constants

This module contains the compiled-in mapping from category folder names to
the file extensions they collect. The table is read-only for the lifetime of
the process; declaration order decides which category wins when an extension
is listed twice.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Categories:
    """Category folder names."""

    IMAGES = "images"
    DOCUMENTS = "documents"
    VIDEOS = "videos"
    AUDIO = "audio"
    ARCHIVES = "archives"
    CODE = "code"

    # Catch-all bucket for unknown extensions
    FALLBACK = "outros"


class SkipReason(str, Enum):
    """Why an entry was left where it is."""

    DIRECTORY = "directory"
    SELF = "self"
    NO_EXTENSION = "no_extension"


FALLBACK_CATEGORY = Categories.FALLBACK

CATEGORY_TABLE: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        Categories.IMAGES: frozenset(
            {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp"},
        ),
        Categories.DOCUMENTS: frozenset(
            {
                ".pdf",
                ".doc",
                ".docx",
                ".xls",
                ".xlsx",
                ".ppt",
                ".pptx",
                ".txt",
                ".csv",
                ".rtf",
            },
        ),
        Categories.VIDEOS: frozenset({".mp4", ".mkv", ".avi", ".mov", ".wmv"}),
        Categories.AUDIO: frozenset({".mp3", ".wav", ".aac", ".flac"}),
        Categories.ARCHIVES: frozenset({".zip", ".rar", ".7z", ".tar", ".gz"}),
        Categories.CODE: frozenset(
            {".js", ".html", ".css", ".py", ".java", ".c", ".cpp", ".json", ".xml"},
        ),
    },
)
