"""Extension classification for dirsort.

This module maps file extensions to the category folder they belong in.
Both functions are pure and never raise.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Mapping

from dirsort.shared.constants import CATEGORY_TABLE, FALLBACK_CATEGORY


def extract_extension(name: str) -> str:
    """Return the lower-cased extension of ``name``, including the dot.

    Follows the ``PurePath.suffix`` convention, so extensionless names and
    bare dotfiles yield an empty string.

    Example:
        >>> extract_extension("photo.JPG")
        '.jpg'
        >>> extract_extension(".gitignore")
        ''
    """
    return PurePath(name).suffix.lower()


def classify(
    extension: str,
    table: Mapping[str, frozenset[str]] = CATEGORY_TABLE,
) -> str:
    """Find the category folder for ``extension``.

    Args:
        extension: Lower-case extension with its leading dot (e.g. ``.jpg``).
        table: Category table to search, in declaration order.

    Returns:
        The first category listing the extension, or the fallback category.
    """
    for category, extensions in table.items():
        if extension in extensions:
            return category
    return FALLBACK_CATEGORY
