"""
dirsort - Directory organizer

Sorts the files found directly inside a directory into category folders
chosen by file extension.
"""

from .shared.constants import CLIDefaults

__version__ = CLIDefaults.VERSION

__all__ = ["__version__"]
