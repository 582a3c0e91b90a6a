"""
dirsort Constants Module

This module provides centralized constants for the dirsort application.
Category data, CLI texts and logging defaults are defined here so the rest
of the codebase never hard-codes them.
"""

from .categories import CATEGORY_TABLE, FALLBACK_CATEGORY, Categories, SkipReason
from .cli import CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from .logging import LogConfig, LogMessages

__all__ = [
    "CATEGORY_TABLE",
    "FALLBACK_CATEGORY",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "Categories",
    "LogConfig",
    "LogMessages",
    "SkipReason",
]
