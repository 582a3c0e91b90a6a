"""Shared building blocks for dirsort CLI commands."""
