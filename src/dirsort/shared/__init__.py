"""Shared constants and error types for dirsort."""
