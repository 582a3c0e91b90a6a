"""
Pytest configuration and shared fixtures for dirsort tests.

This module provides common fixtures and configuration that can be used
across all test modules in the project.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from dirsort.cli.common.context import clear_cli_context
from dirsort.shared.constants import LogConfig


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep DIRSORT_* variables and global CLI state out of every test."""
    for key in list(os.environ):
        if key.startswith("DIRSORT_"):
            monkeypatch.delenv(key, raising=False)
    clear_cli_context()

    yield

    clear_cli_context()
    logger = logging.getLogger(LogConfig.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def messy_dir(tmp_path: Path) -> Path:
    """Create a directory with a mix of files, an extensionless file and a subfolder.

    Returns:
        Path to the directory to organize.
    """
    target = tmp_path / "messy"
    target.mkdir()
    (target / "photo.JPG").write_bytes(b"\xff\xd8\xff")
    (target / "notes.txt").write_text("remember the milk")
    (target / "archive.zip").write_bytes(b"PK\x03\x04")
    (target / "run").write_text("#!/bin/sh\n")
    backup = target / "backup"
    backup.mkdir()
    (backup / "old.txt").write_text("keep me here")
    return target

