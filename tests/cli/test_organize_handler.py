"""Tests for the organize command handler outside of Typer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dirsort.cli.common.context import CliContext, set_cli_context
from dirsort.cli.common.models import OrganizeOptions
from dirsort.cli.organize_handler import handle_organize_command


def test_json_mode_comes_from_cli_context(
    messy_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    set_cli_context(CliContext(json_output=True))

    exit_code = handle_organize_command(OrganizeOptions(directory=messy_dir))

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["success"] is True
    assert (messy_dir / "documents" / "notes.txt").is_file()


def test_text_mode_prints_moves(messy_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_context(CliContext())

    handle_organize_command(OrganizeOptions(directory=messy_dir))

    out = capsys.readouterr().out
    assert "Moved: notes.txt -> documents/" in out
    assert "Organization completed successfully!" in out


def test_requires_cli_context(messy_dir: Path) -> None:
    with pytest.raises(RuntimeError, match="CLI context has not been initialized"):
        handle_organize_command(OrganizeOptions(directory=messy_dir))

    assert (messy_dir / "notes.txt").is_file()
