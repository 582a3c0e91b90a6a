"""Tests for CLI error handling."""

from __future__ import annotations

import errno
import json
from pathlib import Path

import pytest

from dirsort.cli.common.error_handler import handle_cli_error, map_error_to_cli_error
from dirsort.shared.errors import (
    CliError,
    ErrorCode,
    create_file_operation_error,
    create_path_error,
)


def test_path_not_found_prints_hint(capsys: pytest.CaptureFixture[str]) -> None:
    error = create_path_error(Path("/missing"), FileNotFoundError(errno.ENOENT, "nope"))

    exit_code = handle_cli_error(error, "organize")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "An error occurred: Directory does not exist:" in captured.err
    assert "Check that the directory path is correct." in captured.err


def test_io_error_has_no_hint(capsys: pytest.CaptureFixture[str]) -> None:
    error = create_file_operation_error(
        ErrorCode.FILE_MOVE_FAILED,
        Path("/a/b.txt"),
        "move",
        OSError(errno.ENOSPC, "No space left on device"),
    )

    exit_code = handle_cli_error(error, "organize")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "No space left on device" in captured.err
    assert "Check that the directory path" not in captured.err


def test_listing_io_error_has_no_hint(capsys: pytest.CaptureFixture[str]) -> None:
    error = create_path_error(Path("/mnt/disk"), OSError(errno.EIO, "I/O error"))

    exit_code = handle_cli_error(error, "organize")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Cannot list directory" in captured.err
    assert "Check that the directory path" not in captured.err


def test_json_mode_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    error = create_path_error(Path("/missing"), FileNotFoundError(errno.ENOENT, "nope"))

    handle_cli_error(error, "organize", json_output=True)

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is False
    assert payload["data"]["error_type"] == "PathError"
    assert payload["data"]["exit_code"] == 1


def test_unexpected_error_is_wrapped() -> None:
    cli_error = map_error_to_cli_error(ValueError("weird"), "organize")

    assert isinstance(cli_error, CliError)
    assert cli_error.code == ErrorCode.CLI_UNEXPECTED_ERROR
    assert cli_error.message == "Unexpected error: weird"


def test_keyboard_interrupt_exit_code() -> None:
    cli_error = map_error_to_cli_error(KeyboardInterrupt(), "organize")

    assert cli_error.exit_code == 130
    assert cli_error.code == ErrorCode.CLI_COMMAND_INTERRUPTED


def test_cli_error_passes_through() -> None:
    original = CliError(ErrorCode.CLI_INVALID_ARGUMENTS, "missing", exit_code=1)

    assert map_error_to_cli_error(original, "organize") is original
