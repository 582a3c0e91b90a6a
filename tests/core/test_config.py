"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from dirsort.core.config import LoggingSettings, Settings, load_settings
from dirsort.shared.constants import LogConfig
from dirsort.shared.errors import ApplicationError, ErrorCode


def test_defaults() -> None:
    settings = load_settings()

    assert settings.logging.level == LogConfig.DEFAULT_LEVEL
    assert settings.logging.file == ""
    assert settings.logging.max_bytes == LogConfig.MAX_BYTES
    assert settings.logging.backup_count == LogConfig.BACKUP_COUNT


def test_environment_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DIRSORT_LOGGING__LEVEL", "debug")
    monkeypatch.setenv("DIRSORT_LOGGING__FILE", str(tmp_path / "dirsort.log"))

    settings = load_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.file == str(tmp_path / "dirsort.log")


def test_invalid_environment_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRSORT_LOGGING__LEVEL", "chatty")

    with pytest.raises(ApplicationError) as exc_info:
        load_settings()

    assert exc_info.value.code == ErrorCode.CONFIG_INVALID


def test_pyproject_style_file(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        '[project]\nname = "whatever"\n\n'
        '[tool.dirsort.logging]\nlevel = "info"\nbackup_count = 2\n',
    )

    settings = load_settings(config_file)

    assert settings.logging.level == "INFO"
    assert settings.logging.backup_count == 2


def test_plain_settings_file(tmp_path: Path) -> None:
    config_file = tmp_path / "dirsort.toml"
    config_file.write_text('[logging]\nlevel = "ERROR"\nfile = "logs/run.log"\n')

    settings = Settings.from_toml_file(config_file)

    assert settings.logging.level == "ERROR"
    assert settings.logging.file == "logs/run.log"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ApplicationError) as exc_info:
        load_settings(tmp_path / "nope.toml")

    assert exc_info.value.code == ErrorCode.CONFIG_INVALID
    assert "not found" in exc_info.value.message


def test_malformed_file(tmp_path: Path) -> None:
    config_file = tmp_path / "broken.toml"
    config_file.write_text("[logging\nlevel = ")

    with pytest.raises(ApplicationError) as exc_info:
        load_settings(config_file)

    assert exc_info.value.code == ErrorCode.CONFIG_INVALID
    assert exc_info.value.original_error is not None


def test_invalid_value_in_file(tmp_path: Path) -> None:
    config_file = tmp_path / "dirsort.toml"
    config_file.write_text("[logging]\nmax_bytes = 0\n")

    with pytest.raises(ApplicationError, match="Invalid configuration"):
        load_settings(config_file)


def test_logging_settings_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        LoggingSettings(level="LOUD")
