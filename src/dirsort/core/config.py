"""Configuration management for dirsort.

Settings come from defaults, ``DIRSORT_*`` environment variables and an
optional TOML file. Only ambient behavior (logging) is configurable; the
category table is compiled in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dirsort.shared.constants import LogConfig
from dirsort.shared.errors import create_config_error


class LoggingSettings(BaseModel):
    """Logging configuration.

    ``file`` is empty by default, which disables file logging.
    """

    level: str = Field(default=LogConfig.DEFAULT_LEVEL, description="Logging level")
    file: str = Field(default="", description="Log file path")
    max_bytes: int = Field(
        default=LogConfig.MAX_BYTES,
        gt=0,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        default=LogConfig.BACKUP_COUNT,
        ge=0,
        description="Number of backup log files to keep",
    )

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LogConfig.LEVELS:
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level


class Settings(BaseSettings):
    """Top-level dirsort settings."""

    model_config = SettingsConfigDict(
        env_prefix="DIRSORT_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from a TOML file.

        A ``[tool.dirsort]`` table is used when present so settings can live
        in a ``pyproject.toml``; otherwise the whole document is read.

        Raises:
            ApplicationError: If the file is missing, unreadable or invalid.
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise create_config_error(
                f"Configuration file not found: {file_path}",
                config_path=str(file_path),
            )

        try:
            raw_config: dict[str, Any] = toml.load(file_path)
        except (OSError, toml.TomlDecodeError) as e:
            raise create_config_error(
                f"Failed to read configuration file {file_path}: {e}",
                config_path=str(file_path),
                original_error=e,
            ) from e

        section = raw_config.get("tool", {}).get("dirsort", raw_config)
        try:
            return cls(**section)
        except ValidationError as e:
            raise create_config_error(
                f"Invalid configuration in {file_path}: {e}",
                config_path=str(file_path),
                original_error=e,
            ) from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from ``config_path`` if given, else from the environment.

    Raises:
        ApplicationError: If the configuration is invalid.
    """
    if config_path is not None:
        return Settings.from_toml_file(config_path)

    try:
        return Settings()
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration in environment: {e}",
            original_error=e,
        ) from e
