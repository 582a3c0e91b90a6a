"""dirsort Error Handling Module

This module defines the error handling system for dirsort, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for dirsort.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # Path Errors (target directory)
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    INVALID_PATH = "INVALID_PATH"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    DIRECTORY_LIST_FAILED = "DIRECTORY_LIST_FAILED"

    # File Operation Errors (per entry)
    FILE_ACCESS_ERROR = "FILE_ACCESS_ERROR"
    DIRECTORY_CREATION_FAILED = "DIRECTORY_CREATION_FAILED"
    FILE_MOVE_FAILED = "FILE_MOVE_FAILED"

    # Configuration Errors
    CONFIG_INVALID = "CONFIG_INVALID"

    # CLI Errors
    CLI_INVALID_ARGUMENTS = "CLI_INVALID_ARGUMENTS"
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"
    CLI_COMMAND_INTERRUPTED = "CLI_COMMAND_INTERRUPTED"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path and Enum values to primitive types.

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types are allowed in additional_data so the context can
    always be logged or serialized to JSON.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as dict, additional_data is always present."""
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class DirsortError(Exception):
    """Base exception class for all dirsort errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize DirsortError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class InfrastructureError(DirsortError):
    """Errors raised while talking to the filesystem."""


class PathError(InfrastructureError):
    """The target directory does not exist or cannot be listed.

    Raised before anything has been mutated.
    """

    @property
    def is_not_found(self) -> bool:
        """Whether the user most likely mistyped the path."""
        return self.code in (ErrorCode.DIRECTORY_NOT_FOUND, ErrorCode.INVALID_PATH)


class FileOperationError(InfrastructureError):
    """A stat, mkdir or rename failed while processing an entry.

    Entries handled before the failure stay where they were moved.
    """


class ApplicationError(DirsortError):
    """Application-level errors (arguments, configuration)."""


class CliError(ApplicationError):
    """CLI-specific error carrying the process exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


# Convenience functions for common error scenarios
def create_path_error(
    path: Path,
    original_error: OSError,
    operation: str = "list_directory",
) -> PathError:
    """Create a PathError from the OSError raised while listing ``path``."""
    context = ErrorContext(file_path=str(path), operation=operation)

    if isinstance(original_error, FileNotFoundError):
        return PathError(
            ErrorCode.DIRECTORY_NOT_FOUND,
            f"Directory does not exist: {path}",
            context,
            original_error,
        )
    if isinstance(original_error, NotADirectoryError) or (
        original_error.errno == errno.ENOTDIR
    ):
        return PathError(
            ErrorCode.INVALID_PATH,
            f"Path is not a directory: {path}",
            context,
            original_error,
        )
    if isinstance(original_error, PermissionError):
        return PathError(
            ErrorCode.PERMISSION_DENIED,
            f"Permission denied: {path}",
            context,
            original_error,
        )
    return PathError(
        ErrorCode.DIRECTORY_LIST_FAILED,
        f"Cannot list directory {path}: {original_error}",
        context,
        original_error,
    )


def create_file_operation_error(
    code: ErrorCode,
    path: Path,
    operation: str,
    original_error: OSError,
    destination: Path | None = None,
) -> FileOperationError:
    """Create a FileOperationError with the failing path in its context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"destination": str(destination)} if destination is not None else None
    )
    context = ErrorContext(
        file_path=str(path),
        operation=operation,
        additional_data=additional_data,
    )
    detail = original_error.strerror or str(original_error)
    return FileOperationError(
        code,
        f"{operation} failed for {path}: {detail}",
        context,
        original_error,
    )


def create_config_error(
    message: str,
    config_path: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    context = ErrorContext(file_path=config_path, operation="load_config")
    return ApplicationError(
        ErrorCode.CONFIG_INVALID,
        message,
        context,
        original_error,
    )


def create_cli_error(
    message: str,
    command: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
    code: ErrorCode = ErrorCode.CLI_UNEXPECTED_ERROR,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"command": command} if command else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return CliError(
        code,
        message,
        context,
        original_error,
        command,
        exit_code,
    )
