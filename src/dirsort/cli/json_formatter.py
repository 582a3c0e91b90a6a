"""
JSON Output Formatter for dirsort CLI

This module produces the machine-readable output printed when the --json
flag is used, for both successful runs and failures.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import orjson


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """
    Format command output as JSON.

    Args:
        success: Whether the command executed successfully
        command: The command name
        data: The command's output data
        errors: List of error messages
        warnings: List of warning messages

    Returns:
        JSON-encoded bytes ready for output

    Example:
        >>> output = format_json_output(
        ...     success=True,
        ...     command="organize",
        ...     data={"moved": [], "skipped": []}
        ... )
    """
    errors = errors or []
    warnings = warnings or []

    json_data = {
        "success": success and not errors,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": data,
        "errors": errors,
        "warnings": warnings,
    }

    return orjson.dumps(
        json_data,
        option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
    )
