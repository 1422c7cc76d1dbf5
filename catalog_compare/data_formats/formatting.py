"""Display formatting for catalog values in the CLI and TUI."""

from __future__ import annotations

import json
from typing import Any

from catalog_compare.engine import ABSENT

ABSENT_MARKER = "—"


def format_value(value: Any) -> str:
    """
    Format a value for one-line display.

    Examples:
        >>> format_value(None)
        'null'
        >>> format_value("hello")
        '"hello"'
        >>> format_value([1, 2, 3])
        '[1,2,3]'
        >>> format_value({"a": 1})
        '{...}'
    """
    if value is ABSENT:
        return ABSENT_MARKER
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if isinstance(value, dict):
        return "{...}"
    return str(value)


def truncate_value(value: Any, max_length: int = 50) -> str:
    """Format a value and truncate it with an ellipsis past ``max_length``."""
    formatted = format_value(value)
    if len(formatted) <= max_length:
        return formatted
    return formatted[: max_length - 3] + "..."
