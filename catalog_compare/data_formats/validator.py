"""
JSON syntax validation with error location reporting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_json().

    Attributes:
        is_valid: Whether the text parsed as JSON.
        error: Parser error message when invalid.
        line: 1-based line of the error, if known.
        column: 1-based column of the error, if known.
    """

    is_valid: bool
    error: str | None = None
    line: int | None = None
    column: int | None = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json(text: str) -> Any:
    """Parse strict JSON text.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected so the parsed
    value always survives a standard serialize/deserialize round trip.

    Raises:
        json.JSONDecodeError: On syntax errors.
        ValueError: On non-standard constants.
    """
    return json.loads(text, parse_constant=_reject_constant)


def validate_json(text: Any) -> ValidationResult:
    """Validate a JSON string.

    Examples:
        >>> validate_json('{"valid": "json"}').is_valid
        True
        >>> validate_json('{\\n"invalid": }').line
        2
    """
    if not text or not isinstance(text, str):
        return ValidationResult(False, error="Input must be a non-empty string")

    try:
        parse_json(text)
    except json.JSONDecodeError as e:
        return ValidationResult(False, error=e.msg, line=e.lineno, column=e.colno)
    except ValueError as e:
        return ValidationResult(False, error=str(e))

    return ValidationResult(True)
