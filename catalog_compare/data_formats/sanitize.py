"""
Input sanitization for loaded catalogs and exported file names.

Catalog keys become key path segments, so they are cleaned before any
comparison runs:
    - Names that alias object internals (__proto__, prototype, constructor)
      are dropped
    - Control characters are removed
    - Keys containing the "." separator are rejected
"""

from __future__ import annotations

import logging
import re
from typing import Any

from catalog_compare.config import (
    MAX_FILENAME_LENGTH,
    MAX_KEYPATH_LENGTH,
    MAX_SANITIZE_DEPTH,
)
from catalog_compare.data_formats.file_size import format_file_size

logger = logging.getLogger(__name__)

DANGEROUS_KEYS = frozenset(["__proto__", "prototype", "constructor"])

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_EDGE_DOTS = re.compile(r"^\.+|\.+$")
_REPEATED_DOTS = re.compile(r"\.{2,}")
_SPACED_DOT = re.compile(r"\s*\.\s*")


class DottedKeyError(ValueError):
    """A catalog key contains the key path separator.

    Attributes:
        key_path: Path of the offending key, its own text as the last segment.
    """

    def __init__(self, parent_path: str, key: str) -> None:
        self.key_path = f"{parent_path}.{key}" if parent_path else key
        super().__init__(
            f"Key {key!r} contains '.', which is reserved as the key path separator"
            + (f" (under {parent_path!r})" if parent_path else "")
        )


def is_dangerous_segment(segment: str) -> bool:
    """Check if a key path segment aliases an object-internal name."""
    return segment.lower() in DANGEROUS_KEYS


def sanitize_key_segment(key: Any) -> str:
    """
    Clean a single container key: control characters and surrounding
    whitespace are removed. Dots are left in place for the caller to reject.

    Examples:
        >>> sanitize_key_segment(" ti\\x00tle ")
        'title'
    """
    if not isinstance(key, str):
        return ""
    return _CONTROL_CHARS.sub("", key).strip()


def sanitize_key_path(key_path: Any) -> str:
    """
    Clean a dotted key path so it is safe to use for nested access.

    Examples:
        >>> sanitize_key_path("app..title")
        'app.title'
        >>> sanitize_key_path("__proto__.polluted")
        'polluted'
    """
    if not key_path or not isinstance(key_path, str):
        return ""

    sanitized = _EDGE_DOTS.sub("", key_path)
    sanitized = _REPEATED_DOTS.sub(".", sanitized)
    sanitized = _CONTROL_CHARS.sub("", sanitized)
    sanitized = _SPACED_DOT.sub(".", sanitized)
    sanitized = sanitized.strip()

    segments = [
        segment
        for segment in sanitized.split(".")
        if segment and not is_dangerous_segment(segment)
    ]
    return ".".join(segments)[:MAX_KEYPATH_LENGTH]


def sanitize_object_keys(obj: Any, max_depth: int = MAX_SANITIZE_DEPTH, _path: str = "") -> Any:
    """
    Recursively sanitize container keys.

    Every key must be usable as one key path segment:
        - Dangerous keys are dropped with a warning
        - Control characters and surrounding whitespace are removed, and a
          key left empty is dropped
        - A key containing '.' raises DottedKeyError
        - When two keys clean to the same text the first one is kept and
          the later one dropped with a warning

    Arrays and primitives are returned unchanged; containers nested
    inside arrays are not visited.

    Args:
        obj: Parsed JSON value.
        max_depth: Maximum container nesting to visit.

    Returns:
        A new sanitized container, or ``obj`` itself if it is not one.

    Raises:
        DottedKeyError: If a key contains the key path separator.
    """
    if not isinstance(obj, dict):
        return obj

    if max_depth <= 0:
        logger.warning("Maximum object depth exceeded during sanitization")
        return {}

    sanitized: dict[str, Any] = {}
    for key, value in obj.items():
        clean_key = sanitize_key_segment(key)
        if is_dangerous_segment(clean_key):
            logger.warning("Removed dangerous key: %s", key)
            continue

        if not clean_key:
            logger.debug("Dropped key that sanitized to nothing: %r", key)
            continue

        if "." in clean_key:
            raise DottedKeyError(_path, clean_key)

        if clean_key in sanitized:
            logger.warning("Dropped key %r: collides with %r after sanitization", key, clean_key)
            continue

        if isinstance(value, dict):
            sanitized[clean_key] = sanitize_object_keys(
                value, max_depth - 1, f"{_path}.{clean_key}" if _path else clean_key
            )
        else:
            sanitized[clean_key] = value

    return sanitized


def sanitize_file_name(filename: Any) -> str:
    """
    Make a file name safe to write: no traversal, separators or reserved characters.

    Examples:
        >>> sanitize_file_name("test<script>.json")
        'test_script_.json'
        >>> sanitize_file_name("")
        'untitled'
    """
    if not filename or not isinstance(filename, str):
        return "untitled"

    sanitized = filename.replace("..", "_.")
    sanitized = re.sub(r"[/\\]", "_", sanitized)
    sanitized = re.sub(r"^\.+", "_", sanitized)
    sanitized = re.sub(r'[<>:"|?*]', "_", sanitized)
    sanitized = re.sub(r"[()\[\]{}]", "_", sanitized)
    sanitized = _CONTROL_CHARS.sub("", sanitized)
    sanitized = re.sub(r"_+", "_", sanitized)
    sanitized = sanitized.strip("_")

    return sanitized[:MAX_FILENAME_LENGTH] or "untitled"


def check_file_size(size: Any, max_size: int) -> tuple[bool, str | None]:
    """Validate a file size against ``max_size``.

    Returns:
        A tuple of (valid, error message or None).
    """
    try:
        num_size = float(size)
    except (TypeError, ValueError):
        return False, "Invalid file size"

    if num_size != num_size or num_size < 0:
        return False, "Invalid file size"

    if num_size > max_size:
        return False, f"File too large (max: {format_file_size(max_size)})"

    return True, None
