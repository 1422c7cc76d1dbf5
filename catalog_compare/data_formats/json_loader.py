"""
Catalog loader for JSON localization files.

Loading runs the same gates for every file, in order:
    1. Extension and size check
    2. JSON syntax validation (with line/column on failure)
    3. Root must be an object
    4. Key sanitization (keys containing "." are rejected)
    5. Key count quota
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from catalog_compare.config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE, MAX_KEY_COUNT
from catalog_compare.data_formats.sanitize import (
    DottedKeyError,
    check_file_size,
    sanitize_object_keys,
)
from catalog_compare.data_formats.validator import parse_json, validate_json
from catalog_compare.engine import LIMIT_EXCEEDED, count_keys, count_keys_bounded

logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    """Base class for catalog loading failures."""


class CatalogNotFoundError(CatalogLoadError):
    """The catalog file does not exist."""


class UnsupportedFileTypeError(CatalogLoadError):
    """The file extension is not an accepted catalog type."""


class FileTooLargeError(CatalogLoadError):
    """The file exceeds the configured size limit."""


class InvalidJsonError(CatalogLoadError):
    """The file content is not valid JSON.

    Attributes:
        line: 1-based line of the syntax error, if known.
        column: 1-based column of the syntax error, if known.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class NotAnObjectError(CatalogLoadError):
    """The JSON root is not an object."""


class InvalidKeyError(CatalogLoadError):
    """A key cannot be used as a key path segment.

    Attributes:
        key_path: Path of the offending key.
    """

    def __init__(self, message: str, key_path: str) -> None:
        self.key_path = key_path
        super().__init__(message)


class KeyLimitExceededError(CatalogLoadError):
    """The catalog holds more keys than the quota allows."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Catalog has more than {limit:,} keys")


@dataclass
class Catalog:
    """A loaded, validated and sanitized catalog.

    Attributes:
        data: The root container.
        key_count: Total number of keys (see count_keys).
        file_name: Base name of the source file.
        file_size: Size of the source text in bytes.
    """

    data: dict[str, Any]
    key_count: int
    file_name: str
    file_size: int


def parse_catalog(
    text: str,
    file_name: str = "untitled.json",
    *,
    max_file_size: int = MAX_FILE_SIZE,
    max_keys: int | None = MAX_KEY_COUNT,
) -> Catalog:
    """
    Validate and parse catalog text.

    Args:
        text: Raw JSON text.
        file_name: Name reported in the Catalog.
        max_file_size: Size limit in bytes for the encoded text.
        max_keys: Key quota; None disables the check.

    Returns:
        The parsed Catalog.

    Raises:
        FileTooLargeError: If the text is larger than max_file_size.
        InvalidJsonError: If the text is not valid JSON.
        NotAnObjectError: If the JSON root is not an object.
        InvalidKeyError: If a key contains the "." key path separator.
        KeyLimitExceededError: If the catalog has more than max_keys keys.
    """
    file_size = len(text.encode("utf-8")) if isinstance(text, str) else 0
    valid, error = check_file_size(file_size, max_file_size)
    if not valid:
        raise FileTooLargeError(f"{file_name}: {error}")

    validation = validate_json(text)
    if not validation.is_valid:
        raise InvalidJsonError(
            f"{file_name}: JSON validation failed: {validation.error}",
            line=validation.line,
            column=validation.column,
        )

    raw = parse_json(text)
    if not isinstance(raw, dict):
        raise NotAnObjectError(
            f"{file_name}: catalog root must be an object (got {type(raw).__name__})"
        )

    try:
        data = sanitize_object_keys(raw)
    except DottedKeyError as e:
        raise InvalidKeyError(f"{file_name}: {e}", e.key_path) from e

    # Cheap pre-check that stops counting as soon as the quota is hit
    if max_keys is not None and count_keys_bounded(data, max_keys) == LIMIT_EXCEEDED:
        raise KeyLimitExceededError(max_keys)
    key_count = count_keys(data)

    logger.debug("Parsed %s: %d keys, %d bytes", file_name, key_count, file_size)
    return Catalog(data=data, key_count=key_count, file_name=file_name, file_size=file_size)


def load_catalog(
    path: str | Path,
    *,
    max_file_size: int = MAX_FILE_SIZE,
    max_keys: int | None = MAX_KEY_COUNT,
) -> Catalog:
    """
    Load a catalog file from disk.

    The size limit is checked against the file on disk before it is read.

    Raises:
        CatalogNotFoundError: If the file does not exist.
        UnsupportedFileTypeError: If the extension is not accepted.
        CatalogLoadError: Any failure from parse_catalog().

    Examples:
        >>> catalog = load_catalog("locales/en.json")
        >>> print(catalog.key_count)
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogNotFoundError(f"File not found: {path}")

    if path.suffix.lower() not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{path.suffix}'. "
            f"Supported extensions: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
        )

    valid, error = check_file_size(path.stat().st_size, max_file_size)
    if not valid:
        raise FileTooLargeError(f"{path.name}: {error}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidJsonError(f"{path.name}: file is not UTF-8 text ({e.reason})") from e

    catalog = parse_catalog(text, path.name, max_file_size=max_file_size, max_keys=max_keys)
    logger.info("Loaded %s (%d keys)", path, catalog.key_count)
    return catalog
