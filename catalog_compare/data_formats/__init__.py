"""
Catalog loading, validation, formatting and export.

Usage:
    from catalog_compare.data_formats import load_catalog, export_document

    catalog = load_catalog("locales/en.json")
    print(catalog.key_count)
"""

from catalog_compare.data_formats.exporter import export_document, export_side, serialize
from catalog_compare.data_formats.file_size import format_file_size
from catalog_compare.data_formats.formatting import ABSENT_MARKER, format_value, truncate_value
from catalog_compare.data_formats.json_loader import (
    Catalog,
    CatalogLoadError,
    CatalogNotFoundError,
    FileTooLargeError,
    InvalidJsonError,
    InvalidKeyError,
    KeyLimitExceededError,
    NotAnObjectError,
    UnsupportedFileTypeError,
    load_catalog,
    parse_catalog,
)
from catalog_compare.data_formats.sanitize import (
    DottedKeyError,
    check_file_size,
    sanitize_file_name,
    sanitize_key_path,
    sanitize_key_segment,
    sanitize_object_keys,
)
from catalog_compare.data_formats.validator import ValidationResult, parse_json, validate_json

__all__ = [
    # Loading
    "Catalog",
    "load_catalog",
    "parse_catalog",
    # Errors
    "CatalogLoadError",
    "CatalogNotFoundError",
    "FileTooLargeError",
    "InvalidJsonError",
    "InvalidKeyError",
    "KeyLimitExceededError",
    "NotAnObjectError",
    "UnsupportedFileTypeError",
    # Validation and sanitization
    "ValidationResult",
    "parse_json",
    "validate_json",
    "DottedKeyError",
    "check_file_size",
    "sanitize_file_name",
    "sanitize_key_path",
    "sanitize_key_segment",
    "sanitize_object_keys",
    # Formatting
    "ABSENT_MARKER",
    "format_file_size",
    "format_value",
    "truncate_value",
    # Export
    "export_document",
    "export_side",
    "serialize",
]
