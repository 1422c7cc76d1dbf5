"""
Serialization and export of catalogs, including edited ones.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from catalog_compare.config import DEFAULT_OUTPUT_DIR, EXPORT_SUFFIX
from catalog_compare.data_formats.sanitize import sanitize_file_name
from catalog_compare.engine import EditStore, Side

logger = logging.getLogger(__name__)


def serialize(document: dict[str, Any], pretty: bool = True) -> str:
    """Serialize a document to JSON text.

    Args:
        document: The document to serialize.
        pretty: Indent with two spaces (and end with a newline) if True,
            otherwise use the most compact separators.

    Returns:
        The JSON text.
    """
    if pretty:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def export_document(
    document: dict[str, Any],
    output_dir: str = DEFAULT_OUTPUT_DIR,
    source_filename: str = "catalog.json",
    *,
    pretty: bool = True,
    suffix: str = EXPORT_SUFFIX,
) -> str:
    """
    Write a document to ``output_dir`` as ``{stem}_{suffix}.json``.

    Creates the output directory if it doesn't exist.

    Args:
        document: The document to export.
        output_dir: Directory path for the output file.
        source_filename: Original file name (used for output naming).
        pretty: Pretty-print the JSON.
        suffix: Appended to the source file stem.

    Returns:
        The path to the created output file.

    Raises:
        OSError: If the output directory cannot be created or file cannot be written.

    Examples:
        >>> path = export_document(doc, "edited_catalogs", "fr.json")
        >>> print(path)  # "edited_catalogs/fr_edited.json"
    """
    os.makedirs(output_dir, exist_ok=True)

    stem = sanitize_file_name(Path(source_filename).stem)
    output_path = Path(output_dir) / f"{stem}_{suffix}.json"

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(serialize(document, pretty=pretty))

    logger.info("Exported %s", output_path)
    return str(output_path)


def export_side(
    store: EditStore,
    side: Side | str,
    original: dict[str, Any],
    output_dir: str = DEFAULT_OUTPUT_DIR,
    source_filename: str = "catalog.json",
    *,
    pretty: bool = True,
) -> str:
    """Export the current (edited if needed) document of one side.

    Raises:
        InvalidSideError: If side is not 'left' or 'right'.
    """
    document = store.current_document(side, original)
    return export_document(document, output_dir, source_filename, pretty=pretty)
