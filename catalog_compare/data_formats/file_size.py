"""File size formatting for display."""

from __future__ import annotations

from catalog_compare.config import BYTES_PER_KB, BYTES_PER_MB


def format_file_size(size_bytes: int, decimals: int = 2) -> str:
    """Format file size for display (e.g., '1.25 KB').

    Args:
        size_bytes: Size in bytes.
        decimals: Number of decimal places for KB and MB.

    Returns:
        Human-readable size string.
    """
    if size_bytes == 0:
        return "0 Bytes"
    if size_bytes < BYTES_PER_KB:
        return f"{size_bytes} Bytes"
    if size_bytes < BYTES_PER_MB:
        return f"{size_bytes / BYTES_PER_KB:.{decimals}f} KB"
    return f"{size_bytes / BYTES_PER_MB:.{decimals}f} MB"
