"""
Export Mixin for writing an edited catalog side from a screen.

Provides:
- _get_output_dir(): Get output directory from app or default
- _export_side(): Materialize one side and write it, notifying the user

Usage:
    class MyScreen(ExportMixin, Screen):
        def action_export(self):
            self._export_side(Side.RIGHT, store, original, "fr.json")
"""

from __future__ import annotations

import logging
from typing import Any

from catalog_compare.config import DEFAULT_OUTPUT_DIR
from catalog_compare.data_formats import export_side
from catalog_compare.engine import EditStore, Side

logger = logging.getLogger(__name__)


class ExportMixin:
    """Mixin providing catalog export helpers."""

    def _get_output_dir(self) -> str:
        """Get the output directory from app or use default."""
        output_dir = getattr(self.app, "output_dir", None)
        if not output_dir:
            output_dir = DEFAULT_OUTPUT_DIR
        return output_dir

    def _export_side(
        self,
        store: EditStore,
        side: Side,
        original: dict[str, Any],
        source_filename: str,
    ) -> str | None:
        """Export ``side`` with its pending edits applied.

        Returns:
            The written path, or None if the write failed.
        """
        output_dir = self._get_output_dir()
        try:
            path = export_side(
                store,
                side,
                original,
                output_dir=output_dir,
                source_filename=source_filename,
            )
        except OSError as e:
            logger.error("Export of %s side failed: %s", side.value, e)
            self.notify(f"Export failed: {e}", severity="error")
            return None

        self.notify(f"Exported to {path}")
        return path
