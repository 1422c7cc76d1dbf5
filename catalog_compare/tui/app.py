"""
Main Textual application for the Catalog Compare viewer.

Loads two JSON catalogs and shows them side by side, aligned key by key,
with diff colouring and per-side edits that can be exported.
"""

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding

from catalog_compare.config import DEFAULT_OUTPUT_DIR, MAX_FILE_SIZE, MAX_KEY_COUNT
from catalog_compare.data_formats import Catalog, CatalogLoadError, load_catalog
from catalog_compare.tui.views.comparison_screen import ComparisonScreen

logger = logging.getLogger(__name__)


class CatalogCompareApp(App):
    """A Textual app for comparing and editing two JSON catalogs."""

    TITLE = "Catalog Compare"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    /* Comparison screen layout */
    #comparison-container {
        height: 1fr;
    }

    #left-panel, #right-panel {
        width: 50%;
        border: solid $primary;
        padding: 0 1;
    }

    #left-panel.inactive, #right-panel.inactive {
        border: solid $primary-darken-3;
    }

    #left-panel {
        border-right: none;
    }

    .panel-header {
        dock: top;
        height: 3;
        background: $surface;
        border-bottom: solid $primary;
        text-align: center;
        text-style: bold;
        padding: 1;
    }

    #left-tree, #right-tree {
        height: 1fr;
    }

    /* Tree styling */
    Tree {
        background: $surface;
        padding: 1;
    }

    Tree > .tree--cursor {
        background: $secondary;
    }

    Tree > .tree--guides {
        color: $text-muted;
    }

    Static {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        left_path: str,
        right_path: str,
        output_dir: str | None = None,
        max_keys: int = MAX_KEY_COUNT,
        max_file_size: int = MAX_FILE_SIZE,
    ):
        """Initialize the app with two catalog files.

        Args:
            left_path: Path to the left catalog.
            right_path: Path to the right catalog.
            output_dir: Output directory for export operations.
            max_keys: Key count quota per catalog.
            max_file_size: Maximum catalog size in bytes.
        """
        super().__init__()
        self._left_path = left_path
        self._right_path = right_path
        self.output_dir = output_dir or DEFAULT_OUTPUT_DIR
        self._max_keys = max_keys
        self._max_file_size = max_file_size
        self.left: Catalog | None = None
        self.right: Catalog | None = None

    def on_mount(self) -> None:
        """Load both catalogs and push the comparison screen."""
        try:
            self.left = self._load(self._left_path)
            self.right = self._load(self._right_path)
        except CatalogLoadError as e:
            logger.error("Failed to load catalog: %s", e)
            self.exit(return_code=1, message=f"Error: {e}")
            return

        self.title = f"Catalog Compare - {self.left.file_name} ↔ {self.right.file_name}"
        self.push_screen(ComparisonScreen(self.left, self.right))

    def _load(self, path: str) -> Catalog:
        return load_catalog(path, max_file_size=self._max_file_size, max_keys=self._max_keys)


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare two JSON localization catalogs side by side in a terminal UI."
    )
    parser.add_argument("left", help="Left catalog (JSON)")
    parser.add_argument("right", help="Right catalog (JSON)")
    parser.add_argument(
        "-O",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for export operations (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--max-keys",
        type=int,
        default=MAX_KEY_COUNT,
        help=f"Maximum keys per catalog (default: {MAX_KEY_COUNT})",
    )
    parser.add_argument(
        "--max-file-size",
        type=int,
        default=MAX_FILE_SIZE,
        help=f"Maximum catalog size in bytes (default: {MAX_FILE_SIZE})",
    )
    args = parser.parse_args()

    # Verify both paths exist
    for path in (args.left, args.right):
        if not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)

        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    app = CatalogCompareApp(
        left_path=args.left,
        right_path=args.right,
        output_dir=args.output_dir,
        max_keys=args.max_keys,
        max_file_size=args.max_file_size,
    )
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
