"""
Catalog Compare.

Compare two hierarchical JSON catalogs (typically localization files),
reconcile them into one tree, and apply edits to either side.

Components:
    - engine: Key path codec, key counter, structural diff, tree
      reconciler and edit store
    - data_formats: Catalog loading, validation, sanitization and export
    - main: Command-line interface
    - tui: Textual side-by-side comparison viewer
"""

__version__ = "0.1.0"
