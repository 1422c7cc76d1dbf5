"""
TUI Catalog Comparison Viewer.

A Textual-based terminal UI for comparing two JSON catalogs in a
side-by-side view and editing either side.

Usage:
    python -m catalog_compare.tui.app locales/en.json locales/fr.json

Components:
    - CatalogCompareApp: Main application class
    - ComparisonScreen: Side-by-side comparison view
    - CatalogTreePanel: Synchronized reconciled tree widget
"""
