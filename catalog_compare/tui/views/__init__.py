"""Screens for the catalog comparison viewer."""

from catalog_compare.tui.views.comparison_screen import ComparisonScreen

__all__ = [
    "ComparisonScreen",
]
