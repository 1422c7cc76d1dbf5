"""Mixins for the TUI application."""

from catalog_compare.tui.mixins.dual_pane import DualPaneMixin
from catalog_compare.tui.mixins.export import ExportMixin
from catalog_compare.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DualPaneMixin",
    "ExportMixin",
    "VimNavigationMixin",
]
