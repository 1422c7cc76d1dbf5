"""TUI widgets for the catalog comparison viewer."""

from catalog_compare.tui.widgets.catalog_tree_panel import CatalogTreePanel, build_node_label
from catalog_compare.tui.widgets.diff_indicator import (
    format_diff_summary,
    get_node_diff_class,
    get_node_diff_type,
    get_node_style,
)
from catalog_compare.tui.widgets.edit_value_modal import EditValueModal, parse_edit_value
from catalog_compare.tui.widgets.field_detail_modal import FieldDetailModal

__all__ = [
    # Catalog tree panel
    "CatalogTreePanel",
    "build_node_label",
    # Modals
    "EditValueModal",
    "FieldDetailModal",
    "parse_edit_value",
    # Diff indicator functions
    "format_diff_summary",
    "get_node_diff_class",
    "get_node_diff_type",
    "get_node_style",
]
