"""
Dual Pane Mixin for left/right panel switching functionality.

Provides the panel switching behavior of the comparison screen:
- action_switch_panel(): Toggle between left and right panels
- action_vim_left(): Switch focus to left panel (vim h key)
- action_vim_right(): Switch focus to right panel (vim l key)
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement

Usage:
    # IMPORTANT: DualPaneMixin MUST come before VimNavigationMixin in MRO
    # so that action_vim_left/right (panel switching) takes precedence.
    class MyDualPaneScreen(DualPaneMixin, VimNavigationMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches

from catalog_compare.engine import Side
from catalog_compare.tui.widgets.catalog_tree_panel import CatalogTreePanel
from catalog_compare.tui.widgets.field_detail_modal import FieldDetailModal


class DualPaneMixin:
    """Mixin for screens with left/right panel switching.

    Subclasses must implement _focus_active_widget() and
    _panel_label(side).

    Class Attributes:
        DUAL_PANE_BINDINGS: All bindings for dual-pane screens (includes
            vim j/k/g/G navigation plus panel switching).
    """

    DUAL_PANE_BINDINGS = [
        # Vim navigation (j/k/g/G from VimNavigationMixin)
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
        # Panel switching (h/l vim-style + arrow keys + tab)
        Binding("h", "vim_left", "Left Panel", show=False),
        Binding("l", "vim_right", "Right Panel", show=False),
        Binding("left", "vim_left", "Left Panel", show=False),
        Binding("right", "vim_right", "Right Panel", show=False),
        Binding("tab", "switch_panel", "Switch Panel", show=True),
        # Common actions
        Binding("q", "quit", "Quit", show=False),
        Binding("m", "show_field_detail", "View Field", show=True),
    ]

    _active_panel: Side = Side.LEFT
    """Currently active panel."""

    @property
    def active_side(self) -> Side:
        return self._active_panel

    @property
    def is_left_active(self) -> bool:
        return self._active_panel is Side.LEFT

    @property
    def is_right_active(self) -> bool:
        return self._active_panel is Side.RIGHT

    def _activate(self, side: Side) -> None:
        self._active_panel = side
        self._update_panel_styles()
        self._focus_active_widget()

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels."""
        self._activate(self._active_panel.other)

    def action_vim_left(self) -> None:
        """Switch to left panel (vim h key)."""
        if self._active_panel is not Side.LEFT:
            self._activate(Side.LEFT)

    def action_vim_right(self) -> None:
        """Switch to right panel (vim l key)."""
        if self._active_panel is not Side.RIGHT:
            self._activate(Side.RIGHT)

    def action_quit(self) -> None:
        """Exit the application."""
        self.app.exit()

    def get_tree(self, side: Side) -> CatalogTreePanel:
        """Return the tree panel for ``side``."""
        return self.query_one(f"#{side.value}-tree", CatalogTreePanel)

    def action_show_field_detail(self) -> None:
        """Show the field detail modal for the cursor row of the active panel."""
        self.get_tree(self._active_panel).emit_field_requested()

    def on_catalog_tree_panel_field_requested(
        self, message: CatalogTreePanel.FieldRequested
    ) -> None:
        """Show the full value of the requested row in a modal."""
        side = Side.LEFT if message.panel_id == "left-tree" else Side.RIGHT
        self.app.push_screen(
            FieldDetailModal(
                key_path=message.key_path,
                value=message.value,
                panel_label=self._panel_label(side),
                present=message.present,
            )
        )

    def _panel_label(self, side: Side) -> str:
        """Label shown for ``side`` in modals; subclasses may override."""
        return side.value.capitalize()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on #left-panel and #right-panel."""
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, side in [(left, Side.LEFT), (right, Side.RIGHT)]:
            if side is self._active_panel:
                panel.remove_class("inactive")
                panel.add_class("active")
            else:
                panel.remove_class("active")
                panel.add_class("inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel.

        Subclasses must implement this method.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )
