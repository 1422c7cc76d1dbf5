"""
Vim Navigation Mixin for vim-style tree keybindings.

Provides j/k/g/G navigation that delegates to the focused Tree's native
cursor actions.

Note: h/l bindings for panel switching are defined in DualPaneMixin.
"""

from __future__ import annotations

from textual.binding import Binding
from textual.widgets import Tree


class VimNavigationMixin:
    """Mixin providing vim-style navigation keybindings.

    - j/k: Move cursor down/up
    - g: Jump to the root row
    - G: Jump to the last row

    For dual-pane screens, use with DualPaneMixin which provides h/l bindings.

    Usage:
        class MyScreen(VimNavigationMixin, Screen):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    def _get_navigable_widget(self) -> Tree | None:
        """Return the focused widget if it is a Tree, otherwise None."""
        focused = self.focused
        if isinstance(focused, Tree):
            return focused
        return None

    def action_vim_down(self) -> None:
        """Move cursor down (vim j key)."""
        tree = self._get_navigable_widget()
        if tree is not None:
            tree.action_cursor_down()

    def action_vim_up(self) -> None:
        """Move cursor up (vim k key)."""
        tree = self._get_navigable_widget()
        if tree is not None:
            tree.action_cursor_up()

    def action_vim_top(self) -> None:
        """Jump to the first row (vim g)."""
        tree = self._get_navigable_widget()
        if tree is None:
            return
        tree.move_cursor(tree.root)
        tree.scroll_home()

    def action_vim_bottom(self) -> None:
        """Jump to the last visible row (vim G)."""
        tree = self._get_navigable_widget()
        if tree is None:
            return
        if tree.last_line >= 0:
            tree.cursor_line = tree.last_line
        tree.scroll_end()
