"""
Vim Navigation Mixin for vim-style keybindings on layer screens.

Provides j/k navigation by delegating to the focused LayerList's own
cursor methods, so vim keys follow the same selection rules as the
arrow keys.
"""

from __future__ import annotations

from textual.binding import Binding

from layerscope.tui.widgets.layer_list import LayerList


class VimNavigationMixin:
    """Mixin providing vim-style navigation keybindings.

    This mixin adds vim keybindings that delegate to the focused widget:
    - j/k: Move the layer selection down/up

    Usage:
        class MyScreen(VimNavigationMixin, Screen):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
    ]

    def _get_navigable_widget(self) -> LayerList | None:
        """Get the currently focused widget if it supports navigation.

        Returns:
            The focused widget if it's a LayerList, otherwise None.
        """
        focused = self.focused
        if isinstance(focused, LayerList):
            return focused
        return None

    def action_vim_down(self) -> None:
        """Move the selection down (vim j key)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.cursor_down()

    def action_vim_up(self) -> None:
        """Move the selection up (vim k key)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.cursor_up()
