"""Mixins for the TUI application."""

from layerscope.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "VimNavigationMixin",
]
