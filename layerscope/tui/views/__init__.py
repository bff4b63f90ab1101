"""Screen views for the layer browser."""

from layerscope.tui.views.layers_screen import LayersScreen

__all__ = ["LayersScreen"]
