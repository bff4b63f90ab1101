"""TUI widgets for the layer browser."""

from layerscope.tui.widgets.layer_details import LayerDetails, describe_selection
from layerscope.tui.widgets.layer_list import (
    LayerList,
    RowHighlight,
    render_row,
    row_highlight,
)

__all__ = [
    # Layer list
    "LayerList",
    "RowHighlight",
    "row_highlight",
    "render_row",
    # Details panel
    "LayerDetails",
    "describe_selection",
]
