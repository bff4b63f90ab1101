"""
Layer Details panel showing the selected layer and comparison ranges.
"""

from __future__ import annotations

from textual.widgets import Static

from layerscope.layers import Layer, format_size
from layerscope.tui.viewmodels import CompareMode, LayerSetState

MODE_LABELS = {
    CompareMode.SINGLE_LAYER: "Single layer",
    CompareMode.ALL_LAYERS: "All layers",
}


def describe_selection(state: LayerSetState) -> str:
    """Build the details text for the current selection.

    Args:
        state: The layer view model.

    Returns:
        Multi-line text for the details panel.
    """
    layer = state.current_layer
    if layer is None:
        return "No layers loaded"

    bottom_start, bottom_stop, top_start, top_stop = state.get_compare_indexes()
    lines = [f"Layer:   {state.layer_index + 1} of {len(state.layers)}"]
    if isinstance(layer, Layer):
        lines.append(f"Digest:  {layer.digest or 'unknown'}")
        lines.append(f"Size:    {format_size(layer.size)}")
        lines.append(f"Command: {layer.command or '-'}")
    else:
        lines.append(f"Layer:   {layer}")
    lines.append(f"Mode:    {MODE_LABELS[state.get_mode()]}")
    lines.append(
        f"Compare: layers {bottom_start}-{bottom_stop} against {top_start}-{top_stop}"
    )
    return "\n".join(lines)


class LayerDetails(Static):
    """Static panel that mirrors the layer view model."""

    DEFAULT_CSS = """
    LayerDetails {
        height: auto;
        border-top: solid $primary;
        padding: 0 1;
    }
    """

    def show_state(self, state: LayerSetState) -> None:
        """Refresh the panel from the view model."""
        self.update(describe_selection(state))
