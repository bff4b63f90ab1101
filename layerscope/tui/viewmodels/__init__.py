"""View models backing the layerscope widgets."""

from layerscope.tui.viewmodels.layer_set_state import (
    CompareMode,
    LayerSetState,
    LayersViewModel,
)

__all__ = [
    "CompareMode",
    "LayerSetState",
    "LayersViewModel",
]
