"""
Layer selection state shared by the layer list and the details panel.

Compare Modes:
    - SINGLE_LAYER: Only the selected layer is the comparison point
    - ALL_LAYERS: Every layer up to and including the selection is compared
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol, Sequence

logger = logging.getLogger(__name__)


class CompareMode(Enum):
    """How the selected layer is compared against the layers below it."""

    SINGLE_LAYER = "single_layer"
    ALL_LAYERS = "all_layers"


class LayersViewModel(Protocol):
    """Capabilities the layer list needs from its view model."""

    def set_layer_index(self, index: int) -> bool: ...

    def get_printable_layers(self) -> Sequence[Any]: ...

    def switch_mode(self) -> None: ...

    def get_mode(self) -> CompareMode: ...


class LayerSetState:
    """View model over an ordered list of layers.

    Attributes:
        layers: The layers, bottom (base) layer first.
        layer_index: Index of the selected layer.
        compare_mode: Current compare mode.
        compare_start_index: First layer of the comparison range.
    """

    def __init__(
        self,
        layers: Sequence[Any],
        compare_mode: CompareMode = CompareMode.SINGLE_LAYER,
        compare_start_index: int = 0,
    ) -> None:
        self.layers = list(layers)
        self.layer_index = 0
        self.compare_mode = compare_mode
        self.compare_start_index = compare_start_index

    def set_layer_index(self, index: int) -> bool:
        """Select the layer at index.

        Args:
            index: The requested layer index.

        Returns:
            True if the index is in range and was applied, False otherwise.
        """
        if 0 <= index < len(self.layers):
            self.layer_index = index
            return True
        return False

    def get_printable_layers(self) -> list[Any]:
        """Return the layers in display order."""
        return self.layers

    def switch_mode(self) -> None:
        """Flip between single-layer and all-layers comparison."""
        if self.compare_mode is CompareMode.SINGLE_LAYER:
            self.compare_mode = CompareMode.ALL_LAYERS
        else:
            self.compare_mode = CompareMode.SINGLE_LAYER
        logger.info("Compare mode switched to %s", self.compare_mode.value)

    def get_mode(self) -> CompareMode:
        """Return the current compare mode."""
        return self.compare_mode

    @property
    def current_layer(self) -> Any | None:
        """Return the selected layer, or None when there are no layers."""
        if 0 <= self.layer_index < len(self.layers):
            return self.layers[self.layer_index]
        return None

    def get_compare_indexes(self) -> tuple[int, int, int, int]:
        """Return the layer ranges that make up the comparison.

        The bottom range is the baseline, the top range holds the changes
        being inspected.

        Returns:
            (bottom_start, bottom_stop, top_start, top_stop), all inclusive.
        """
        bottom_start = self.compare_start_index
        top_stop = self.layer_index

        if self.layer_index == self.compare_start_index:
            bottom_stop = self.layer_index
            top_start = self.layer_index
        elif self.compare_mode is CompareMode.SINGLE_LAYER:
            bottom_stop = self.layer_index - 1
            top_start = self.layer_index
        else:
            bottom_stop = self.compare_start_index
            top_start = self.compare_start_index + 1

        return bottom_start, bottom_stop, top_start, top_stop
