"""
Layers Screen for browsing image layers.

Displays the layer list with a details panel for the selected layer.
Move the selection with the arrow keys or j/k, page with the configured
page keys, and switch compare mode with the configured compare keys.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header

from layerscope.tui.mixins import VimNavigationMixin
from layerscope.tui.viewmodels import LayerSetState
from layerscope.tui.widgets import LayerDetails, LayerList


class LayersScreen(VimNavigationMixin, Screen):
    """Screen that displays the layer list and the selected layer."""

    CSS = """
    LayersScreen {
        layout: vertical;
    }

    LayerList {
        border: solid $primary;
    }

    LayerList:focus {
        border: solid $secondary;
    }

    Header {
        dock: top;
    }

    Footer {
        dock: bottom;
    }
    """

    BINDINGS = VimNavigationMixin.VIM_BINDINGS

    def __init__(
        self,
        view_model: LayerSetState,
        layer_list: LayerList,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the LayersScreen.

        Args:
            view_model: The layer view model shared with the list.
            layer_list: A LayerList whose key bindings are already set up.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._view_model = view_model
        self._layer_list = layer_list

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield self._layer_list
        yield LayerDetails(id="layer-details")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the list and show the initial selection."""
        self.title = "Layers"
        self._layer_list.focus()
        self._refresh_details()

    def on_layer_list_layer_changed(self, message: LayerList.LayerChanged) -> None:
        """Keep the details panel in step with the list."""
        self._refresh_details()

    def _refresh_details(self) -> None:
        self.query_one("#layer-details", LayerDetails).show_state(self._view_model)
