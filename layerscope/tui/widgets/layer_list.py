"""
Layer List widget for selecting the comparison layer.

Renders one layer per row inside a scrolling window and marks the
comparison state in a narrow gutter column:

    - The selected layer is drawn reversed across the whole row
    - Layers before the selection get a reversed, coloured gutter
    - Layers after the selection are drawn plain

Navigation:
    - up/left, down/right: Move the selection one layer
    - page-up, page-down: Move the selection one screen (configurable)
    - compare-all, compare-layer: Switch compare mode (configurable)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from rich.segment import Segment
from rich.style import Style
from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from layerscope.config import KeyBindingConfig
from layerscope.tui.keybinding import KeyBinding, KeyBindingError
from layerscope.tui.viewmodels import CompareMode, LayersViewModel
from layerscope.tui.viewport import LayerViewport, SelectionState

logger = logging.getLogger(__name__)

# Gutter drawn in front of every layer row
GUTTER = "  "

TEXT_COLOR = "white"

UP_KEYS = ("up", "left")
DOWN_KEYS = ("down", "right")

# Handler called with (layer_index, shortcut_key)
LayerListHandler = Callable[[int, str], None]


class RowHighlight(Enum):
    """How a row relates to the current comparison point."""

    SELECTED = "red"
    INCLUDED = "magenta"
    PASSED = "blue"
    NONE = "default"

    @property
    def color(self) -> str:
        return self.value


def row_highlight(index: int, selection_index: int, mode: CompareMode) -> RowHighlight:
    """Choose the highlight for the row at index.

    Args:
        index: The layer index of the row.
        selection_index: The selected layer index.
        mode: The current compare mode.

    Returns:
        SELECTED for the selection, INCLUDED for rows strictly between the
        base layer and the selection in all-layers mode, PASSED for any other
        row before the selection, NONE otherwise.
    """
    if index == selection_index:
        return RowHighlight.SELECTED
    if 0 < index < selection_index and mode is CompareMode.ALL_LAYERS:
        return RowHighlight.INCLUDED
    if index < selection_index:
        return RowHighlight.PASSED
    return RowHighlight.NONE


def render_row(text: str, highlight: RowHighlight, width: int) -> Strip:
    """Build the cells for one layer row.

    Args:
        text: The printable layer.
        highlight: The row's highlight.
        width: Row width in cells.

    Returns:
        A Strip exactly width cells wide.
    """
    selected = highlight is RowHighlight.SELECTED
    gutter_style = Style(color=highlight.color)
    if highlight is not RowHighlight.NONE:
        gutter_style += Style(reverse=True)
    text_style = Style(color=TEXT_COLOR, reverse=selected)

    strip = Strip([Segment(GUTTER, gutter_style), Segment(f" {text}", text_style)])
    return strip.adjust_cell_length(width, text_style if selected else None)


class LayerList(Widget, can_focus=True):
    """Scrollable list of layers with a movable comparison point."""

    DEFAULT_CSS = """
    LayerList {
        height: 1fr;
        width: 1fr;
    }
    """

    class LayerChanged(Message):
        """Posted after the selection or compare mode changes."""

        def __init__(self, index: int, mode: CompareMode) -> None:
            self.index = index
            self.mode = mode
            super().__init__()

    def __init__(
        self,
        view_model: LayersViewModel,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the layer list.

        Args:
            view_model: Supplies the layers and the compare mode.
            name: The widget name.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.view_model = view_model
        self.layer_viewport = LayerViewport(
            view_model,
            height=lambda: self.size.height,
            observer=self._log_transition,
        )
        self._key_actions: list[tuple[KeyBinding, Callable[[], bool]]] = []
        self._changed_handler: LayerListHandler | None = None

    @property
    def is_setup(self) -> bool:
        """Whether key bindings have been resolved."""
        return bool(self._key_actions)

    @property
    def selection_state(self) -> SelectionState:
        return self.layer_viewport.state

    @property
    def changed_callback(self) -> LayerListHandler | None:
        return self._changed_handler

    def set_changed_callback(self, handler: LayerListHandler) -> LayerList:
        """Register the handler called with (index, shortcut)."""
        self._changed_handler = handler
        return self

    def setup(self, config: KeyBindingConfig) -> LayerList:
        """Resolve the configurable key bindings.

        Bindings are only installed once every name resolves.

        Args:
            config: Source of the key bindings.

        Returns:
            This widget, for chaining.

        Raises:
            KeyBindingError: If any binding is missing or malformed.
        """
        binding_settings: list[tuple[str, Callable[[], bool]]] = [
            ("keybinding.page-up", self.page_selection_up),
            ("keybinding.page-down", self.page_selection_down),
            ("keybinding.compare-all", self.compare_all),
            ("keybinding.compare-layer", self.compare_layer),
        ]

        key_actions = []
        for name, action in binding_settings:
            try:
                binding = config.get_key_binding(name)
            except KeyBindingError as e:
                logger.error("Layer list setup failed during %s: %s", name, e)
                raise KeyBindingError(f"setup error during {name}: {e}") from e
            key_actions.append((binding, action))

        self._key_actions = key_actions
        return self

    def handle_input(
        self,
        event: events.Key,
        set_focus: Callable[[Widget], None] | None = None,
    ) -> bool:
        """Process one key event.

        Args:
            event: The key event.
            set_focus: Focus setter of the surrounding container. Unused,
                the list never moves focus itself.

        Returns:
            True if the event changed the selection or compare mode.
        """
        if not self.is_setup:
            return False

        if event.key in UP_KEYS:
            return self.cursor_up()
        if event.key in DOWN_KEYS:
            return self.cursor_down()

        for binding, action in self._key_actions:
            if binding.match(event) and action():
                self._after_change()
                return True
        return False

    def cursor_up(self) -> bool:
        """Select the previous layer."""
        index = self.layer_viewport.selection_index - 1
        if self.view_model.set_layer_index(index) and self.layer_viewport.move_up():
            self._after_change()
            return True
        return False

    def cursor_down(self) -> bool:
        """Select the next layer."""
        index = self.layer_viewport.selection_index + 1
        if self.view_model.set_layer_index(index) and self.layer_viewport.move_down():
            self._after_change()
            return True
        return False

    def page_selection_up(self) -> bool:
        """Page the selection up. False when it is already at the top."""
        logger.info("Layer page up")
        before = self.layer_viewport.selection_index
        return self.layer_viewport.page_up() and self.layer_viewport.selection_index != before

    def page_selection_down(self) -> bool:
        """Page the selection down. False when it is already at the bottom."""
        logger.info("Layer page down")
        before = self.layer_viewport.selection_index
        return self.layer_viewport.page_down() and self.layer_viewport.selection_index != before

    def compare_all(self) -> bool:
        """Switch to all-layers comparison. Only fires in single-layer mode."""
        if self.view_model.get_mode() is CompareMode.SINGLE_LAYER:
            self.view_model.switch_mode()
            return True
        return False

    def compare_layer(self) -> bool:
        """Switch to single-layer comparison. Only fires in all-layers mode."""
        if self.view_model.get_mode() is CompareMode.ALL_LAYERS:
            self.view_model.switch_mode()
            return True
        return False

    def _after_change(self) -> None:
        self.refresh()
        self.post_message(
            self.LayerChanged(self.layer_viewport.selection_index, self.view_model.get_mode())
        )

    def _log_transition(self, operation: str, state: SelectionState) -> None:
        logger.debug(
            "%s in layers: selection_index=%d window_lower_bound=%d",
            operation,
            state.selection_index,
            state.window_lower_bound,
        )

    def on_key(self, event: events.Key) -> None:
        """Dispatch key presses to navigation and bound actions."""
        if self.handle_input(event):
            event.stop()
            event.prevent_default()

    def on_resize(self, event: events.Resize) -> None:
        """Keep the selection inside the window when the height changes."""
        if self.layer_viewport.clamp():
            self.refresh()

    def on_focus(self, event: events.Focus) -> None:
        self.refresh()

    def on_blur(self, event: events.Blur) -> None:
        self.refresh()

    def render_line(self, y: int) -> Strip:
        """Render the layer drawn at row y of the viewport."""
        width = self.size.width
        layers = self.view_model.get_printable_layers()
        index = self.layer_viewport.window_lower_bound + y
        if y >= self.layer_viewport.height or index >= len(layers):
            return Strip.blank(width)

        highlight = row_highlight(
            index, self.layer_viewport.selection_index, self.view_model.get_mode()
        )
        return render_row(str(layers[index]), highlight, width)
