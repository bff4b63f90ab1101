"""
Selection and scroll-window tracking for the layer list.

The viewport keeps two indexes in step with the view model's list:

    - selection_index: the layer currently marked as the comparison point
    - window_lower_bound: the first layer drawn on screen

Single steps scroll the window by at most one row so the selection sits on
the edge it moved towards. Page steps jump by a full viewport height and
only move the window when the selection would otherwise leave it. After a
height change the window is pulled back so the selection stays visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from layerscope.tui.viewmodels import LayersViewModel


@dataclass
class SelectionState:
    """Mutable selection and window position."""

    selection_index: int = 0
    window_lower_bound: int = 0


# observer(operation_name, state) called after each successful transition
ViewportObserver = Callable[[str, SelectionState], None]


class LayerViewport:
    """Viewport/selection engine over a LayersViewModel.

    Attributes:
        state: The current SelectionState.
    """

    def __init__(
        self,
        view_model: LayersViewModel,
        height: Callable[[], int],
        observer: ViewportObserver | None = None,
    ) -> None:
        """Initialize the viewport.

        Args:
            view_model: Supplies the layers and accepts index changes.
            height: Returns the current viewport height in rows.
            observer: Optional callback invoked after each state change.
        """
        self.view_model = view_model
        self._height = height
        self.observer = observer
        self.state = SelectionState()

    @property
    def selection_index(self) -> int:
        return self.state.selection_index

    @property
    def window_lower_bound(self) -> int:
        return self.state.window_lower_bound

    @property
    def height(self) -> int:
        """Current viewport height, never negative."""
        return max(0, self._height())

    @property
    def item_count(self) -> int:
        return len(self.view_model.get_printable_layers())

    def _notify(self, operation: str) -> None:
        if self.observer is not None:
            self.observer(operation, self.state)

    def _clamp_window(self) -> None:
        state = self.state
        height = self.height
        if height > 0 and state.selection_index >= state.window_lower_bound + height:
            state.window_lower_bound = state.selection_index - height + 1
        state.window_lower_bound = max(
            0, min(state.window_lower_bound, self.item_count - height)
        )

    def clamp(self) -> bool:
        """Pull the window back around the selection after a height change.

        Returns:
            True if the window moved.
        """
        before = self.state.window_lower_bound
        self._clamp_window()
        if self.state.window_lower_bound == before:
            return False
        self._notify("clamp")
        return True

    def move_up(self) -> bool:
        """Move the selection up one row.

        Returns:
            True if the selection moved.
        """
        state = self.state
        if state.selection_index <= 0:
            return False
        state.selection_index -= 1
        if state.selection_index < state.window_lower_bound:
            state.window_lower_bound -= 1
        self._clamp_window()
        self._notify("move_up")
        return True

    def move_down(self) -> bool:
        """Move the selection down one row.

        Returns:
            True if the selection moved.
        """
        state = self.state
        if state.selection_index + 1 >= self.item_count:
            return False
        state.selection_index += 1
        if state.selection_index - state.window_lower_bound >= self.height:
            state.window_lower_bound += 1
        self._clamp_window()
        self._notify("move_down")
        return True

    def page_up(self) -> bool:
        """Move the selection up by one viewport height.

        Returns:
            Whatever the view model reports for the new index. False for an
            empty list or a zero-height viewport.
        """
        height = self.height
        if self.item_count == 0 or height == 0:
            return False

        state = self.state
        state.selection_index = max(0, state.selection_index - height)
        if state.selection_index < state.window_lower_bound:
            state.window_lower_bound = state.selection_index
        self._clamp_window()
        self._notify("page_up")
        return self.view_model.set_layer_index(state.selection_index)

    def page_down(self) -> bool:
        """Move the selection down by one viewport height.

        The window is clamped so it never scrolls past the last layer.

        Returns:
            Whatever the view model reports for the new index. False for an
            empty list or a zero-height viewport.
        """
        height = self.height
        item_count = self.item_count
        if item_count == 0 or height == 0:
            return False

        state = self.state
        upper_bound_index = item_count - 1
        state.selection_index = min(state.selection_index + height, upper_bound_index)
        if state.selection_index >= state.window_lower_bound + height:
            state.window_lower_bound = min(
                state.selection_index, upper_bound_index - height + 1
            )
        self._clamp_window()
        self._notify("page_down")
        return self.view_model.set_layer_index(state.selection_index)

    def visible_range(self) -> range:
        """Return the layer indexes currently inside the viewport."""
        start = self.state.window_lower_bound
        stop = min(start + self.height, self.item_count)
        return range(start, max(start, stop))
