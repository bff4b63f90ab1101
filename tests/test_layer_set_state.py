"""Tests for the LayerSetState view model."""

from __future__ import annotations

import pytest

from layerscope.tui.viewmodels import CompareMode, LayerSetState
from tests.helpers import make_layers


class TestSetLayerIndex:
    """Tests for set_layer_index."""

    def test_accepts_in_range(self, ten_layers):
        """An index inside the list is applied."""
        assert ten_layers.set_layer_index(7) is True
        assert ten_layers.layer_index == 7

    @pytest.mark.parametrize("index", [-1, 10, 99])
    def test_rejects_out_of_range(self, ten_layers, index):
        """An index outside the list is rejected and nothing changes."""
        ten_layers.set_layer_index(3)
        assert ten_layers.set_layer_index(index) is False
        assert ten_layers.layer_index == 3

    def test_empty_rejects_zero(self, empty_layers):
        """With no layers even index 0 is rejected."""
        assert empty_layers.set_layer_index(0) is False


class TestCompareMode:
    """Tests for mode switching."""

    def test_default_mode(self, ten_layers):
        """New state compares a single layer."""
        assert ten_layers.get_mode() is CompareMode.SINGLE_LAYER

    def test_switch_round_trip(self, ten_layers):
        """Two switches return to the original mode."""
        ten_layers.switch_mode()
        assert ten_layers.get_mode() is CompareMode.ALL_LAYERS
        ten_layers.switch_mode()
        assert ten_layers.get_mode() is CompareMode.SINGLE_LAYER


class TestCurrentLayer:
    """Tests for current_layer."""

    def test_returns_selected(self, ten_layers):
        """current_layer follows layer_index."""
        ten_layers.set_layer_index(4)
        assert ten_layers.current_layer.index == 4

    def test_none_when_empty(self, empty_layers):
        """current_layer is None without layers."""
        assert empty_layers.current_layer is None


class TestCompareIndexes:
    """Tests for get_compare_indexes."""

    def test_at_start_index(self, ten_layers):
        """Selecting the start layer compares it with itself."""
        assert ten_layers.get_compare_indexes() == (0, 0, 0, 0)

    def test_single_layer_mode(self, ten_layers):
        """Single-layer mode compares the selection with everything below it."""
        ten_layers.set_layer_index(5)
        assert ten_layers.get_compare_indexes() == (0, 4, 5, 5)

    def test_all_layers_mode(self):
        """All-layers mode compares the start layer with everything above it."""
        state = LayerSetState(make_layers(10), compare_mode=CompareMode.ALL_LAYERS)
        state.set_layer_index(5)
        assert state.get_compare_indexes() == (0, 0, 1, 5)

    def test_custom_start_index(self):
        """A later start index shifts the bottom range."""
        state = LayerSetState(
            make_layers(10), compare_mode=CompareMode.ALL_LAYERS, compare_start_index=2
        )
        state.set_layer_index(6)
        assert state.get_compare_indexes() == (2, 2, 3, 6)
