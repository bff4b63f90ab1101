"""Pytest configuration and shared fixtures for layerscope tests."""

from __future__ import annotations

from typing import Any

import pytest

from layerscope.config import KeyBindingConfig
from layerscope.tui.viewmodels import LayerSetState
from tests.helpers import make_config, make_layers


@pytest.fixture
def ten_layers() -> LayerSetState:
    """Return a view model over ten layers."""
    return LayerSetState(make_layers(10))


@pytest.fixture
def empty_layers() -> LayerSetState:
    """Return a view model with no layers."""
    return LayerSetState([])


@pytest.fixture
def default_config() -> KeyBindingConfig:
    """Return a config holding the default bindings."""
    return make_config()


@pytest.fixture
def layer_records() -> list[dict[str, Any]]:
    """Return raw layer records as found in a layer file."""
    return [
        {"digest": "sha256:aaaabbbbccccddddeeee", "size": 5_600_000, "command": ""},
        {"id": "sha256:1111", "size": 1200, "command": "RUN apt-get update"},
        {"digest": "sha256:2222", "command": "COPY . /app"},
    ]
