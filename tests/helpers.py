"""Builders shared by the layerscope tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from layerscope.config import DEFAULT_KEYBINDINGS, KeyBindingConfig
from layerscope.layers import Layer


def make_layers(count: int) -> list[Layer]:
    """Create count layers with predictable digests and commands."""
    return [
        Layer(
            index=idx,
            digest=f"sha256:{idx:064x}",
            size=1000 * (idx + 1),
            command=f"RUN step-{idx}",
        )
        for idx in range(count)
    ]


def make_config(**overrides: Any) -> KeyBindingConfig:
    """Create a config with the default bindings, overridden per keyword.

    Keyword names use underscores in place of dashes. A value of None
    removes the binding.
    """
    bindings: dict[str, Any] = dict(DEFAULT_KEYBINDINGS)
    for key, value in overrides.items():
        name = key.replace("_", "-")
        if value is None:
            bindings.pop(name, None)
        else:
            bindings[name] = value
    return KeyBindingConfig({"keybinding": bindings})


def write_jsonl(path: Path, records: list[dict[str, Any]]) -> None:
    """Helper to write records to a JSONL file."""
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record) + "\n")


class FixedHeight:
    """Callable viewport height that tests can change."""

    def __init__(self, height: int) -> None:
        self.height = height

    def __call__(self) -> int:
        return self.height
