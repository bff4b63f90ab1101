"""
Configuration loading for layerscope.

Settings are read from a YAML file. Only the ``keybinding`` section is
consumed today; every entry maps an action name to a key string:

    keybinding:
      page-up: pgup
      page-down: pgdn
      compare-all: ctrl+a
      compare-layer: ctrl+l

The file is looked up in this order when no explicit path is given:
    1. $LAYERSCOPE_CONFIG
    2. $XDG_CONFIG_HOME/layerscope/config.yaml
    3. ~/.layerscope.yaml
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from layerscope.tui.keybinding import KeyBinding, KeyBindingError

logger = logging.getLogger(__name__)

KEYBINDING_SECTION = "keybinding"

DEFAULT_KEYBINDINGS: dict[str, str] = {
    "page-up": "pgup",
    "page-down": "pgdn",
    "compare-all": "ctrl+a",
    "compare-layer": "ctrl+l",
}

DEFAULT_CONFIG: dict[str, Any] = {KEYBINDING_SECTION: DEFAULT_KEYBINDINGS}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or parsed."""


class KeyBindingConfig:
    """Read-only view over loaded settings that resolves key bindings."""

    def __init__(self, settings: Mapping[str, Any] | None = None) -> None:
        """Initialize the config.

        Args:
            settings: The settings mapping. Used as-is, without defaults.
        """
        self._settings: Mapping[str, Any] = settings or {}

    @property
    def settings(self) -> Mapping[str, Any]:
        """Return the underlying settings mapping."""
        return self._settings

    def get_key_binding(self, name: str) -> KeyBinding:
        """Resolve a named key binding.

        Args:
            name: The action name, either "page-up" or "keybinding.page-up".

        Returns:
            The parsed KeyBinding.

        Raises:
            KeyBindingError: If the entry is absent, not a string, or malformed.
        """
        prefix = f"{KEYBINDING_SECTION}."
        key = name[len(prefix):] if name.startswith(prefix) else name

        section = self._settings.get(KEYBINDING_SECTION)
        if not isinstance(section, Mapping) or key not in section:
            raise KeyBindingError(f"no key binding configured for '{key}'")

        value = section[key]
        if not isinstance(value, str):
            raise KeyBindingError(
                f"key binding '{key}' must be a string, got {type(value).__name__}"
            )
        return KeyBinding.parse(value)


def default_config_path() -> Path | None:
    """Return the first existing config file from the standard locations."""
    candidates: list[Path] = []
    env_path = os.environ.get("LAYERSCOPE_CONFIG")
    if env_path:
        candidates.append(Path(env_path))
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        candidates.append(Path(xdg_home) / "layerscope" / "config.yaml")
    candidates.append(Path.home() / ".layerscope.yaml")

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping at the top level")
    return data


def load_config(path: str | os.PathLike[str] | None = None) -> KeyBindingConfig:
    """Load settings, layering the user's file over the defaults.

    Args:
        path: Explicit config file. When None, the standard locations are
              searched and a missing file means defaults only.

    Returns:
        A KeyBindingConfig over the merged settings.

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    settings = copy.deepcopy(DEFAULT_CONFIG)

    config_path = Path(path) if path is not None else default_config_path()
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return KeyBindingConfig(settings)

    user_settings = _read_yaml(config_path)
    logger.info("Loaded config from %s", config_path)

    user_bindings = user_settings.pop(KEYBINDING_SECTION, None)
    if user_bindings is not None and not isinstance(user_bindings, dict):
        raise ConfigError(f"'{KEYBINDING_SECTION}' in {config_path} must be a mapping")

    settings.update(user_settings)
    settings[KEYBINDING_SECTION].update(user_bindings or {})
    return KeyBindingConfig(settings)
