"""
Key binding parsing and matching.

Bindings are written in configuration as key names, optionally with
modifiers, and several alternatives may be separated by commas:

    page-up: "pgup"
    compare-all: "ctrl+a"
    page-down: "pgdn, ctrl+d"

Parsed keys use Textual's key naming so they compare directly against
``events.Key.key`` and its aliases.
"""

from __future__ import annotations

from dataclasses import dataclass

from textual import events

# Config spellings that differ from Textual key names
KEY_ALIASES: dict[str, str] = {
    "pgup": "pageup",
    "pgdn": "pagedown",
    "pgdown": "pagedown",
    "esc": "escape",
    "return": "enter",
    "del": "delete",
    "ins": "insert",
    "spacebar": "space",
}

MODIFIERS = ("ctrl", "shift", "alt", "meta", "super", "hyper")


class KeyBindingError(ValueError):
    """Raised when a key binding is missing or cannot be parsed."""


def _normalize_key(text: str) -> str:
    """Normalize one key spec such as 'Ctrl+PgUp' to 'ctrl+pageup'.

    Raises:
        KeyBindingError: If the spec is empty or uses an unknown modifier.
    """
    parts = [part.strip() for part in text.split("+")]
    if any(not part for part in parts):
        raise KeyBindingError(f"malformed key '{text}'")

    *modifiers, key = parts
    modifiers = [modifier.lower() for modifier in modifiers]
    for modifier in modifiers:
        if modifier not in MODIFIERS:
            raise KeyBindingError(f"unknown modifier '{modifier}' in '{text}'")

    # Single characters keep their case so 'G' and 'g' stay distinct
    if len(key) > 1:
        key = key.lower()
        key = KEY_ALIASES.get(key, key)
    elif modifiers:
        key = key.lower()
    return "+".join([*modifiers, key])


@dataclass(frozen=True)
class KeyBinding:
    """An immutable set of keys that trigger one action.

    Attributes:
        source: The configuration string the binding was parsed from.
        keys: Normalized Textual key names.
    """

    source: str
    keys: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> KeyBinding:
        """Parse a comma separated list of keys.

        Args:
            text: The configured key string, e.g. "ctrl+u, pgup".

        Returns:
            The parsed binding.

        Raises:
            KeyBindingError: If the string is empty or any key is malformed.
        """
        if not isinstance(text, str) or not text.strip():
            raise KeyBindingError(f"empty key binding {text!r}")
        keys = tuple(_normalize_key(part) for part in text.split(","))
        return cls(source=text, keys=keys)

    def match(self, event: events.Key) -> bool:
        """Return True if the key event is one of the bound keys."""
        if event.key in self.keys:
            return True
        return any(alias in self.keys for alias in event.aliases)

    def __str__(self) -> str:
        return ", ".join(self.keys)
