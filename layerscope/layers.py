"""
Layer records and loaders.

A layer file is either a JSON document (an array of layer objects, or an
object with a ``layers`` array) or a JSONL file with one layer per line.

Layer object fields:
    - digest (or id): Content digest of the layer
    - size: Size in bytes (default 0)
    - command: The build command that produced the layer (default "")
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Iterator

# Size column width of a printable layer row
SIZE_COLUMN_WIDTH = 7

# Number of digest characters shown for the base layer
SHORT_DIGEST_LENGTH = 12

SUPPORTED_EXTENSIONS = (".json", ".jsonl")


@dataclass(frozen=True)
class Layer:
    """A single image layer as shown in the layer list."""

    index: int
    digest: str
    size: int = 0
    command: str = ""

    @property
    def short_digest(self) -> str:
        """Return the digest without its algorithm prefix, shortened."""
        _, _, value = self.digest.rpartition(":")
        return value[:SHORT_DIGEST_LENGTH]

    def __str__(self) -> str:
        size = format_size(self.size).rjust(SIZE_COLUMN_WIDTH)
        if self.index == 0:
            return f"{size}  FROM {self.short_digest}"
        return f"{size}  {self.command}"


def format_size(num_bytes: int) -> str:
    """
    Format a byte count with decimal units.

    Args:
        num_bytes: The size in bytes.

    Returns:
        A short human readable string.

    Examples:
        >>> format_size(0)
        '0 B'
        >>> format_size(1200)
        '1.2 kB'
        >>> format_size(45_000_000)
        '45 MB'
    """
    if num_bytes < 1000:
        return f"{num_bytes} B"
    value = float(num_bytes)
    for unit in ("kB", "MB", "GB", "TB", "PB"):
        value /= 1000
        if value < 1000 or unit == "PB":
            break
    if value < 10:
        return f"{value:.1f} {unit}"
    return f"{value:.0f} {unit}"


def _layer_from_record(index: int, record: dict[str, Any]) -> Layer:
    """Build a Layer from one decoded record."""
    if not isinstance(record, dict):
        raise ValueError(f"Layer {index} must be an object, got {type(record).__name__}")
    digest = record.get("digest") or record.get("id") or ""
    size = record.get("size") or 0
    command = record.get("command") or ""
    return Layer(index=index, digest=str(digest), size=int(size), command=str(command))


def _iter_json(filename: str) -> Iterator[dict[str, Any]]:
    with open(filename, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("layers")
    if not isinstance(data, list):
        raise ValueError(
            f"Expected a JSON array of layers or an object with a 'layers' array in {filename}"
        )
    yield from data


def _iter_jsonl(filename: str) -> Iterator[dict[str, Any]]:
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield json.loads(line)


def load_layers(filename: str) -> list[Layer]:
    """Load every layer from a JSON or JSONL file.

    Args:
        filename: Path to the layer file.

    Returns:
        The layers in file order, indexed from 0.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is unsupported or a layer is malformed.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext == ".json":
        records = _iter_json(filename)
    elif ext == ".jsonl":
        records = _iter_jsonl(filename)
    else:
        raise ValueError(
            f"Unsupported layer file extension '{ext}'. "
            f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return [_layer_from_record(idx, record) for idx, record in enumerate(records)]
