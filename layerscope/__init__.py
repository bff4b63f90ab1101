"""
layerscope - browse image layers in a terminal UI.

Usage:
    layerscope layers.json
    python -m layerscope.tui.app layers.jsonl --config ~/.layerscope.yaml
"""

__version__ = "0.1.0"
