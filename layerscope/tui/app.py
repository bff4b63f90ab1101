"""
Main Textual application for the layer browser.

Loads a layer file and shows the layers screen, where a comparison layer
can be picked and the compare mode switched.

Supported Formats:
    - JSON (.json): Array of layer objects, or {"layers": [...]}
    - JSONL (.jsonl): One layer object per line
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding

from layerscope.config import ConfigError, load_config
from layerscope.layers import load_layers
from layerscope.logging_config import setup_logging
from layerscope.tui.keybinding import KeyBindingError
from layerscope.tui.viewmodels import CompareMode, LayerSetState
from layerscope.tui.views import LayersScreen
from layerscope.tui.widgets import LayerList

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LayerScopeApp(App):
    """A Textual app for browsing image layers."""

    TITLE = "layerscope"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        view_model: LayerSetState,
        layer_list: LayerList,
        filename: str = "",
    ):
        """Initialize the app.

        Args:
            view_model: The layer view model.
            layer_list: A LayerList already set up with key bindings.
            filename: Path of the loaded layer file, shown in the title.
        """
        super().__init__()
        self.view_model = view_model
        self.layer_list = layer_list
        self.filename = filename

    def on_mount(self) -> None:
        """Push the layers screen."""
        if self.filename:
            self.title = f"layerscope - {os.path.basename(self.filename)}"
        self.push_screen(LayersScreen(self.view_model, self.layer_list))


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Browse image layers in a terminal UI and pick a comparison layer. "
        "Supports JSON and JSONL layer files."
    )
    parser.add_argument(
        "path",
        help="Path to a layer file (JSON or JSONL)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: ~/.layerscope.yaml if present)",
    )
    parser.add_argument(
        "--compare-all",
        action="store_true",
        help="Start in all-layers compare mode",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=LOG_LEVELS,
        help="Log level (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application."""
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    # Verify the path exists
    if not os.path.exists(args.path):
        print(f"Error: Path not found: {args.path}", file=sys.stderr)
        sys.exit(1)

    if not os.access(args.path, os.R_OK):
        print(f"Error: Permission denied: {args.path}", file=sys.stderr)
        sys.exit(1)

    try:
        layers = load_layers(args.path)
    except (OSError, ValueError) as e:
        print(f"Error loading layers: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    mode = CompareMode.ALL_LAYERS if args.compare_all else CompareMode.SINGLE_LAYER
    view_model = LayerSetState(layers, compare_mode=mode)

    layer_list = LayerList(view_model, id="layer-list")
    try:
        layer_list.setup(config)
    except KeyBindingError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Loaded %d layers from %s", len(layers), args.path)
    app = LayerScopeApp(view_model, layer_list, filename=args.path)
    app.run()


if __name__ == "__main__":
    main()
