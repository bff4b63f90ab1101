"""
Layer browser TUI.

A Textual-based terminal UI for walking through the layers of an image
and choosing which layers take part in a comparison.

Usage:
    python -m layerscope.tui.app layers.json

Components:
    - LayerScopeApp: Main application class
    - LayersScreen: Layer list with a details panel
    - LayerList: Scrollable layer list with compare marking
    - LayerViewport: Selection and scroll-window engine
    - LayerSetState: Layer view model
"""
