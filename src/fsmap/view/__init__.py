"""View layer for fsmap.

This module provides the rendering and navigation components:

- ViewBox: Pan/zoom model of the visible canvas rectangle
- GraphCanvas: QGraphicsView painting nodes and edges (fsmap.view.canvas)
- NodeItem, EdgeItem, HomeItem: Scene items (fsmap.view.items)
- MainWindow: Main application window (fsmap.view.main_window)
- QtTextMeasurer: Label measurement via Qt font metrics (fsmap.view.metrics)

The Qt widgets are imported from their modules directly so the view
box can be used without a display.
"""

from fsmap.view.camera import MAX_ZOOM, MIN_ZOOM, ViewBox, ViewBoxState

__all__ = [
    "MAX_ZOOM",
    "MIN_ZOOM",
    "ViewBox",
    "ViewBoxState",
]
