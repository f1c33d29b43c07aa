"""Layout engine for the 2D file system diagram.

This module contains the algorithm that positions the visible part of
a directory tree as a ring of root entries with rows of children below
every expanded directory.
"""

from fsmap.layout.box import Bounds
from fsmap.layout.engine import LayoutConfig, LayoutEngine, LayoutResult
from fsmap.layout.position import Edge, PositionedNode
from fsmap.layout.sizer import EstimatedTextMeasurer, FontSpec, NodeSizer, TextMeasurer

__all__ = [
    "Bounds",
    "Edge",
    "EstimatedTextMeasurer",
    "FontSpec",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "NodeSizer",
    "PositionedNode",
    "TextMeasurer",
]
