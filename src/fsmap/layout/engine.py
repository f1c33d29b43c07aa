"""Layout engine for the 2D file system diagram."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import numpy as np

from fsmap.errors import LayoutError, ProviderError
from fsmap.layout.box import Bounds
from fsmap.layout.position import Edge, PositionedNode
from fsmap.layout.sizer import EstimatedTextMeasurer, FontSpec, NodeSizer, TextMeasurer
from fsmap.model.entry import Entry, HIDDEN_MARKER
from fsmap.model.expansion import ExpansionState
from fsmap.model.provider import HierarchyProvider


logger = logging.getLogger(__name__)


class ExpansionLookup(Protocol):
    """Anything that can answer whether a path is expanded."""

    def is_expanded(self, path: Path | str) -> bool: ...


@dataclass
class LayoutConfig:
    """Configuration for the layout engine.

    Attributes:
        vertical_spacing: Base vertical unit; the ring radius and row drop are
            ``vertical_spacing * spacing_scale``
        min_horizontal_spacing: Base gap unit between siblings in a row
        spacing_scale: Multiplier applied to both spacing units
        row_offset: Extra drop added to every row below its parent
        node_height: Fixed height of every node box
        node_padding: Space added on both sides of a measured label
        min_node_width: Smallest node width
        edge_droop: Upward offset of an edge's control point from the
            midpoint (defaults to ``vertical_spacing``)
        bounds_margin: Margin added around the final bounding box
        font: Font the labels are measured in
        hidden_marker: Name prefix of hidden entries
        show_hidden: Keep hidden entries instead of filtering them out
        max_depth: Deepest node depth drawn (None for unlimited)
    """

    vertical_spacing: float = 250.0
    min_horizontal_spacing: float = 150.0
    spacing_scale: float = 20.0
    row_offset: float = 100.0
    node_height: float = 200.0
    node_padding: float = 400.0
    min_node_width: float = 2500.0
    edge_droop: float | None = None
    bounds_margin: float = 100.0
    font: FontSpec = field(default_factory=FontSpec)
    hidden_marker: str = HIDDEN_MARKER
    show_hidden: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.vertical_spacing <= 0:
            raise LayoutError(f"vertical_spacing must be positive, got {self.vertical_spacing}")
        if self.min_horizontal_spacing < 0:
            raise LayoutError(f"min_horizontal_spacing must not be negative, got {self.min_horizontal_spacing}")
        if self.spacing_scale <= 0:
            raise LayoutError(f"spacing_scale must be positive, got {self.spacing_scale}")
        if self.node_height <= 0 or self.min_node_width <= 0:
            raise LayoutError("node dimensions must be positive")
        if self.max_depth is not None and self.max_depth < 0:
            raise LayoutError(f"max_depth must not be negative, got {self.max_depth}")
        if self.edge_droop is None:
            self.edge_droop = self.vertical_spacing

    @property
    def ring_radius(self) -> float:
        """Radius of the circle the root's entries are placed on."""
        return self.vertical_spacing * self.spacing_scale

    @property
    def row_drop(self) -> float:
        """Vertical distance from a parent to its row of children."""
        return self.vertical_spacing * self.spacing_scale + self.row_offset

    @property
    def sibling_gap(self) -> float:
        """Horizontal gap between neighbouring nodes in a row."""
        return self.min_horizontal_spacing * self.spacing_scale


@dataclass
class LayoutResult:
    """Result of a layout pass.

    Attributes:
        root: Directory the pass started from
        origin: Canvas position of the root anchor
        nodes: Positioned nodes in placement order
        edges: Parent-to-child curves in placement order
        bounds: Padded bounding box of everything drawn
        failures: Directory listings that failed and were left out
    """

    root: Path
    origin: tuple[float, float] = (0.0, 0.0)
    nodes: list[PositionedNode] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    bounds: Bounds = field(default_factory=Bounds.empty)
    failures: list[ProviderError] = field(default_factory=list)

    def node_for(self, path: Path | str) -> PositionedNode | None:
        """Find the node drawn for a path."""
        path = Path(path)
        for node in self.nodes:
            if node.entry.path == path:
                return node
        return None

    def node_at(self, x: float, y: float) -> PositionedNode | None:
        """Find the topmost node containing a canvas point."""
        for node in reversed(self.nodes):
            if node.contains_point(x, y):
                return node
        return None

    def to_dict(self) -> dict:
        """Plain data form of the result (for JSON export)."""
        return {
            "root": str(self.root),
            "origin": list(self.origin),
            "nodes": [
                {
                    "name": n.entry.name,
                    "path": str(n.entry.path),
                    "is_directory": n.entry.is_directory,
                    "x": n.x,
                    "y": n.y,
                    "width": n.width,
                    "height": n.height,
                    "depth": n.depth,
                    "parent": list(n.parent_position),
                }
                for n in self.nodes
            ],
            "edges": [
                {"from": [e.x1, e.y1], "to": [e.x2, e.y2], "control": list(e.control_point)}
                for e in self.edges
            ],
            "bounds": {
                "min_x": self.bounds.min_x,
                "max_x": self.bounds.max_x,
                "min_y": self.bounds.min_y,
                "max_y": self.bounds.max_y,
            },
            "failures": [{"path": str(f.path), "reason": f.reason} for f in self.failures],
        }


@dataclass
class _Pass:
    """Collectors owned by exactly one ``layout`` invocation."""

    expansion: ExpansionLookup
    nodes: list[PositionedNode] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    failures: list[ProviderError] = field(default_factory=list)


class LayoutEngine:
    """Engine for calculating 2D positions for the visible part of a tree.

    The root's entries go on a ring around the origin; the children of
    every expanded directory go in a centred row below it. Each pass is
    computed from scratch: nothing is kept between calls except what the
    caller passes in.
    """

    def __init__(
        self,
        provider: HierarchyProvider,
        config: LayoutConfig | None = None,
        measurer: TextMeasurer | None = None,
        sizer: NodeSizer | None = None,
    ) -> None:
        """Initialize the layout engine.

        Args:
            provider: Source of directory listings
            config: Layout configuration (uses defaults if None)
            measurer: Text measurement backend used to build the sizer
            sizer: Node sizer (built from config and measurer if None)
        """
        self.provider = provider
        self.config = config or LayoutConfig()
        self.sizer = sizer or NodeSizer(
            measurer or EstimatedTextMeasurer(),
            font=self.config.font,
            padding=self.config.node_padding,
            min_width=self.config.min_node_width,
        )

    def layout(
        self,
        root: Path | str,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        expansion: ExpansionLookup | None = None,
    ) -> LayoutResult:
        """Calculate the layout of everything visible under root.

        Args:
            root: Directory whose entries form the ring
            origin_x: X coordinate of the root anchor
            origin_y: Y coordinate of the root anchor
            expansion: Expansion flags to read (all collapsed if None)

        Returns:
            LayoutResult with nodes, edges and padded bounds. Listing
            failures are recorded in ``failures`` and never raised.
        """
        start = time.perf_counter()
        root = Path(root)
        ctx = _Pass(expansion=expansion if expansion is not None else ExpansionState())

        bounds = Bounds.from_point(origin_x, origin_y)
        entries = self._visible_entries(root, ctx)
        if entries:
            bounds = bounds.merge(self._place_ring(entries, origin_x, origin_y, ctx))

        result = LayoutResult(
            root=root,
            origin=(origin_x, origin_y),
            nodes=ctx.nodes,
            edges=ctx.edges,
            bounds=bounds.padded(self.config.bounds_margin),
            failures=ctx.failures,
        )

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            f"Laid out {len(result.nodes)} nodes under {root} in {elapsed:.1f} ms "
            f"({len(result.failures)} unreadable)"
        )
        return result

    def _visible_entries(self, path: Path, ctx: _Pass) -> list[Entry]:
        """List a directory, dropping hidden entries and containing failures."""
        try:
            entries = self.provider.list(path)
        except ProviderError as e:
            logger.warning(f"Skipping subtree: {e}")
            ctx.failures.append(e)
            return []

        if self.config.show_hidden:
            return list(entries)
        marker = self.config.hidden_marker
        return [e for e in entries if not e.is_hidden(marker)]

    def _place_ring(self, entries: list[Entry], origin_x: float, origin_y: float, ctx: _Pass) -> Bounds:
        """Place the root's entries evenly on a circle around the origin."""
        count = len(entries)
        radius = self.config.ring_radius
        angles = 2 * np.pi * np.arange(count) / count
        xs = origin_x + radius * np.cos(angles)
        ys = origin_y + radius * np.sin(angles)

        bounds = Bounds.empty()
        for i, entry in enumerate(entries):
            bounds = bounds.merge(
                self._place_node(entry, float(xs[i]), float(ys[i]), 0, (origin_x, origin_y), ctx)
            )
        return bounds

    def _place_row(self, entries: list[Entry], parent_x: float, parent_y: float, depth: int, ctx: _Pass) -> Bounds:
        """Place children in one row centred below their parent."""
        widths = [self.sizer.width(entry.name) for entry in entries]
        gap = self.config.sibling_gap
        total_width = sum(widths) + gap * (len(entries) - 1)
        y = parent_y + self.config.row_drop

        bounds = Bounds.empty()
        left = parent_x - total_width / 2
        for entry, width in zip(entries, widths):
            x = left + width / 2
            bounds = bounds.merge(self._place_node(entry, x, y, depth, (parent_x, parent_y), ctx, width))
            left += width + gap
        return bounds

    def _place_node(
        self,
        entry: Entry,
        x: float,
        y: float,
        depth: int,
        parent: tuple[float, float],
        ctx: _Pass,
        width: float | None = None,
    ) -> Bounds:
        """Record one node and its edge, then descend if it is expanded.

        Returns:
            Bounds of the node and of everything placed beneath it
        """
        if width is None:
            width = self.sizer.width(entry.name)

        node = PositionedNode(
            entry=entry,
            x=x,
            y=y,
            width=width,
            height=self.config.node_height,
            depth=depth,
            parent_position=parent,
        )
        ctx.nodes.append(node)
        ctx.edges.append(
            Edge(
                x1=parent[0],
                y1=parent[1],
                x2=x,
                y2=y,
                droop=self.config.edge_droop,
                child_path=entry.key,
            )
        )

        bounds = Bounds.empty().include_rect(node.min_x, node.min_y, node.max_x, node.max_y)
        if self._should_descend(entry, depth, ctx):
            children = self._visible_entries(entry.path, ctx)
            if children:
                bounds = bounds.merge(self._place_row(children, x, y, depth + 1, ctx))
        return bounds

    def _should_descend(self, entry: Entry, depth: int, ctx: _Pass) -> bool:
        if not entry.is_directory:
            return False
        max_depth = self.config.max_depth
        if max_depth is not None and depth + 1 > max_depth:
            return False
        return ctx.expansion.is_expanded(entry.path)
