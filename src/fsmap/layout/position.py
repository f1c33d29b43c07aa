"""Positioned nodes and edges produced by a layout pass."""

from dataclasses import dataclass

from fsmap.model.entry import Entry


@dataclass(frozen=True)
class PositionedNode:
    """An entry placed on the 2D canvas.

    Attributes:
        entry: The file system entry drawn by this node
        x: X coordinate of the node centre
        y: Y coordinate of the node centre
        width: Width of the node box
        height: Height of the node box
        depth: 0 for the root ring, 1 and more for rows below it
        parent_position: Centre of the parent (the origin for the ring)
    """

    entry: Entry
    x: float
    y: float
    width: float
    height: float
    depth: int
    parent_position: tuple[float, float]

    @property
    def center(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def min_x(self) -> float:
        return self.x - self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width / 2

    @property
    def min_y(self) -> float:
        return self.y - self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height / 2

    def contains_point(self, px: float, py: float) -> bool:
        """Check if a point falls inside the node box."""
        return self.min_x <= px <= self.max_x and self.min_y <= py <= self.max_y

    def __repr__(self) -> str:
        return f"PositionedNode({self.entry.name}, x={self.x:.2f}, y={self.y:.2f}, " f"w={self.width:.2f}, depth={self.depth})"


@dataclass(frozen=True)
class Edge:
    """Quadratic curve from a parent anchor to a child node.

    Attributes:
        x1: Start X (parent)
        y1: Start Y (parent)
        x2: End X (child)
        y2: End Y (child)
        droop: Upward offset of the control point from the midpoint
        child_path: Path of the child entry the edge points at
    """

    x1: float
    y1: float
    x2: float
    y2: float
    droop: float = 0.0
    child_path: str = ""

    @property
    def control_point(self) -> tuple[float, float]:
        """Midpoint of the endpoints, raised by the droop offset."""
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2 - self.droop)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def point_at(self, t: float) -> tuple[float, float]:
        """Evaluate the curve at parameter t in [0, 1]."""
        cx, cy = self.control_point
        u = 1.0 - t
        x = u * u * self.x1 + 2 * u * t * cx + t * t * self.x2
        y = u * u * self.y1 + 2 * u * t * cy + t * t * self.y2
        return (x, y)
