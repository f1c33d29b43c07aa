"""Bounding box accumulated during one layout pass."""

import math
from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in canvas coordinates.

    Bounds are immutable values: ``include`` and ``merge`` return new
    boxes, so each recursive layout call owns its own accumulator and
    hands it back to the caller to merge.

    Attributes:
        min_x: Minimum X coordinate
        max_x: Maximum X coordinate
        min_y: Minimum Y coordinate
        max_y: Maximum Y coordinate
    """

    min_x: float = math.inf
    max_x: float = -math.inf
    min_y: float = math.inf
    max_y: float = -math.inf

    @classmethod
    def empty(cls) -> Self:
        """Create a box that contains nothing."""
        return cls()

    @classmethod
    def from_point(cls, x: float, y: float) -> Self:
        return cls(min_x=x, max_x=x, min_y=y, max_y=y)

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    @property
    def center(self) -> tuple[float, float]:
        if self.is_empty:
            return (0.0, 0.0)
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def include(self, x: float, y: float) -> Self:
        """Return a box grown to contain the point (x, y)."""
        return type(self)(
            min_x=min(self.min_x, x),
            max_x=max(self.max_x, x),
            min_y=min(self.min_y, y),
            max_y=max(self.max_y, y),
        )

    def include_rect(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Self:
        return self.include(min_x, min_y).include(max_x, max_y)

    def merge(self, other: "Bounds") -> Self:
        """Return the union of this box and another."""
        if other.is_empty:
            return self
        if self.is_empty:
            return type(self)(other.min_x, other.max_x, other.min_y, other.max_y)
        return type(self)(
            min_x=min(self.min_x, other.min_x),
            max_x=max(self.max_x, other.max_x),
            min_y=min(self.min_y, other.min_y),
            max_y=max(self.max_y, other.max_y),
        )

    def padded(self, margin: float) -> Self:
        """Return the box grown by a margin on every side."""
        if self.is_empty:
            return self
        return type(self)(
            min_x=self.min_x - margin,
            max_x=self.max_x + margin,
            min_y=self.min_y - margin,
            max_y=self.max_y + margin,
        )

    def contains_point(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def as_rect(self) -> tuple[float, float, float, float]:
        """Return (x, y, width, height)."""
        return (self.min_x, self.min_y, self.width, self.height)
