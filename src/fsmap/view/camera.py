"""Viewport model for 2D navigation.

The view box is the rectangle of canvas coordinates shown in the
window. Fitting sets it to a layout's bounds; wheel zoom scales it
about the point under the mouse; dragging pans it.
"""

from dataclasses import dataclass

import numpy as np

from fsmap.layout.box import Bounds


INITIAL_VIEW_WIDTH = 3000.0
INITIAL_VIEW_HEIGHT = 2000.0
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
ZOOM_STEP = 1.1


@dataclass
class ViewBoxState:
    """Visible canvas rectangle.

    Attributes:
        origin: Top-left corner [x, y]
        size: Width and height [w, h]
    """

    origin: np.ndarray
    size: np.ndarray


class ViewBox:
    """Pan/zoom state of the canvas, independent of any widget."""

    def __init__(
        self,
        width: float = INITIAL_VIEW_WIDTH,
        height: float = INITIAL_VIEW_HEIGHT,
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
        zoom_step: float = ZOOM_STEP,
    ) -> None:
        """Initialize the view box centred on the origin.

        Args:
            width: Initial visible width in canvas units
            height: Initial visible height in canvas units
            min_zoom: Smallest zoom relative to the last fit
            max_zoom: Largest zoom relative to the last fit
            zoom_step: Size factor applied per wheel notch
        """
        self._state = ViewBoxState(
            origin=np.array([-width / 2, -height / 2], dtype=np.float64),
            size=np.array([width, height], dtype=np.float64),
        )
        self._fit_width = float(width)
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.zoom_step = zoom_step

    @property
    def state(self) -> ViewBoxState:
        return self._state

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Visible rectangle as (x, y, width, height)."""
        x, y = self._state.origin
        w, h = self._state.size
        return (float(x), float(y), float(w), float(h))

    @property
    def center(self) -> tuple[float, float]:
        c = self._state.origin + self._state.size / 2
        return (float(c[0]), float(c[1]))

    @property
    def zoom(self) -> float:
        """Magnification relative to the last fitted view."""
        return self._fit_width / float(self._state.size[0])

    def fit(self, bounds: Bounds) -> bool:
        """Show exactly the given bounds and make them the zoom reference.

        Returns:
            False if the bounds are empty and nothing changed
        """
        if bounds.is_empty or bounds.width <= 0 or bounds.height <= 0:
            return False
        self._state.origin = np.array([bounds.min_x, bounds.min_y], dtype=np.float64)
        self._state.size = np.array([bounds.width, bounds.height], dtype=np.float64)
        self._fit_width = bounds.width
        return True

    def zoom_at(self, x: float, y: float, scale: float) -> float:
        """Scale the view box about a canvas point.

        Args:
            x: Canvas X coordinate that stays fixed on screen
            y: Canvas Y coordinate that stays fixed on screen
            scale: Factor applied to the box size (>1 zooms out)

        Returns:
            The scale actually applied after clamping
        """
        if scale <= 0:
            return 1.0
        new_zoom = self.zoom / scale
        clamped = min(max(new_zoom, self.min_zoom), self.max_zoom)
        scale = self.zoom / clamped

        anchor = np.array([x, y], dtype=np.float64)
        self._state.origin = anchor - (anchor - self._state.origin) * scale
        self._state.size = self._state.size * scale
        return float(scale)

    def wheel(self, x: float, y: float, delta: int) -> float:
        """Apply one wheel notch at a canvas point (delta > 0 zooms in)."""
        if delta == 0:
            return 1.0
        scale = 1 / self.zoom_step if delta > 0 else self.zoom_step
        return self.zoom_at(x, y, scale)

    def pan(self, dx: float, dy: float) -> None:
        """Move the content by (dx, dy) canvas units."""
        self._state.origin = self._state.origin - np.array([dx, dy], dtype=np.float64)
