"""GraphCanvas - QGraphicsView that paints a layout and handles pan/zoom.

Features:
- Drag on empty space to pan
- Mouse wheel zoom anchored under the cursor
- Auto-fit to the layout bounds right after a re-layout
- Click on a node to toggle a directory or launch a file
"""

import logging

from PyQt6.QtCore import QPoint, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPainter, QResizeEvent, QWheelEvent
from PyQt6.QtWidgets import QGraphicsScene, QGraphicsView

from fsmap.layout.engine import ExpansionLookup, LayoutResult
from fsmap.view.camera import ViewBox
from fsmap.view.items import EdgeItem, HomeItem, NodeItem


logger = logging.getLogger(__name__)

SCENE_EXTENT = 1e7
DRAG_THRESHOLD = 5


class GraphCanvas(QGraphicsView):
    """Paints LayoutResults and forwards node clicks."""

    # Signals
    node_clicked = pyqtSignal(object, str)  # Emits (Entry, parent_path)
    home_clicked = pyqtSignal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self._scene.setSceneRect(QRectF(-SCENE_EXTENT, -SCENE_EXTENT, 2 * SCENE_EXTENT, 2 * SCENE_EXTENT))
        self.setScene(self._scene)

        self._view_box = ViewBox()
        self._result: LayoutResult | None = None

        # Drag state
        self._press_pos: QPoint | None = None
        self._last_pos: QPoint | None = None
        self._dragging = False

        self._setup_view()

    def _setup_view(self) -> None:
        """Configure the QGraphicsView."""
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.SmartViewportUpdate)

        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.NoAnchor)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setMinimumSize(400, 300)
        self.viewport().setCursor(Qt.CursorShape.OpenHandCursor)

    @property
    def view_box(self) -> ViewBox:
        return self._view_box

    @property
    def result(self) -> LayoutResult | None:
        return self._result

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def show_layout(self, result: LayoutResult, expansion: ExpansionLookup | None = None, fit: bool = True) -> None:
        """Replace the scene with a new layout.

        Args:
            result: Layout to paint
            expansion: Used to mark expanded directories
            fit: Fit the view to the layout bounds
        """
        self._scene.clear()
        self._result = result

        self._scene.addItem(HomeItem(*result.origin, label=result.root.name or str(result.root)))
        for edge in result.edges:
            self._scene.addItem(EdgeItem(edge))
        for node in result.nodes:
            expanded = bool(
                expansion is not None and node.entry.is_directory and expansion.is_expanded(node.entry.path)
            )
            self._scene.addItem(NodeItem(node, str(node.entry.path.parent), expanded))

        if fit:
            self.fit_to_layout()
        logger.debug(f"Painted {len(result.nodes)} nodes and {len(result.edges)} edges")

    def fit_to_layout(self) -> None:
        """Fit the view to the bounds of the current layout."""
        if self._result is None:
            return
        if self._view_box.fit(self._result.bounds):
            self._apply_view_box()

    def _apply_view_box(self) -> None:
        self.fitInView(QRectF(*self._view_box.rect), Qt.AspectRatioMode.KeepAspectRatio)

    def _current_scale(self) -> float:
        return self.transform().m11() or 1.0

    # -------------------------------------------------------------------------
    # Zoom and Pan
    # -------------------------------------------------------------------------

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Handle mouse wheel for zooming."""
        delta = event.angleDelta().y()
        if delta == 0:
            return
        anchor = self.mapToScene(event.position().toPoint())
        self._view_box.wheel(anchor.x(), anchor.y(), delta)
        self._apply_view_box()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Start a possible click or pan."""
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.pos()
            self._last_pos = event.pos()
            self._dragging = False
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Handle mouse move for panning."""
        if self._press_pos is None:
            super().mouseMoveEvent(event)
            return

        if not self._dragging:
            moved = (event.pos() - self._press_pos).manhattanLength()
            if moved < DRAG_THRESHOLD:
                return
            self._dragging = True
            self.viewport().setCursor(Qt.CursorShape.ClosedHandCursor)

        delta = event.pos() - self._last_pos
        self._last_pos = event.pos()
        scale = self._current_scale()
        self._view_box.pan(delta.x() / scale, delta.y() / scale)
        self._apply_view_box()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Finish a pan, or dispatch a click."""
        if event.button() != Qt.MouseButton.LeftButton or self._press_pos is None:
            super().mouseReleaseEvent(event)
            return

        was_drag = self._dragging
        self._press_pos = None
        self._last_pos = None
        self._dragging = False
        self.viewport().setCursor(Qt.CursorShape.OpenHandCursor)

        if not was_drag:
            self._dispatch_click(event.pos())

    def _dispatch_click(self, pos: QPoint) -> None:
        for item in self.items(pos):
            if isinstance(item, NodeItem):
                self.node_clicked.emit(item.entry, item.parent_path)
                return
            if isinstance(item, HomeItem):
                self.home_clicked.emit()
                return

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._apply_view_box()
