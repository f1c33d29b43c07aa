"""QGraphicsItems for nodes, edges and the home anchor."""

import math

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget

from fsmap.layout.position import Edge, PositionedNode


NODE_FILL = QColor("#f0f0f0")
DIRECTORY_FILL = QColor("#dde8f5")
EXPANDED_FILL = QColor("#b9d2ee")
NODE_BORDER = QColor("#666666")
TEXT_COLOR = QColor("#333333")
LINE_COLOR = QColor("#333333")
HOME_FILL = QColor("#4a6fa5")

CORNER_RADIUS = 10.0
LABEL_PIXEL_SIZE = 120
ARROW_SIZE = 60.0


class NodeItem(QGraphicsItem):
    """Rounded box with a centred label for one positioned entry."""

    def __init__(self, node: PositionedNode, parent_path: str, expanded: bool = False) -> None:
        super().__init__()

        self.node = node
        self.parent_path = parent_path
        self.expanded = expanded
        self._hovered = False

        self._rect = QRectF(-node.width / 2, -node.height / 2, node.width, node.height)
        self.setPos(node.x, node.y)
        self.setAcceptHoverEvents(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(str(node.entry.path))

    @property
    def entry(self):
        return self.node.entry

    def boundingRect(self) -> QRectF:
        return self._rect.adjusted(-2, -2, 2, 2)

    def shape(self) -> QPainterPath:
        path = QPainterPath()
        path.addRoundedRect(self._rect, CORNER_RADIUS, CORNER_RADIUS)
        return path

    def paint(self, painter: QPainter, option: QStyleOptionGraphicsItem, widget: QWidget | None = None) -> None:
        if self.entry.is_directory:
            fill = EXPANDED_FILL if self.expanded else DIRECTORY_FILL
        else:
            fill = NODE_FILL
        if self._hovered:
            fill = fill.darker(110)

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(fill))
        painter.setPen(QPen(NODE_BORDER, 4))
        painter.drawRoundedRect(self._rect, CORNER_RADIUS, CORNER_RADIUS)

        font = QFont()
        font.setPixelSize(LABEL_PIXEL_SIZE)
        painter.setFont(font)
        painter.setPen(TEXT_COLOR)
        painter.drawText(self._rect, Qt.AlignmentFlag.AlignCenter, self.entry.name)

    def hoverEnterEvent(self, event) -> None:
        self._hovered = True
        self.update()
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event) -> None:
        self._hovered = False
        self.update()
        super().hoverLeaveEvent(event)


class EdgeItem(QGraphicsItem):
    """Quadratic curve with an arrow head at the child end."""

    def __init__(self, edge: Edge) -> None:
        super().__init__()

        self.edge = edge
        self._path = self._build_path()

        # Edges should be behind nodes
        self.setZValue(-1)

        # Don't intercept mouse events - allows panning through edges
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)

    def _build_path(self) -> QPainterPath:
        edge = self.edge
        start = QPointF(edge.x1, edge.y1)
        ctrl = QPointF(*edge.control_point)
        end = QPointF(edge.x2, edge.y2)

        path = QPainterPath()
        path.moveTo(start)
        path.quadTo(ctrl, end)

        # Arrow head follows the tangent at the end of the curve
        angle = math.atan2(end.y() - ctrl.y(), end.x() - ctrl.x())
        for side in (-1, 1):
            a = angle + math.pi + side * math.pi / 7
            path.moveTo(end)
            path.lineTo(end.x() + ARROW_SIZE * math.cos(a), end.y() + ARROW_SIZE * math.sin(a))
        return path

    def boundingRect(self) -> QRectF:
        return self._path.boundingRect().adjusted(-4, -4, 4, 4)

    def paint(self, painter: QPainter, option: QStyleOptionGraphicsItem, widget: QWidget | None = None) -> None:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        pen = QPen(LINE_COLOR, 4)
        pen.setCosmetic(False)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(self._path)


class HomeItem(QGraphicsItem):
    """Anchor drawn at the layout origin; clicking it redraws from the root."""

    WIDTH = 1500.0
    HEIGHT = 500.0

    def __init__(self, x: float, y: float, label: str = "Home") -> None:
        super().__init__()
        self.label = label
        self._rect = QRectF(-self.WIDTH / 2, -self.HEIGHT / 2, self.WIDTH, self.HEIGHT)
        self.setPos(x, y)
        self.setZValue(1)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def boundingRect(self) -> QRectF:
        return self._rect.adjusted(-2, -2, 2, 2)

    def paint(self, painter: QPainter, option: QStyleOptionGraphicsItem, widget: QWidget | None = None) -> None:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(HOME_FILL))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRoundedRect(self._rect, CORNER_RADIUS, CORNER_RADIUS)

        font = QFont()
        font.setPixelSize(LABEL_PIXEL_SIZE * 2)
        painter.setFont(font)
        painter.setPen(QColor("white"))
        painter.drawText(self._rect, Qt.AlignmentFlag.AlignCenter, self.label)
