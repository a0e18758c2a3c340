from __future__ import annotations

import logging

from PySide6.QtCore import QRectF, QSize, Signal, Slot
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPaintEvent, QPen, QResizeEvent
from PySide6.QtWidgets import QWidget

from bouncingball.config import INFO_FONT_FAMILY, INFO_FONT_SIZE, INFO_TEXT_COLOR
from bouncingball.model.state import World, WorldSnapshot

logger = logging.getLogger(__name__)


class BallCanvas(QWidget):
    """
    Drawing surface for the container box and the ball.

    Paints the last snapshot it received and keeps the container the same
    size as the widget.
    """
    resized = Signal(int, int)  # (width, height)

    def __init__(self, world: World, width: int, height: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.world = world
        self._preferred = QSize(width, height)
        self.snapshot: WorldSnapshot = world.snapshot()
        self._font = QFont(INFO_FONT_FAMILY, INFO_FONT_SIZE)

    def sizeHint(self) -> QSize:
        return self._preferred

    @Slot(object)
    def set_snapshot(self, snapshot: WorldSnapshot) -> None:
        self.snapshot = snapshot
        self.update()

    def refresh(self) -> None:
        """Repaint from the current world state (used while paused)."""
        self.set_snapshot(self.world.snapshot())

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        logger.debug(f"Canvas resized to {size.width()}x{size.height()}")
        # Radius limit goes first: the slider clamp shrinks the ball before the box
        self.resized.emit(size.width(), size.height())
        self.world.resize(0, 0, size.width(), size.height())
        self.refresh()

    def paintEvent(self, event: QPaintEvent) -> None:
        s = self.snapshot
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Container box
        box_rect = QRectF(s.min_x, s.min_y, s.max_x - s.min_x, s.max_y - s.min_y)
        painter.fillRect(box_rect, QColor(s.fill_color))
        painter.setPen(QPen(QColor(s.border_color)))
        painter.drawRect(box_rect.adjusted(0, 0, -1, -1))

        # Ball
        painter.setPen(QPen(QColor(s.ball_color)))
        painter.setBrush(QBrush(QColor(s.ball_color)))
        painter.drawEllipse(QRectF(s.x - s.radius, s.y - s.radius, 2 * s.radius, 2 * s.radius))

        # Ball info
        painter.setPen(QPen(QColor(INFO_TEXT_COLOR)))
        painter.setFont(self._font)
        painter.drawText(20, 30, f"Ball {s.label}")

        painter.end()
