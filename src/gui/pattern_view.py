"""
Pattern View - QPainter canvas for the weave pattern

Paints the controller's current frame plan: background, translucent grid
lines, then solid or gradient cell fills. Resizing the widget regenerates
the pattern at the new size.
"""

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QLineF, QRectF
from PyQt5.QtGui import QPainter, QColor, QPen

from src.config import GRID_LINE_COLOR, MIN_WINDOW_SIZE
from src.pattern.color_policy import GradientFill, SolidFill, gradient_rows


def _qcolor(rgb):
    return QColor(*rgb)


class PatternView(QWidget):
    """Canvas widget driven by a PatternController."""

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.setMinimumSize(*MIN_WINDOW_SIZE)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

        self._controller = controller
        self._line_pen = QPen(QColor(*GRID_LINE_COLOR))
        self._line_pen.setWidth(1)

        controller.pattern_changed.connect(self._on_pattern_changed)
        controller.frame_advanced.connect(self._on_frame_advanced)

    def _on_pattern_changed(self, pattern) -> None:
        self.update()

    def _on_frame_advanced(self, progress: float) -> None:
        self.update()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._controller.resize(self.width(), self.height())

    def paintEvent(self, event):
        """Draw the current frame."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        plan = self._controller.current_frame()
        if plan is None:
            painter.fillRect(self.rect(), Qt.black)
            return

        gray = plan.background
        painter.fillRect(self.rect(), QColor(gray, gray, gray))

        self._draw_lines(painter, plan.lines)
        self._draw_fills(painter, plan.fills)

    def _draw_lines(self, painter, lines):
        painter.setPen(self._line_pen)
        for line in lines:
            painter.drawLine(QLineF(line.x1, line.y1, line.x2, line.y2))

    def _draw_fills(self, painter, fills):
        for fill in fills:
            rect = fill.rect
            if isinstance(fill, SolidFill):
                painter.setPen(Qt.NoPen)
                painter.fillRect(QRectF(rect.x, rect.y, rect.w, rect.h), _qcolor(fill.color))
            elif isinstance(fill, GradientFill):
                # One horizontal line per pixel row
                for y, color in gradient_rows(fill):
                    painter.setPen(QPen(_qcolor(color)))
                    painter.drawLine(QLineF(rect.x, y, rect.x + rect.w, y))
