"""
Scene Widget for the range tree viewer.

Draws the input points or segments of a Scene, the query window or line,
and highlights what the query reported. World y grows upward.
"""

import math
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QPainter, QPen, QBrush, QColor, QImage

from rangetrees.config import ColorsConfig, ViewerConfig
from rangetrees.geometric import Point, Window
from rangetrees.scene import Scene

GRID_STEP = 10

# Module-level configs (set by MainWindow at startup)
_colors_config: ColorsConfig = ColorsConfig()
_viewer_config: ViewerConfig = ViewerConfig()


def set_colors_config(config: ColorsConfig):
    """Set the colors configuration for this module."""
    global _colors_config
    _colors_config = config


def get_colors_config() -> ColorsConfig:
    """Get the current colors configuration."""
    return _colors_config


def set_viewer_config(config: ViewerConfig):
    """Set the viewer configuration for this module."""
    global _viewer_config
    _viewer_config = config


class SceneWidget(QWidget):
    """Paints one Scene scaled to fit the widget."""

    def __init__(self, scene: Optional[Scene] = None, parent=None):
        super().__init__(parent)
        self._scene = scene
        self.setMinimumSize(200, 200)

    def scene(self) -> Optional[Scene]:
        return self._scene

    def set_scene(self, scene: Scene):
        self._scene = scene
        self.update()

    # --- Coordinate Mapping ---

    def _world_bounds(self) -> Window:
        bounds = self._scene.bounds() if self._scene else Window(0, 0, 1, 1)
        # One unit of padding keeps items off the border.
        return Window(bounds.start_x - 1, bounds.start_y - 1, bounds.end_x + 1, bounds.end_y + 1)

    def to_screen(self, x: float, y: float, width: int, height: int) -> QPointF:
        """Map world coordinates to pixel coordinates for a canvas of the given size."""
        bounds = self._world_bounds()
        margin = _viewer_config.margin
        span_x = bounds.end_x - bounds.start_x
        span_y = bounds.end_y - bounds.start_y
        scale = min((width - 2 * margin) / span_x, (height - 2 * margin) / span_y)
        x = min(max(x, bounds.start_x), bounds.end_x)
        y = min(max(y, bounds.start_y), bounds.end_y)
        return QPointF(margin + (x - bounds.start_x) * scale,
                       height - margin - (y - bounds.start_y) * scale)

    # --- Painting ---

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self._paint(painter, self.width(), self.height())
        finally:
            painter.end()

    def render_to_image(self, width: int, height: int) -> QImage:
        """Render the scene offscreen, e.g. for export or tests."""
        image = QImage(width, height, QImage.Format_ARGB32)
        painter = QPainter(image)
        try:
            self._paint(painter, width, height)
        finally:
            painter.end()
        return image

    def _paint(self, painter: QPainter, width: int, height: int):
        colors = get_colors_config()
        painter.fillRect(0, 0, width, height, QColor(colors.background))
        if self._scene is None:
            return
        painter.setRenderHint(QPainter.Antialiasing)

        self._paint_grid(painter, width, height, colors)
        self._paint_query(painter, width, height, colors)
        self._paint_segments(painter, width, height, colors)
        self._paint_points(painter, width, height, colors)

    def _paint_grid(self, painter, width, height, colors):
        bounds = self._world_bounds()
        painter.setPen(QPen(QColor(colors.grid), 1))
        x = math.ceil(bounds.start_x / GRID_STEP) * GRID_STEP
        while x <= bounds.end_x:
            painter.drawLine(self.to_screen(x, bounds.start_y, width, height),
                             self.to_screen(x, bounds.end_y, width, height))
            x += GRID_STEP
        y = math.ceil(bounds.start_y / GRID_STEP) * GRID_STEP
        while y <= bounds.end_y:
            painter.drawLine(self.to_screen(bounds.start_x, y, width, height),
                             self.to_screen(bounds.end_x, y, width, height))
            y += GRID_STEP

    def _paint_query(self, painter, width, height, colors):
        painter.setPen(QPen(QColor(colors.query), 2, Qt.DashLine))
        painter.setBrush(Qt.NoBrush)
        window = self._scene.window
        if window is not None and not window.is_empty():
            top_left = self.to_screen(window.start_x, window.end_y, width, height)
            bottom_right = self.to_screen(window.end_x, window.start_y, width, height)
            painter.drawRect(QRectF(top_left, bottom_right))
        line = self._scene.query_line
        if line is not None and not line.is_empty():
            painter.drawLine(self.to_screen(line.x, line.start_y, width, height),
                             self.to_screen(line.x, line.end_y, width, height))

    def _paint_segments(self, painter, width, height, colors):
        reported = self._scene.reported_segments
        for segment in self._scene.segments:
            color = colors.reported if segment in reported else colors.item
            painter.setPen(QPen(QColor(color), 3 if segment in reported else 2))
            painter.drawLine(self.to_screen(segment.start.x, segment.start.y, width, height),
                             self.to_screen(segment.end.x, segment.end.y, width, height))

    def _paint_points(self, painter, width, height, colors):
        radius = _viewer_config.point_radius
        reported = set(self._scene.reported_points)
        for point in self._scene.points:
            color = QColor(colors.reported if point in reported else colors.item)
            painter.setPen(QPen(color, 1))
            painter.setBrush(QBrush(color))
            painter.drawEllipse(self.point_center(point, width, height), radius, radius)

    def point_center(self, point: Point, width: int, height: int) -> QPointF:
        return self.to_screen(point.x, point.y, width, height)
