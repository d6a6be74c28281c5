"""Drawable composition and pixmap rendering."""

from dataclasses import dataclass
from typing import Union

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QBrush, QColor, QGuiApplication, QIcon, QPainter, QPainterPath, QPixmap

from phosphor_icons.core.exceptions import ConfigurationError

from .constants import DEFAULT_ICON_SIZE

ColorLike = Union[QColor, Qt.GlobalColor, str]


def to_color(color: ColorLike) -> QColor:
    """Convert a color value to QColor.

    Args:
        color: QColor, Qt global color, or color name such as "#ff0000"

    Returns:
        A valid QColor

    Raises:
        ConfigurationError: If the color cannot be interpreted
    """
    if not isinstance(color, (QColor, str, Qt.GlobalColor)):
        raise ConfigurationError(f"Unsupported color value: {color!r}")

    qcolor = QColor(color)

    if not qcolor.isValid():
        raise ConfigurationError(f"Invalid color: {color!r}")
    return qcolor


def _get_dpr() -> float:
    app = QGuiApplication.instance()
    return app.devicePixelRatio() if isinstance(app, QGuiApplication) else 1.0


def _render_pixmap_raw(geometry: QPainterPath, color: QColor, physical_size: int) -> QPixmap:
    """Render geometry to pixmap at exact physical size (no dpr scaling)."""
    pixmap = QPixmap(QSize(physical_size, physical_size))
    pixmap.fill(Qt.GlobalColor.transparent)

    bounds = geometry.boundingRect()
    extent = max(bounds.width(), bounds.height())
    if extent <= 0:
        return pixmap

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.translate(physical_size / 2, physical_size / 2)
    painter.scale(physical_size / extent, physical_size / extent)
    painter.translate(-bounds.center().x(), -bounds.center().y())
    painter.fillPath(geometry, QBrush(color))
    painter.end()

    return pixmap


@dataclass(frozen=True)
class IconDrawable:
    """Icon geometry paired with the color it is filled with."""

    geometry: QPainterPath
    color: QColor

    def to_pixmap(self, size: int = DEFAULT_ICON_SIZE) -> QPixmap:
        """Render to a square QPixmap.

        The geometry is scaled to fit and centered. Requires a running
        QGuiApplication.

        Args:
            size: Icon size in logical pixels

        Returns:
            QPixmap with the device pixel ratio of the application
        """
        dpr = _get_dpr()
        pixmap = _render_pixmap_raw(self.geometry, self.color, int(size * dpr))
        pixmap.setDevicePixelRatio(dpr)
        return pixmap

    def to_icon(self, size: int = DEFAULT_ICON_SIZE) -> QIcon:
        """Render to a QIcon."""
        return QIcon(self.to_pixmap(size))


def build_drawable(geometry: QPainterPath, color: ColorLike) -> IconDrawable:
    """Pair a geometry with a fill color."""
    return IconDrawable(geometry=geometry, color=to_color(color))
