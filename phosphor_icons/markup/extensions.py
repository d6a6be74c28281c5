"""Declarative adapters that forward to the icon service.

These hold the attribute values a UI description provides and resolve
them on demand. Style defaults to regular and color to black.
"""

from dataclasses import dataclass
from typing import Optional

from PySide6.QtGui import QPainterPath

from phosphor_icons.core.models import Icon, IconStyle
from phosphor_icons.icons.constants import DEFAULT_STYLE, ICON_COLOR_BLACK
from phosphor_icons.icons.renderer import ColorLike, IconDrawable
from phosphor_icons.icons.service import IconService, get_default_service


@dataclass
class IconGeometry:
    """Provides the vector geometry of an icon."""

    icon: Icon
    style: IconStyle = DEFAULT_STYLE

    def provide_value(self, service: Optional[IconService] = None) -> QPainterPath:
        service = service or get_default_service()
        return service.get_geometry(self.icon, self.style)


@dataclass
class IconSource:
    """Provides an icon drawable filled with a single color."""

    icon: Icon
    style: IconStyle = DEFAULT_STYLE
    color: ColorLike = ICON_COLOR_BLACK

    def provide_value(self, service: Optional[IconService] = None) -> IconDrawable:
        service = service or get_default_service()
        return service.get_drawable(self.icon, self.style, self.color)
