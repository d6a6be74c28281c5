"""Phosphor icons for Qt, resolved from bundled SVG documents with caching.

Public API:
    get_path_data(icon, style) -> str
    get_geometry(icon, style) -> QPainterPath
    get_drawable(icon, style, color) -> IconDrawable
    create_icon(icon, style, color, size) -> QIcon
    create_icon_pixmap(icon, style, color, size) -> QPixmap

Services:
    IconService
    get_default_service()
    set_default_service(service)

Markup adapters:
    IconGeometry
    IconSource
"""

from .core.exceptions import (
    ConfigurationError,
    GeometryParseError,
    MalformedResourceError,
    NotFoundError,
    PhosphorIconsError,
)
from .core.models import Icon, IconStyle
from .icons.renderer import IconDrawable
from .icons.service import (
    IconService,
    create_icon,
    create_icon_pixmap,
    get_default_service,
    get_drawable,
    get_geometry,
    get_path_data,
    set_default_service,
)
from .markup import IconGeometry, IconSource

__version__ = "1.0.0"

__all__ = [
    "Icon",
    "IconStyle",
    "IconDrawable",
    "IconService",
    "IconGeometry",
    "IconSource",
    "get_path_data",
    "get_geometry",
    "get_drawable",
    "create_icon",
    "create_icon_pixmap",
    "get_default_service",
    "set_default_service",
    "PhosphorIconsError",
    "ConfigurationError",
    "NotFoundError",
    "MalformedResourceError",
    "GeometryParseError",
]
