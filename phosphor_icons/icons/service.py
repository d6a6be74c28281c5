"""Icon resolution service tying the pipeline together."""

import logging
import threading
from typing import BinaryIO, Optional, Union

from PySide6.QtGui import QIcon, QPainterPath, QPixmap

from phosphor_icons.core.interfaces import PathDataExtractor, ResourceBundle
from phosphor_icons.core.models import Icon, IconStyle
from phosphor_icons.utils.config import IconSettings, load_settings

from .cache import ResolutionCache
from .constants import (
    DEFAULT_EXTENSION,
    DEFAULT_ICON_SIZE,
    DEFAULT_NAMESPACE,
    DEFAULT_STYLE,
    ICON_COLOR_BLACK,
)
from .extractor import extract_path_data
from .geometry import build_geometry
from .loader import DirectoryResourceBundle, PackageResourceBundle, open_resource
from .locator import coerce_style, locate
from .renderer import ColorLike, IconDrawable, build_drawable

logger = logging.getLogger(__name__)

StyleLike = Union[IconStyle, str]


class IconService:
    """Resolves icons into path data, geometry and drawables.

    Path data is read from the bundle at most once per icon and style and
    served from the cache afterwards. Geometry and drawables are rebuilt
    on every call.
    """

    def __init__(
        self,
        bundle: Optional[ResourceBundle] = None,
        cache: Optional[ResolutionCache] = None,
        extractor: PathDataExtractor = extract_path_data,
        namespace: str = DEFAULT_NAMESPACE,
        extension: str = DEFAULT_EXTENSION,
        default_style: StyleLike = DEFAULT_STYLE,
        default_color: ColorLike = ICON_COLOR_BLACK,
        icon_size: int = DEFAULT_ICON_SIZE,
    ):
        self.bundle = bundle if bundle is not None else PackageResourceBundle(namespace=namespace)
        self.cache = cache if cache is not None else ResolutionCache()
        self.extractor = extractor
        self.namespace = namespace
        self.extension = extension
        self.default_style = coerce_style(default_style)
        self.default_color = default_color
        self.icon_size = icon_size

    @classmethod
    def from_settings(cls, settings: IconSettings) -> "IconService":
        """Create a service configured from settings."""
        if settings.icons_dir:
            bundle = DirectoryResourceBundle(settings.icons_dir, settings.namespace)
        else:
            bundle = PackageResourceBundle(namespace=settings.namespace)

        return cls(
            bundle=bundle,
            namespace=settings.namespace,
            extension=settings.extension,
            default_style=settings.style,
            default_color=settings.default_color,
            icon_size=settings.icon_size,
        )

    def _style(self, style: Optional[StyleLike]) -> IconStyle:
        return self.default_style if style is None else coerce_style(style)

    def get_resource_key(self, icon: Icon, style: Optional[StyleLike] = None) -> str:
        """Return the bundle key the icon is stored under."""
        return locate(icon, self._style(style), self.namespace, self.extension)

    def get_icon_stream(self, icon: Icon, style: Optional[StyleLike] = None) -> BinaryIO:
        """Open the raw document stream for an icon.

        The caller must close the stream.

        Raises:
            NotFoundError: If the bundle holds no document for the icon
        """
        style = self._style(style)
        return open_resource(self.bundle, self.get_resource_key(icon, style), icon, style)

    def _read_path_data(self, icon: Icon, style: IconStyle) -> str:
        with self.get_icon_stream(icon, style) as stream:
            return self.extractor(stream, icon, style)

    def get_path_data(self, icon: Icon, style: Optional[StyleLike] = None) -> str:
        """Return the path data of an icon, reading it on first request.

        Raises:
            ConfigurationError: If the style variant is not supported
            NotFoundError: If the bundle holds no document for the icon
            MalformedResourceError: If the document holds no path data
        """
        style = self._style(style)
        return self.cache.get_or_compute(icon, style, lambda: self._read_path_data(icon, style))

    def get_geometry(self, icon: Icon, style: Optional[StyleLike] = None) -> QPainterPath:
        """Return a new QPainterPath for an icon.

        Raises:
            GeometryParseError: If the cached path data cannot be parsed,
                in addition to the errors of get_path_data
        """
        style = self._style(style)
        return build_geometry(self.get_path_data(icon, style), icon, style)

    def get_drawable(
        self,
        icon: Icon,
        style: Optional[StyleLike] = None,
        color: Optional[ColorLike] = None,
    ) -> IconDrawable:
        """Return the icon geometry paired with a fill color."""
        if color is None:
            color = self.default_color
        return build_drawable(self.get_geometry(icon, style), color)

    def create_icon_pixmap(
        self,
        icon: Icon,
        style: Optional[StyleLike] = None,
        color: Optional[ColorLike] = None,
        size: Optional[int] = None,
    ) -> QPixmap:
        """Render an icon to a QPixmap."""
        return self.get_drawable(icon, style, color).to_pixmap(size or self.icon_size)

    def create_icon(
        self,
        icon: Icon,
        style: Optional[StyleLike] = None,
        color: Optional[ColorLike] = None,
        size: Optional[int] = None,
    ) -> QIcon:
        """Render an icon to a QIcon."""
        return self.get_drawable(icon, style, color).to_icon(size or self.icon_size)


_default_service: Optional[IconService] = None
_default_lock = threading.Lock()


def get_default_service() -> IconService:
    """Return the shared service, creating it from settings on first use."""
    global _default_service
    if _default_service is None:
        with _default_lock:
            if _default_service is None:
                _default_service = IconService.from_settings(load_settings())
                logger.debug("Created default icon service")
    return _default_service


def set_default_service(service: Optional[IconService]) -> None:
    """Replace the shared service. None recreates it on next use."""
    global _default_service
    with _default_lock:
        _default_service = service


def get_path_data(icon: Icon, style: Optional[StyleLike] = None) -> str:
    return get_default_service().get_path_data(icon, style)


def get_geometry(icon: Icon, style: Optional[StyleLike] = None) -> QPainterPath:
    return get_default_service().get_geometry(icon, style)


def get_drawable(
    icon: Icon, style: Optional[StyleLike] = None, color: Optional[ColorLike] = None
) -> IconDrawable:
    return get_default_service().get_drawable(icon, style, color)


def create_icon(
    icon: Icon,
    style: Optional[StyleLike] = None,
    color: Optional[ColorLike] = None,
    size: Optional[int] = None,
) -> QIcon:
    """Create a QIcon using the shared service.

    Args:
        icon: Icon to render
        style: Visual style; the configured default when omitted
        color: Fill color; the configured default when omitted
        size: Icon size in pixels; the configured default when omitted

    Returns:
        QIcon with the rendered icon
    """
    return get_default_service().create_icon(icon, style, color, size)


def create_icon_pixmap(
    icon: Icon,
    style: Optional[StyleLike] = None,
    color: Optional[ColorLike] = None,
    size: Optional[int] = None,
) -> QPixmap:
    """Create a QPixmap using the shared service.

    Args:
        icon: Icon to render
        style: Visual style; the configured default when omitted
        color: Fill color; the configured default when omitted
        size: Icon size in pixels; the configured default when omitted

    Returns:
        QPixmap with the rendered icon
    """
    return get_default_service().create_icon_pixmap(icon, style, color, size)
