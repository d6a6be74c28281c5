"""Core module for the phosphor icons library."""

from .interfaces import (
    ResourceBundle,
    PathDataExtractor,
)
from .models import (
    Icon,
    IconStyle,
)
from .exceptions import (
    PhosphorIconsError,
    ConfigurationError,
    IconResolutionError,
    NotFoundError,
    MalformedResourceError,
    GeometryParseError,
)

__all__ = [
    "ResourceBundle",
    "PathDataExtractor",
    "Icon",
    "IconStyle",
    "PhosphorIconsError",
    "ConfigurationError",
    "IconResolutionError",
    "NotFoundError",
    "MalformedResourceError",
    "GeometryParseError",
]
