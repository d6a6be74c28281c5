"""Custom exceptions for the phosphor icons library."""

from typing import Optional


class PhosphorIconsError(Exception):
    """Base exception for icon resolution errors."""

    pass


class ConfigurationError(PhosphorIconsError):
    """Raised when configuration is invalid or a style variant is unsupported."""

    pass


class IconResolutionError(PhosphorIconsError):
    """Base class for failures tied to a specific icon and style."""

    def __init__(self, message: str, icon=None, style=None):
        super().__init__(message)
        self.icon = icon
        self.style = style


class NotFoundError(IconResolutionError):
    """Raised when the resource bundle holds no entry for a resource key."""

    def __init__(self, key: str, icon=None, style=None):
        super().__init__(f"Icon resource not found: {key}", icon, style)
        self.key = key


class MalformedResourceError(IconResolutionError):
    """Raised when path data cannot be extracted from an icon document."""

    pass


class GeometryParseError(IconResolutionError):
    """Raised when path data cannot be turned into a geometry."""

    def __init__(
        self,
        message: str,
        path_data: Optional[str] = None,
        icon=None,
        style=None,
    ):
        super().__init__(message, icon, style)
        self.path_data = path_data
