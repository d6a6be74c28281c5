"""Mapping from icon and style to resource keys."""

from typing import Union

from phosphor_icons.core.exceptions import ConfigurationError
from phosphor_icons.core.models import Icon, IconStyle

from .constants import DEFAULT_EXTENSION, DEFAULT_NAMESPACE

_SUFFIXED_STYLES = frozenset(
    {IconStyle.THIN, IconStyle.LIGHT, IconStyle.BOLD, IconStyle.FILL}
)


def get_icon_name(icon: Icon) -> str:
    """Return the file stem for an icon.

    Args:
        icon: Icon to convert

    Returns:
        Canonical icon name with underscores replaced by hyphens
    """
    return icon.value.replace("_", "-")


def coerce_style(style: Union[IconStyle, str]) -> IconStyle:
    """Return style as an IconStyle, accepting its string value."""
    if isinstance(style, IconStyle):
        return style
    try:
        return IconStyle(style)
    except ValueError:
        raise ConfigurationError(f"Unsupported style variant: {style!r}")


def locate(
    icon: Icon,
    style: Union[IconStyle, str],
    namespace: str = DEFAULT_NAMESPACE,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Build the resource key for an icon in a given style.

    Args:
        icon: Icon to locate
        style: Visual style of the icon
        namespace: Dotted prefix of the bundle namespace
        extension: File extension of the stored documents

    Returns:
        Fully qualified resource key

    Raises:
        ConfigurationError: If the style variant is not supported
    """
    style = coerce_style(style)
    name = get_icon_name(icon)

    if style in _SUFFIXED_STYLES:
        return f"{namespace}.{style.value}.{name}-{style.value}.{extension}"
    if style is IconStyle.REGULAR:
        return f"{namespace}.{style.value}.{name}.{extension}"

    raise ConfigurationError(f"Unsupported style variant: {style.value!r}")
