"""Extraction of path data from single-path SVG documents."""

import xml.etree.ElementTree as ET
from typing import BinaryIO

from phosphor_icons.core.exceptions import MalformedResourceError

from .constants import SVG_NAMESPACE, SVG_PREFIX

_NAMESPACES = {SVG_PREFIX: SVG_NAMESPACE}
_ROOT_TAG = f"{{{SVG_NAMESPACE}}}svg"
_PATH_QUERY = f"{SVG_PREFIX}:path"


def _describe(icon, style) -> str:
    if icon is None:
        return "icon document"
    name = getattr(icon, "value", icon)
    if style is None:
        return f"icon '{name}'"
    return f"icon '{name}' ({getattr(style, 'value', style)})"


def extract_path_data(stream: BinaryIO, icon=None, style=None) -> str:
    """Read the 'd' attribute of the first top-level path element.

    Only single-path icons are supported. When a document holds several
    top-level paths the first one wins and the rest are ignored.

    Args:
        stream: Binary stream holding a UTF-8 SVG document
        icon: Requested icon, for diagnostics
        style: Requested style, for diagnostics

    Returns:
        Path data string, verbatim

    Raises:
        MalformedResourceError: If no path data can be extracted
    """
    what = _describe(icon, style)

    try:
        content = stream.read().decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedResourceError(f"Cannot decode {what}: {e}", icon, style) from e

    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise MalformedResourceError(f"Cannot parse {what}: {e}", icon, style) from e

    if root.tag != _ROOT_TAG:
        raise MalformedResourceError(
            f"Cannot read {what}: root element is not an SVG element", icon, style
        )

    node = root.find(_PATH_QUERY, _NAMESPACES)
    if node is None:
        raise MalformedResourceError(f"Cannot read {what}: no path element", icon, style)

    data = node.get("d")
    if not data:
        raise MalformedResourceError(f"Cannot read {what}: path has no data", icon, style)

    return data
