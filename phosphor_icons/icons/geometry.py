"""Conversion of path data into Qt geometry."""

import re

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QPainterPath
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path

from phosphor_icons.core.exceptions import GeometryParseError

from .constants import ARC_SEGMENTS

# parse_path skips characters it does not recognize, so reject them first.
_PATH_DATA_RE = re.compile(r"^[MmZzLlHhVvCcSsQqTtAa0-9eE.,+\-\s]*$")


def _point(z: complex) -> QPointF:
    return QPointF(z.real, z.imag)


def build_geometry(path_data: str, icon=None, style=None) -> QPainterPath:
    """Build a QPainterPath from SVG path data.

    Arcs are flattened into ARC_SEGMENTS line segments. The fill rule is
    winding, matching the SVG default of nonzero. Data holding only moves
    yields an empty path.

    Args:
        path_data: SVG path mini-language string
        icon: Icon the data belongs to, for diagnostics
        style: Style the data belongs to, for diagnostics

    Returns:
        QPainterPath holding the outline

    Raises:
        GeometryParseError: If the path data is rejected
    """
    if not path_data or not path_data.strip():
        raise GeometryParseError("Path data is empty", path_data, icon, style)

    if not _PATH_DATA_RE.match(path_data):
        raise GeometryParseError(
            "Path data contains characters outside the path syntax", path_data, icon, style
        )

    try:
        segments = parse_path(path_data)
    except (ValueError, IndexError, TypeError, ZeroDivisionError) as e:
        raise GeometryParseError(f"Invalid path data: {e}", path_data, icon, style) from e

    path = QPainterPath()
    path.setFillRule(Qt.FillRule.WindingFill)

    current = None
    subpath_start = None
    for segment in segments:
        if current is None or segment.start != current:
            path.moveTo(_point(segment.start))
            subpath_start = segment.start

        if isinstance(segment, Line):
            path.lineTo(_point(segment.end))
        elif isinstance(segment, QuadraticBezier):
            path.quadTo(_point(segment.control), _point(segment.end))
        elif isinstance(segment, CubicBezier):
            path.cubicTo(
                _point(segment.control1), _point(segment.control2), _point(segment.end)
            )
        elif isinstance(segment, Arc):
            for i in range(1, ARC_SEGMENTS):
                path.lineTo(_point(segment.point(i / ARC_SEGMENTS)))
            path.lineTo(_point(segment.end))
        else:
            raise GeometryParseError(
                f"Unsupported segment type: {type(segment).__name__}", path_data, icon, style
            )

        current = segment.end
        if current == subpath_start:
            path.closeSubpath()

    return path
