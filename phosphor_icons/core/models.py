"""Data models and types for the phosphor icons library."""

from __future__ import annotations
from enum import Enum


class IconStyle(Enum):
    """Visual weight or fill treatment of an icon."""
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    BOLD = "bold"
    FILL = "fill"


class Icon(Enum):
    """Icon families shipped with the package.

    Values are canonical names. Resource file stems use hyphens in place
    of underscores.
    """
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    CARET_DOWN = "caret_down"
    CARET_UP = "caret_up"
    CHECK = "check"
    HOUSE = "house"
    PLUS = "plus"
    X = "x"
