"""Constants shared by the icon pipeline.

Note: DEFAULT_NAMESPACE must match the package layout of the bundled
assets. If you move phosphor_icons/assets, update it to match.
"""

from phosphor_icons.core.models import IconStyle

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_PREFIX = "std"

DEFAULT_NAMESPACE = "phosphor_icons.assets"
DEFAULT_EXTENSION = "svg"

DEFAULT_STYLE = IconStyle.REGULAR

ICON_COLOR_BLACK = "#000000"
DEFAULT_ICON_SIZE = 16

ARC_SEGMENTS = 16
