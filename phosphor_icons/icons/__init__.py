"""Icon resolution pipeline: locate, read, extract, cache, build."""

from .cache import ResolutionCache, make_cache_key
from .extractor import extract_path_data
from .geometry import build_geometry
from .loader import (
    DirectoryResourceBundle,
    MappingResourceBundle,
    PackageResourceBundle,
    open_resource,
)
from .locator import get_icon_name, locate
from .renderer import IconDrawable, build_drawable, to_color

__all__ = [
    "ResolutionCache",
    "make_cache_key",
    "extract_path_data",
    "build_geometry",
    "DirectoryResourceBundle",
    "MappingResourceBundle",
    "PackageResourceBundle",
    "open_resource",
    "get_icon_name",
    "locate",
    "IconDrawable",
    "build_drawable",
    "to_color",
]
