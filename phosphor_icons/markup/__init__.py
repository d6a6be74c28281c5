from .extensions import IconGeometry, IconSource

__all__ = ["IconGeometry", "IconSource"]
