"""Protocols for the collaborators of the icon pipeline."""

from typing import BinaryIO, Optional, Protocol


class ResourceBundle(Protocol):
    """Protocol for read-only stores of raw icon documents."""

    def get_resource(self, key: str) -> Optional[BinaryIO]:
        """Return a binary stream for the key, or None if absent.

        The caller owns the returned stream and must close it.
        """
        ...


class PathDataExtractor(Protocol):
    """Protocol for turning an icon document stream into path data."""

    def __call__(self, stream: BinaryIO, icon=None, style=None) -> str:
        """Return the path-data string held by the document."""
        ...
