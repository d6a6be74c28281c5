"""Resource bundles and stream access for icon documents."""

import io
import logging
import os
from importlib import resources
from typing import BinaryIO, Mapping, Optional

from phosphor_icons.core.exceptions import ConfigurationError, NotFoundError
from phosphor_icons.core.interfaces import ResourceBundle

from .constants import DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)


def _split_key(key: str, namespace: str) -> Optional[tuple[str, str]]:
    """Split a resource key into its style directory and file name.

    Returns None when the key lies outside the namespace.
    """
    prefix = f"{namespace}."
    if not key.startswith(prefix):
        return None

    directory, sep, filename = key[len(prefix):].partition(".")
    if not sep or not directory or not filename:
        return None
    return directory, filename


class PackageResourceBundle:
    """Bundle of icon documents shipped inside an importable package.

    The dotted namespace must start with the package name; the remaining
    components name directories below the package root.
    """

    def __init__(self, package: str = "phosphor_icons", namespace: str = DEFAULT_NAMESPACE):
        if namespace != package and not namespace.startswith(f"{package}."):
            raise ConfigurationError(
                f"Namespace '{namespace}' is not inside package '{package}'"
            )
        self.package = package
        self.namespace = namespace
        self._subdirs = namespace.split(".")[len(package.split(".")):]

    def get_resource(self, key: str) -> Optional[BinaryIO]:
        parts = _split_key(key, self.namespace)
        if parts is None:
            return None

        resource = resources.files(self.package)
        for part in (*self._subdirs, *parts):
            resource = resource / part

        if not resource.is_file():
            return None
        return resource.open("rb")


class DirectoryResourceBundle:
    """Bundle of icon documents laid out as <root>/<style>/<file>."""

    def __init__(self, root: str, namespace: str = DEFAULT_NAMESPACE):
        self.root = os.fspath(root)
        self.namespace = namespace

    def get_path(self, key: str) -> Optional[str]:
        """Return the file path a key maps to, or None if outside the namespace."""
        parts = _split_key(key, self.namespace)
        if parts is None:
            return None
        return os.path.join(self.root, *parts)

    def get_resource(self, key: str) -> Optional[BinaryIO]:
        path = self.get_path(key)
        if path is None or not os.path.isfile(path):
            return None
        return open(path, "rb")


class MappingResourceBundle:
    """In-memory bundle backed by a mapping of resource keys to bytes."""

    def __init__(self, documents: Mapping[str, bytes]):
        self._documents = dict(documents)

    def __contains__(self, key: str) -> bool:
        return key in self._documents

    def get_resource(self, key: str) -> Optional[BinaryIO]:
        data = self._documents.get(key)
        if data is None:
            return None
        return io.BytesIO(data)


def open_resource(bundle: ResourceBundle, key: str, icon=None, style=None) -> BinaryIO:
    """Open the stream stored under a resource key.

    Args:
        bundle: Bundle to read from
        key: Resource key built by the locator
        icon: Requested icon, for diagnostics
        style: Requested style, for diagnostics

    Returns:
        Binary stream; the caller must close it

    Raises:
        NotFoundError: If the bundle holds nothing under the key
    """
    stream = bundle.get_resource(key)
    if stream is None:
        raise NotFoundError(key, icon, style)

    logger.debug(f"Opened icon resource: {key}")
    return stream
