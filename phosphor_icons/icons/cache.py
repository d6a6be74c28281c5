"""Compute-once cache of icon path data.

Entries are never evicted and have no TTL. This is only safe because the
key space is the closed product of Icon and IconStyle, so the cache can
never hold more than a few thousand short strings. Anything that makes
the icon set open-ended (e.g. icon packs loaded at runtime) must revisit
this policy.
"""

import logging
import threading
from typing import Callable, Optional

from phosphor_icons.core.models import Icon, IconStyle

logger = logging.getLogger(__name__)


def make_cache_key(icon: Icon, style: IconStyle) -> str:
    """Return the cache key for an icon and style."""
    return f"{icon.value}:{style.value}"


class _Cell:
    """Result slot filled by exactly one computing caller."""

    __slots__ = ("_ready", "value", "error")

    def __init__(self):
        self._ready = threading.Event()
        self.value: Optional[str] = None
        self.error: Optional[BaseException] = None

    @property
    def resolved(self) -> bool:
        return self._ready.is_set() and self.error is None

    def resolve(self, value: str) -> None:
        self.value = value
        self._ready.set()

    def fail(self, error: BaseException) -> None:
        self.error = error
        self._ready.set()

    def wait(self) -> str:
        self._ready.wait()
        if self.error is not None:
            raise self.error
        return self.value


class ResolutionCache:
    """Thread-safe memo of path data keyed by icon and style.

    At most one computation runs per key. Callers arriving while a key is
    being computed wait for that computation and share its outcome.
    Failures are not stored: the next call for the key computes again.
    The table lock is held only to look up or insert cells, never while
    computing, so unrelated keys do not contend.
    """

    def __init__(self):
        self._cells: dict[str, _Cell] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def size(self) -> int:
        """Number of resolved entries."""
        with self._lock:
            return sum(1 for cell in self._cells.values() if cell.resolved)

    @property
    def stats(self) -> dict:
        """Cache statistics."""
        with self._lock:
            hits, misses = self._hits, self._misses
        return {"size": self.size, "hits": hits, "misses": misses}

    def __contains__(self, item) -> bool:
        icon, style = item
        with self._lock:
            cell = self._cells.get(make_cache_key(icon, style))
        return cell is not None and cell.resolved

    def get_or_compute(
        self, icon: Icon, style: IconStyle, compute_fn: Callable[[], str]
    ) -> str:
        """Return cached path data, computing it on first request.

        Args:
            icon: Requested icon
            style: Requested style
            compute_fn: Zero-argument callable producing the path data

        Returns:
            Path data for the icon and style

        Raises:
            Whatever compute_fn raises; the failure is not cached
        """
        key = make_cache_key(icon, style)

        with self._lock:
            cell = self._cells.get(key)
            owner = cell is None
            if owner:
                cell = _Cell()
                self._cells[key] = cell
                self._misses += 1
            else:
                self._hits += 1

        if not owner:
            return cell.wait()

        logger.debug(f"Resolving icon data for {key}")
        try:
            value = compute_fn()
        except BaseException as e:
            with self._lock:
                if self._cells.get(key) is cell:
                    del self._cells[key]
            cell.fail(e)
            raise

        cell.resolve(value)
        return value

    def clear(self) -> None:
        """Drop all resolved entries and reset statistics."""
        with self._lock:
            self._cells = {
                key: cell for key, cell in self._cells.items() if not cell._ready.is_set()
            }
            self._hits = 0
            self._misses = 0
