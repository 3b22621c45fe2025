"""Thread-safe LRU cache for loaded template bundles.

The cache is an explicit object owned by the caller and injected into a
MessageResolver. Keeping it out of module state lets applications decide
its lifetime: drop the cache (or call clear()) and the next render reloads
bundles from their provider.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Keys are bundle paths; values are immutable TemplateSource objects
    - Only successful loads are stored

Concurrency contract:
    Concurrent get() and put() never corrupt the cache. Two threads missing
    the same bundle at the same time may both load it; the last put() wins.
    Bundles are immutable once loaded, so the duplicate load is harmless.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock
from typing import TYPE_CHECKING

from verbiage.constants import DEFAULT_BUNDLE_CACHE_SIZE

if TYPE_CHECKING:
    from verbiage.localization.loading import TemplateSource
    from verbiage.localization.types import BundlePath

__all__ = ["BundleCache"]

logger = logging.getLogger(__name__)


class BundleCache:
    """Thread-safe LRU cache of template bundles keyed by bundle path.

    Transparent to caller - returns None on cache miss.

    Attributes:
        maxsize: Maximum number of cached bundles
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)

    Example:
        >>> from verbiage.localization import MappingTemplateSource
        >>> cache = BundleCache(maxsize=2)
        >>> cache.put("app.errors", MappingTemplateSource({"k": "v"}))
        >>> cache.get("app.errors").get_entry("k")
        'v'
        >>> cache.get("app.other") is None
        True
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = DEFAULT_BUNDLE_CACHE_SIZE) -> None:
        """Initialize bundle cache.

        Args:
            maxsize: Maximum number of bundles (default: 256)

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[BundlePath, TemplateSource] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, bundle_path: BundlePath) -> TemplateSource | None:
        """Get a cached bundle.

        Thread-safe. Returns None on cache miss.

        Args:
            bundle_path: Dotted bundle path

        Returns:
            Cached bundle or None
        """
        with self._lock:
            source = self._cache.get(bundle_path)
            if source is None:
                self._misses += 1
                return None
            # Mark as recently used
            self._cache.move_to_end(bundle_path)
            self._hits += 1
            return source

    def put(self, bundle_path: BundlePath, source: TemplateSource) -> None:
        """Store a bundle.

        Thread-safe. Evicts the least recently used bundle if full. An
        existing entry for the same path is replaced (last write wins).

        Args:
            bundle_path: Dotted bundle path
            source: Loaded bundle
        """
        with self._lock:
            if bundle_path in self._cache:
                self._cache.move_to_end(bundle_path)
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)
            self._cache[bundle_path] = source

    def clear(self) -> None:
        """Drop all cached bundles and reset metrics.

        Thread-safe. The next lookup of each bundle reloads it.
        """
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Bundle cache cleared")

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached bundles
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, bundle_path: object) -> bool:
        """Check for a cached bundle without touching LRU order or metrics."""
        with self._lock:
            return bundle_path in self._cache

    def __len__(self) -> int:
        """Get number of cached bundles.

        Thread-safe.
        """
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses
