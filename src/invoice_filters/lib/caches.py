"""
Disk-based caching utilities with TTL support.

Provides a DiskCache class that keeps the last invoice payload downloaded
from the backend so the list can still be shown when the network is down.
Uses the diskcache library for reliable, process-safe storage.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import diskcache


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
    """

    value: Any


class DiskCache:
    """
    Disk-based cache with TTL support.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get(self, key: str) -> CacheEntry | None:
        """
        Get a value from cache.

        Args:
            key: Cache key string.

        Returns:
            CacheEntry if found and not expired, None otherwise.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached)
        return None

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        """
        Store a value in cache.

        Args:
            key: Cache key string.
            value: Value to store.
            expire: TTL in seconds. None means no expiration.
        """
        self._cache.set(key, value, expire=expire)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
