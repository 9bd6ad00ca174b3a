"""Caching utilities for the classifiles package."""

from typing import Dict, Generic, Optional, TypeVar

V = TypeVar("V")


class MimeCache(Generic[V]):
    """
    Simple in-memory cache keyed by MIME type string.

    Holds extension lookups for the duration of one run so that the
    on-disk database is read at most once per MIME type.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._cache: Dict[str, V] = {}

    def get(self, key: str) -> Optional[V]:
        """
        Retrieve a value from the cache.

        Args:
            key: The MIME type to look up.

        Returns:
            The cached value, or None if not found.
        """
        return self._cache.get(key)

    def set(self, key: str, value: V) -> None:
        """
        Store a value in the cache.

        Args:
            key: The MIME type.
            value: The value to store.
        """
        self._cache[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        """Return the number of cached entries."""
        return len(self._cache)
