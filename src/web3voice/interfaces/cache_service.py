"""Abstract interface for cache service operations."""

from abc import ABC, abstractmethod


class CacheService(ABC):
    """Abstract base class for cache backends."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Retrieves a value from cache.

        Args:
            key: The cache key.

        Returns:
            The cached value or None if not found.

        Raises:
            CacheServiceError: If the cache operation fails.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Stores a value in cache, replacing any previous value.

        Raises:
            CacheServiceError: If the cache operation fails.
        """
        pass

    @abstractmethod
    def add(self, key: str, value: str) -> bool:
        """
        Stores a value only if the key is absent.

        Returns:
            True if the value was stored, False if the key already existed.

        Raises:
            CacheServiceError: If the cache operation fails.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Removes a key from cache.

        Raises:
            CacheServiceError: If the cache operation fails.
        """
        pass
