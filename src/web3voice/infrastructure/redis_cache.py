"""Redis cache service implementation."""

import redis

from web3voice.exceptions import CacheServiceError
from web3voice.interfaces import CacheService
from web3voice.logging import setup_logging

logger = setup_logging()


class RedisCacheService(CacheService):
    """Cache service implementation using Redis. Every key expires after the TTL."""

    def __init__(self, client: redis.Redis, ttl_seconds: int):
        self._client = client
        self._ttl_seconds = ttl_seconds

    def get(self, key: str) -> str | None:
        try:
            value = self._client.get(key)
            if value is not None:
                logger.info("Cache hit", extra={"key": key})
            return value
        except redis.RedisError as e:
            logger.exception("Redis get failed", extra={"key": key})
            raise CacheServiceError(key, "get", cause=e) from e

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value, ex=self._ttl_seconds)
            logger.info("Cache set", extra={"key": key, "ttl": self._ttl_seconds})
        except redis.RedisError as e:
            logger.exception("Redis set failed", extra={"key": key})
            raise CacheServiceError(key, "set", cause=e) from e

    def add(self, key: str, value: str) -> bool:
        try:
            stored = self._client.set(key, value, ex=self._ttl_seconds, nx=True)
            return bool(stored)
        except redis.RedisError as e:
            logger.exception("Redis add failed", extra={"key": key})
            raise CacheServiceError(key, "add", cause=e) from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            logger.exception("Redis delete failed", extra={"key": key})
            raise CacheServiceError(key, "delete", cause=e) from e
