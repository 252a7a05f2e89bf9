"""
Redis-backed storage for deployments where REDIS_URL is set.
Implements the same interface as autoparts.database.local_storage.
"""

from __future__ import annotations

from typing import Optional

import redis

from autoparts.storefront.errors import PersistenceError

from .storage import KeyValueStorage


class RedisStorage(KeyValueStorage):
    """
    Redis-backed durable storage. Keys are namespaced with ``key_prefix``.
    """

    def __init__(self, url: str, key_prefix: str = "autoparts:", client: Optional[redis.Redis] = None) -> None:
        self._client = client if client is not None else redis.from_url(url, decode_responses=True)
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            raw = self._client.get(self._key(key))
        except redis.RedisError as e:
            raise PersistenceError(f"Redis read failed for {key!r}: {e}", key=key) from e
        if raw is None:
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else raw

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(self._key(key), value)
        except redis.RedisError as e:
            raise PersistenceError(f"Redis write failed for {key!r}: {e}", key=key) from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._key(key))
        except redis.RedisError as e:
            raise PersistenceError(f"Redis delete failed for {key!r}: {e}", key=key) from e

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
