"""Redis implementation of the key-value store."""

from typing import Optional

import redis.asyncio as redis

from murmur.config import KeyValueSettings
from murmur.domain.repository import KeyValueStore


def create_redis_client(settings: KeyValueSettings) -> redis.Redis:
    """Create an async Redis client.

    Responses are left as bytes since the store holds both text values and
    image data.

    Args:
        settings: Key-value store settings

    Returns:
        Redis client backed by a connection pool
    """
    return redis.from_url(
        settings.url,
        socket_timeout=settings.socket_timeout,
        socket_connect_timeout=settings.socket_timeout,
        decode_responses=False,
    )


class RedisKeyValueStore(KeyValueStore):
    """Redis implementation of KeyValueStore."""

    def __init__(self, client: redis.Redis) -> None:
        """Initialize store with a Redis client.

        Args:
            client: Async Redis client
        """
        self.client = client

    async def get(self, key: str) -> Optional[str]:
        """Get a text value."""
        value = await self.client.get(key)
        return value.decode("utf-8") if value is not None else None

    async def get_bytes(self, key: str) -> Optional[bytes]:
        """Get a binary value."""
        return await self.client.get(key)

    async def put(
        self, key: str, value: str | bytes, ttl_seconds: Optional[int] = None
    ) -> None:
        """Store a value with an optional expiry."""
        await self.client.set(key, value, ex=ttl_seconds)

    async def delete(self, key: str) -> None:
        """Remove a key."""
        await self.client.delete(key)

    async def exists(self, key: str) -> bool:
        """Whether a key is present."""
        return bool(await self.client.exists(key))

    async def incr(self, key: str, ttl_seconds: int) -> int:
        """Increment a counter; the first increment starts its expiry."""
        current = await self.client.incr(key)
        if current == 1:
            await self.client.expire(key, ttl_seconds)
        return current
