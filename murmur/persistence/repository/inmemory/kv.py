"""In-memory key-value store for testing."""

import time
from typing import Callable, Optional

from murmur.domain.repository.kv import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of KeyValueStore for testing.

    Expiry is evaluated lazily on access against ``clock``, so tests can
    move time forward without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._values: dict[str, tuple[str | bytes | int, Optional[float]]] = {}

    def _live(self, key: str) -> Optional[str | bytes | int]:
        entry = self._values.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self.clock() >= expires_at:
            del self._values[key]
            return None
        return value

    def _expiry(self, ttl_seconds: Optional[int]) -> Optional[float]:
        return self.clock() + ttl_seconds if ttl_seconds is not None else None

    async def get(self, key: str) -> Optional[str]:
        """Get a text value."""
        value = self._live(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    async def get_bytes(self, key: str) -> Optional[bytes]:
        """Get a binary value."""
        value = self._live(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value
        return str(value).encode("utf-8")

    async def put(
        self, key: str, value: str | bytes, ttl_seconds: Optional[int] = None
    ) -> None:
        """Store a value."""
        self._values[key] = (value, self._expiry(ttl_seconds))

    async def delete(self, key: str) -> None:
        """Remove a key."""
        self._values.pop(key, None)

    async def exists(self, key: str) -> bool:
        """Whether a key is present."""
        return self._live(key) is not None

    async def incr(self, key: str, ttl_seconds: int) -> int:
        """Increment a counter; the first increment starts its expiry."""
        current = self._live(key)
        if current is None:
            self._values[key] = (1, self._expiry(ttl_seconds))
            return 1
        _, expires_at = self._values[key]
        count = int(current) + 1
        self._values[key] = (count, expires_at)
        return count
