"""Key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Key-value store with per-key expiry.

    Holds login codes, freshness tokens, rate-limit counters and cached
    avatar images.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a text value, or None when absent or expired."""
        pass

    @abstractmethod
    async def get_bytes(self, key: str) -> Optional[bytes]:
        """Get a binary value, or None when absent or expired."""
        pass

    @abstractmethod
    async def put(
        self, key: str, value: str | bytes, ttl_seconds: Optional[int] = None
    ) -> None:
        """Store a value, replacing any previous one and its expiry."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key if present."""
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Whether a non-expired value is stored under the key."""
        pass

    @abstractmethod
    async def incr(self, key: str, ttl_seconds: int) -> int:
        """Increment an integer counter.

        The expiry is set only when the increment creates the key, so a
        counter lives for one fixed window.

        Returns:
            Counter value after the increment
        """
        pass
