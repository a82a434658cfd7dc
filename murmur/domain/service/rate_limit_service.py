"""Fixed-window rate limiting."""

import logfire

from murmur.domain.error import RateLimitError
from murmur.domain.repository import KeyValueStore

from .base import Service


class RateLimitService(Service):
    """Per-client fixed-window counter kept in the key-value store.

    The first hit of a window creates the counter with the window's TTL;
    bursts straddling a window edge can exceed the limit. ``key_prefix``
    separates independent limits (comment submissions per IP, login code
    attempts per email) sharing one store.
    """

    KEY_PREFIX = "ratelimit:"

    def __init__(
        self,
        kv_store: KeyValueStore,
        max_requests: int,
        window_seconds: int,
        key_prefix: str = KEY_PREFIX,
    ) -> None:
        """Initialize rate limit service.

        Args:
            kv_store: Key-value store holding the counters
            max_requests: Allowed hits per window
            window_seconds: Window length
            key_prefix: Namespace of this limit's counters
        """
        self.kv_store = kv_store
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.key_prefix = key_prefix

    async def hit(self, client_key: str) -> int:
        """Record one request from a client.

        Args:
            client_key: Client being limited (IP address or normalized email)

        Returns:
            Number of requests in the current window

        Raises:
            RateLimitError: If the client exceeded the limit
        """
        count = await self.kv_store.incr(
            f"{self.key_prefix}{client_key}", ttl_seconds=self.window_seconds
        )
        if count > self.max_requests:
            logfire.warn(
                "Rate limit exceeded",
                limit=self.key_prefix.rstrip(":"),
                count=count,
            )
            raise RateLimitError(self.max_requests, self.window_seconds)
        return count
