"""Per-site freshness tokens for conditional listing requests."""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Callable

import logfire

from murmur.domain.repository import KeyValueStore
from murmur.domain.value import SiteId

from .base import Service


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_http_date(moment: datetime) -> str:
    """Format a datetime as an IMF-fixdate HTTP date."""
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def parse_http_date(value: str) -> datetime | None:
    """Parse an HTTP date, returning None when malformed."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class FreshnessService(Service):
    """Last-modified token per site, held in the key-value store.

    Every mutation of a site's comments overwrites the token, so any
    client holding the previous token gets fresh data. Invalidation is
    site-wide, not per comment.
    """

    KEY_PREFIX = "cache:site:"

    def __init__(
        self,
        kv_store: KeyValueStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize freshness service.

        Args:
            kv_store: Key-value store holding the tokens
            clock: Source of the current time
        """
        self.kv_store = kv_store
        self.clock = clock

    def _key(self, site_id: SiteId) -> str:
        return f"{self.KEY_PREFIX}{site_id}"

    async def get_token(self, site_id: SiteId) -> str | None:
        """Get the stored token for a site, if any."""
        return await self.kv_store.get(self._key(site_id))

    async def current_token(self, site_id: SiteId) -> str:
        """Get the site's token, creating it on first read."""
        token = await self.get_token(site_id)
        if token is None:
            token = format_http_date(self.clock())
            await self.kv_store.put(self._key(site_id), token)
            logfire.info("Freshness token created", site_id=site_id, token=token)
        return token

    async def is_not_modified(self, site_id: SiteId, if_modified_since: str | None) -> bool:
        """Whether a conditional request matches the stored token exactly."""
        if not if_modified_since:
            return False
        token = await self.get_token(site_id)
        return token is not None and token == if_modified_since

    async def invalidate(self, site_id: SiteId) -> str:
        """Replace a site's token after a committed mutation.

        HTTP dates have one-second resolution; when the new token would not
        be later than the stored one, it is moved one second past it so that
        every mutation produces a different token.

        Returns:
            The new token
        """
        now = self.clock().replace(microsecond=0)
        previous = await self.get_token(site_id)
        if previous is not None:
            previous_moment = parse_http_date(previous)
            if previous_moment is not None and now <= previous_moment:
                now = previous_moment + timedelta(seconds=1)

        token = format_http_date(now)
        await self.kv_store.put(self._key(site_id), token)
        logfire.info("Freshness token invalidated", site_id=site_id, token=token)
        return token

    async def invalidate_many(self, site_ids: list[SiteId]) -> None:
        """Invalidate each distinct site once."""
        for site_id in dict.fromkeys(site_ids):
            await self.invalidate(site_id)
