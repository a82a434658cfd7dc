"""Avatar resolution domain service."""

import re

import logfire

from murmur.domain.repository import KeyValueStore
from murmur.domain.value import EmailHash

from .base import Service


class AvatarProvider:
    """Generic avatar image source."""

    name: str = "provider"

    async def fetch(self, email: str, email_hash: EmailHash) -> bytes | None:
        """Fetch the avatar image for an email.

        Args:
            email: Commenter email as submitted
            email_hash: Identity hash of the email

        Returns:
            Raw image bytes when the provider answered 200, None otherwise
        """
        raise NotImplementedError


class AvatarService(Service):
    """Resolves and caches avatar images keyed by identity hash.

    ``avatar_id`` is a pure hash, available immediately for the insert;
    fetching the image is done out of band with :meth:`refresh`.
    Providers are tried in order and the first one returning an image
    wins. A missing image stays uncached; the delivery endpoint answers 404
    and the widget shows a placeholder.
    """

    KEY_PREFIX = "avatar:"
    AVATAR_ID_PATTERN = re.compile(r"[0-9a-f]{32}")

    def __init__(
        self,
        kv_store: KeyValueStore,
        providers: list[AvatarProvider],
        cache_ttl_seconds: int,
    ) -> None:
        """Initialize avatar service.

        Args:
            kv_store: Key-value store caching the images
            providers: Avatar providers in priority order
            cache_ttl_seconds: Lifetime of a cached image
        """
        self.kv_store = kv_store
        self.providers = providers
        self.cache_ttl_seconds = cache_ttl_seconds

    def avatar_id(self, email: str) -> EmailHash:
        """Avatar identifier for an email (its identity hash)."""
        return EmailHash.from_email(email)

    def _key(self, avatar_id: str) -> str:
        return f"{self.KEY_PREFIX}{avatar_id}"

    async def refresh(self, email: str, force: bool = False) -> bool:
        """Fetch and cache the avatar for an email.

        Unless forced, an already cached image short-circuits the fetch, so
        several comments from one address in quick succession do not all
        hit the providers. The check is not exclusive; two racing requests
        may both fetch.

        Args:
            email: Commenter email
            force: Re-fetch even when an image is cached

        Returns:
            True when an image is cached after the call
        """
        email_hash = self.avatar_id(email)
        avatar_id = str(email_hash)
        key = self._key(avatar_id)

        with logfire.span("avatar_service.refresh", email_md5=avatar_id, force=force):
            if not force and await self.kv_store.exists(key):
                logfire.debug("Avatar already cached", email_md5=avatar_id)
                return True

            for provider in self.providers:
                image = await provider.fetch(email, email_hash)
                if image:
                    await self.kv_store.put(key, image, ttl_seconds=self.cache_ttl_seconds)
                    logfire.info(
                        "Avatar cached",
                        email_md5=avatar_id,
                        provider=provider.name,
                        size=len(image),
                    )
                    return True

            logfire.info("No avatar found", email_md5=avatar_id)
            return False

    async def get_image(self, avatar_id: str) -> bytes | None:
        """Get a cached avatar image.

        Anything other than a 32-character lowercase hex digest is treated
        as unknown, so only the avatar key space is reachable.
        """
        if not self.AVATAR_ID_PATTERN.fullmatch(avatar_id):
            return None
        return await self.kv_store.get_bytes(self._key(avatar_id))
