"""Avatar image providers.

Providers only report an image when the upstream answers HTTP 200; any
other status or transport failure means "no avatar here".
"""

import re

import httpx
import logfire

from murmur.domain.service.avatar_service import AvatarProvider
from murmur.domain.value import EmailHash

QQ_EMAIL_PATTERN = re.compile(r"^(\d+)@qq\.com$")


async def _fetch_image(url: str, timeout: float, provider: str) -> bytes | None:
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(url, timeout=timeout)
    except httpx.HTTPError as e:
        logfire.warn("Avatar fetch failed", provider=provider, error=str(e))
        return None

    if response.status_code != 200:
        logfire.debug(
            "Avatar not available", provider=provider, status_code=response.status_code
        )
        return None
    return response.content


class QQAvatarProvider(AvatarProvider):
    """QQ avatars for numeric ``@qq.com`` addresses."""

    name = "qq"

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout

    @staticmethod
    def avatar_url(email: str) -> str | None:
        """QQ avatar URL for an email, or None if it is not a QQ number."""
        match = QQ_EMAIL_PATTERN.match(email.strip().lower())
        if not match:
            return None
        return f"https://q1.qlogo.cn/g?b=qq&nk={match.group(1)}&s=100"

    async def fetch(self, email: str, email_hash: EmailHash) -> bytes | None:
        """Fetch the QQ avatar."""
        url = self.avatar_url(email)
        if url is None:
            return None
        return await _fetch_image(url, self.timeout, self.name)


class GravatarProvider(AvatarProvider):
    """Gravatar lookup by identity hash; ``d=404`` makes misses explicit."""

    name = "gravatar"

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout

    @staticmethod
    def avatar_url(email_hash: EmailHash) -> str:
        """Gravatar URL for an identity hash."""
        return f"https://www.gravatar.com/avatar/{email_hash}?d=404"

    async def fetch(self, email: str, email_hash: EmailHash) -> bytes | None:
        """Fetch the Gravatar image."""
        return await _fetch_image(self.avatar_url(email_hash), self.timeout, self.name)


class StaticAvatarProvider(AvatarProvider):
    """Serves fixed images from memory, for testing.

    Args:
        images: Mapping of normalized email to image bytes
    """

    name = "static"

    def __init__(self, images: dict[str, bytes] | None = None) -> None:
        self.images = images or {}
        self.fetches: list[str] = []

    async def fetch(self, email: str, email_hash: EmailHash) -> bytes | None:
        """Return the configured image, if any."""
        self.fetches.append(str(email_hash))
        return self.images.get(email.strip().lower())
