"""Mock avatar providers for testing."""

from dishka import Scope, provide

from murmur.adapter.avatar import StaticAvatarProvider
from murmur.domain.service import AvatarProvider
from murmur.util.di.infrastructure.avatar import AvatarComponentProvider

# PNG signature plus filler; only the bytes are compared
PIXEL_PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24

AVATAR_EMAIL = "has-avatar@example.com"


class MockAvatarProvider(AvatarComponentProvider):
    """Mock avatar provider serving one known image."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_avatar_providers(self) -> list[AvatarProvider]:
        """Provide a static provider that knows ``AVATAR_EMAIL``."""
        return [StaticAvatarProvider({AVATAR_EMAIL: PIXEL_PNG})]
