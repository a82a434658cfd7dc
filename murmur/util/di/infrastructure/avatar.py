"""Avatar infrastructure providers."""

from dishka import Scope, provide

from murmur.adapter.avatar import GravatarProvider, QQAvatarProvider
from murmur.config import Settings
from murmur.domain.service import AvatarProvider
from murmur.util.di.base import ProviderBase


class AvatarComponentProvider(ProviderBase):
    """Avatar component base."""

    __mock_component__ = "avatar"


class ProdAvatarProvider(AvatarComponentProvider):
    """Production avatar providers, in priority order."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_avatar_providers(self, settings: Settings) -> list[AvatarProvider]:
        """Provide QQ first, then Gravatar."""
        return [
            QQAvatarProvider(timeout=settings.avatar.timeout),
            GravatarProvider(timeout=settings.avatar.timeout),
        ]

