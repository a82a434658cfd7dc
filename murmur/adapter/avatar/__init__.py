"""Avatar image providers."""

from .providers import GravatarProvider, QQAvatarProvider, StaticAvatarProvider

__all__ = ["GravatarProvider", "QQAvatarProvider", "StaticAvatarProvider"]
