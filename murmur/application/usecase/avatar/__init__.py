"""Avatar use cases."""

from .get_avatar import GetAvatarUseCase

__all__ = ["GetAvatarUseCase"]
