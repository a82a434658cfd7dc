"""Get avatar image use case."""

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.error import NotFoundError
from murmur.domain.service import AvatarService


class GetAvatarUseCase(BaseUseCase[str, bytes]):
    """Use case for serving a cached avatar image."""

    def __init__(self, avatar_service: AvatarService) -> None:
        """Initialize get avatar use case.

        Args:
            avatar_service: Avatar domain service
        """
        self.avatar_service = avatar_service

    async def execute(self, request: str) -> bytes:
        """Get the image cached for an avatar id.

        Raises:
            NotFoundError: If no image is cached
        """
        image = await self.avatar_service.get_image(request)
        if image is None:
            raise NotFoundError("avatar", request)
        return image
