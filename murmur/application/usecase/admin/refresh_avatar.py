"""Admin avatar refresh use case."""

from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.error import ValidationError
from murmur.domain.service import AvatarService


class RefreshAvatarRequest(BaseModel):
    """Avatar refresh request."""

    email: str | None = None


class RefreshAvatarResponse(BaseModel):
    """Avatar refresh response."""

    success: bool = True
    avatar_id: str
    cached: bool


class RefreshAvatarUseCase(BaseUseCase[RefreshAvatarRequest, RefreshAvatarResponse]):
    """Use case for re-fetching an avatar, ignoring any cached image."""

    def __init__(self, avatar_service: AvatarService) -> None:
        """Initialize refresh avatar use case.

        Args:
            avatar_service: Avatar domain service
        """
        self.avatar_service = avatar_service

    async def execute(self, request: RefreshAvatarRequest) -> RefreshAvatarResponse:
        """Execute refresh flow.

        Raises:
            ValidationError: If no email was supplied
        """
        if not request.email or not request.email.strip():
            raise ValidationError("Email required")

        cached = await self.avatar_service.refresh(request.email, force=True)
        return RefreshAvatarResponse(
            avatar_id=str(self.avatar_service.avatar_id(request.email)),
            cached=cached,
        )
