"""Admin comment listing use case."""

from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.model import Comment
from murmur.domain.service import CommentService
from murmur.domain.value import SiteId


class ListAdminCommentsRequest(BaseModel):
    """Admin comment listing request."""

    email: str | None = None
    site_id: str | None = None


class ListAdminCommentsUseCase(BaseUseCase[ListAdminCommentsRequest, list[Comment]]):
    """Use case for the moderation list.

    Returns full rows, private fields included; only reachable with an
    admin token.
    """

    def __init__(self, comment_service: CommentService, limit: int) -> None:
        """Initialize admin list use case.

        Args:
            comment_service: Comment domain service
            limit: Maximum rows returned
        """
        self.comment_service = comment_service
        self.limit = limit

    async def execute(self, request: ListAdminCommentsRequest) -> list[Comment]:
        """Execute admin list flow."""
        return await self.comment_service.list_for_admin(
            email=request.email or None,
            site_id=SiteId(request.site_id) if request.site_id else None,
            limit=self.limit,
        )
