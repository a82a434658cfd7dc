"""Get replies use case."""

from pydantic import BaseModel, ConfigDict, Field

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.model import PublicComment
from murmur.domain.service import CommentService
from murmur.domain.value import CommentId


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    parent_id: int
    last_id: int | None = None
    limit: int = Field(default=10, ge=1, le=100)


class GetRepliesResponse(BaseModel):
    """Get replies response, in the widget's wire format."""

    model_config = ConfigDict(populate_by_name=True)

    replies: list[PublicComment]
    has_more: bool = Field(serialization_alias="hasMore")
    last_id: int | None = Field(default=None, serialization_alias="lastId")


class GetRepliesUseCase(BaseUseCase[GetRepliesRequest, GetRepliesResponse]):
    """Use case for cursor-paginated reply listing."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get replies use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow."""
        reply_page = await self.comment_service.get_replies(
            parent_id=CommentId(request.parent_id),
            cursor=CommentId(request.last_id) if request.last_id is not None else None,
            limit=request.limit,
        )
        return GetRepliesResponse(
            replies=reply_page.replies,
            has_more=reply_page.has_more,
            last_id=reply_page.last_id,
        )
