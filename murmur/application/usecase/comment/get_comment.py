"""Get single comment use case."""

from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.error import NotFoundError
from murmur.domain.model import PublicComment
from murmur.domain.service import CommentService
from murmur.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentUseCase(BaseUseCase[GetCommentRequest, PublicComment]):
    """Use case for deep-linking to one comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> PublicComment:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        if comment is None:
            raise NotFoundError("comment", request.comment_id)
        return comment.to_public()
