"""Admin comment deletion use cases."""

import logfire
from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase, RequestT
from murmur.domain.error import ValidationError
from murmur.domain.repository import TransactionManager
from murmur.domain.service import CommentService, FreshnessService
from murmur.domain.value import CommentId, SiteId
from murmur.util.background import BackgroundTaskQueue


class DeleteCommentsResponse(BaseModel):
    """Deletion response."""

    success: bool = True
    deleted: int
    message: str | None = None


class BatchDeleteRequest(BaseModel):
    """Batch delete request; ``email`` wins when both are given."""

    ids: list[int] | None = None
    email: str | None = None


class _DeletionUseCase(BaseUseCase[RequestT, DeleteCommentsResponse]):
    """Shared commit-then-invalidate tail of every deletion."""

    def __init__(
        self,
        comment_service: CommentService,
        freshness_service: FreshnessService,
        transaction_manager: TransactionManager,
        background: BackgroundTaskQueue,
    ) -> None:
        """Initialize deletion use case.

        Args:
            comment_service: Comment domain service
            freshness_service: Freshness token domain service
            transaction_manager: Commits the deletion
            background: Post-response job queue
        """
        self.comment_service = comment_service
        self.freshness_service = freshness_service
        self.transaction_manager = transaction_manager
        self.background = background

    async def _finish(self, site_ids: list[SiteId]) -> None:
        await self.transaction_manager.commit()
        if site_ids:
            self.background.schedule(
                "invalidate_freshness",
                self.freshness_service.invalidate_many,
                site_ids,
            )


class DeleteCommentUseCase(_DeletionUseCase[int]):
    """Use case for deleting one comment."""

    async def execute(self, request: int) -> DeleteCommentsResponse:
        """Delete one comment by id.

        Deleting an unknown id succeeds with ``deleted == 0``.
        """
        site_ids = await self.comment_service.delete_comment(CommentId(request))
        await self._finish(site_ids)
        return DeleteCommentsResponse(deleted=len(site_ids))


class BatchDeleteUseCase(_DeletionUseCase[BatchDeleteRequest]):
    """Use case for deleting by identity hash or by explicit ids."""

    async def execute(self, request: BatchDeleteRequest) -> DeleteCommentsResponse:
        """Execute batch delete flow.

        Raises:
            ValidationError: If neither ids nor email were supplied
        """
        if request.email and request.email.strip():
            site_ids = await self.comment_service.delete_by_email(request.email)
            message = f"Deleted comments for {request.email.strip()}"
        elif request.ids:
            site_ids = await self.comment_service.delete_by_ids(
                [CommentId(comment_id) for comment_id in request.ids]
            )
            message = f"Deleted {len(site_ids)} comments"
        else:
            raise ValidationError("Missing ids or email")

        await self._finish(site_ids)
        logfire.info(
            "Batch delete completed",
            deleted=len(site_ids),
            sites=len(set(site_ids)),
        )
        return DeleteCommentsResponse(deleted=len(site_ids), message=message)
