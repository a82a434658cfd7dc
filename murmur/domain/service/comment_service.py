"""Comment domain service."""

import logfire

from murmur.domain.error import ValidationError
from murmur.domain.model.comment import (
    Comment,
    CommentAuthor,
    CommentDraft,
    ReplyPage,
)
from murmur.domain.repository import CommentRepository
from murmur.domain.value import CommentId, EmailHash, SiteId

from .base import Service


class CommentService(Service):
    """Domain service for comment storage operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(self, draft: CommentDraft) -> Comment:
        """Store a new comment.

        The caller is responsible for invalidating the site's freshness
        token once the insert is committed.

        Args:
            draft: Comment fields supplied by the client

        Returns:
            Stored comment with id and created_at assigned

        Raises:
            ValidationError: If a required field is missing
        """
        with logfire.span(
            "comment_service.create_comment",
            site_id=draft.site_id,
            parent_id=draft.parent_id,
            is_admin=draft.is_admin,
        ):
            missing = draft.missing_fields()
            if missing:
                logfire.warn("Comment draft incomplete", missing=missing)
                raise ValidationError(
                    f"Missing required fields: {', '.join(missing)}"
                )

            comment = await self.comment_repository.insert(draft)
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                site_id=comment.site_id,
                parent_id=comment.parent_id,
                email_md5=str(comment.email_md5),
            )
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_replies(
        self,
        parent_id: CommentId,
        cursor: CommentId | None,
        limit: int,
    ) -> ReplyPage:
        """Get one page of a comment's direct replies.

        Keyset pagination: only replies with ``id < cursor`` are returned,
        newest-inserted first. One extra row is fetched to tell whether
        another page exists.

        Args:
            parent_id: Parent comment ID
            cursor: ``last_id`` of the previous page, if any
            limit: Page size

        Returns:
            Reply page with ``has_more`` and the next cursor
        """
        with logfire.span(
            "comment_service.get_replies",
            parent_id=parent_id,
            cursor=cursor,
            limit=limit,
        ):
            rows = await self.comment_repository.find_replies(
                parent_id=parent_id,
                before_id=cursor,
                limit=limit + 1,
            )
            has_more = len(rows) > limit
            replies = rows[:limit]

            return ReplyPage(
                replies=[reply.to_public() for reply in replies],
                has_more=has_more,
                last_id=replies[-1].id if replies else None,
            )

    async def get_author(self, comment_id: CommentId) -> CommentAuthor | None:
        """Get the author contact details of a comment.

        Only used to route reply notifications; never served to clients.
        """
        return await self.comment_repository.find_author(comment_id)

    async def list_for_admin(
        self,
        email: str | None,
        site_id: SiteId | None,
        limit: int,
    ) -> list[Comment]:
        """List comments for moderation.

        Filtering by email compares identity hashes, never raw addresses.

        Args:
            email: Optional author email
            site_id: Optional site filter
            limit: Maximum rows

        Returns:
            Matching comments, newest first
        """
        email_hash = EmailHash.from_email(email) if email else None
        with logfire.span(
            "comment_service.list_for_admin",
            email_md5=str(email_hash) if email_hash else None,
            site_id=site_id,
        ):
            comments = await self.comment_repository.find_for_admin(
                email_hash=email_hash,
                site_id=site_id,
                limit=limit,
            )
            logfire.info("Admin comments listed", count=len(comments))
            return comments

    async def delete_comment(self, comment_id: CommentId) -> list[SiteId]:
        """Delete one comment.

        Returns:
            Affected site IDs
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            site_ids = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted", comment_id=comment_id, deleted=len(site_ids)
            )
            return site_ids

    async def delete_by_email(self, email: str) -> list[SiteId]:
        """Delete every comment whose identity hash matches the email.

        Returns:
            Site ID of every deleted row (may span several sites)
        """
        email_hash = EmailHash.from_email(email)
        with logfire.span(
            "comment_service.delete_by_email", email_md5=str(email_hash)
        ):
            site_ids = await self.comment_repository.delete_by_email_hash(email_hash)
            logfire.info(
                "Comments deleted by identity hash",
                email_md5=str(email_hash),
                deleted=len(site_ids),
            )
            return site_ids

    async def delete_by_ids(self, comment_ids: list[CommentId]) -> list[SiteId]:
        """Delete an explicit set of comments.

        Returns:
            Site ID of every deleted row (may span several sites)
        """
        with logfire.span("comment_service.delete_by_ids", count=len(comment_ids)):
            if not comment_ids:
                return []
            site_ids = await self.comment_repository.delete_by_ids(comment_ids)
            logfire.info("Comments deleted by id", deleted=len(site_ids))
            return site_ids
