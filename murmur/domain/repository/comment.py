"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from murmur.domain.model.comment import Comment, CommentAuthor, CommentDraft
from murmur.domain.value import CommentId, EmailHash, SiteId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def insert(self, draft: CommentDraft) -> Comment:
        """Insert a new comment.

        The store assigns ``id`` (monotonically increasing) and
        ``created_at`` (epoch milliseconds). ``avatar_id`` is set to the
        draft's email hash.

        Args:
            draft: Complete comment draft

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_root_page(
        self,
        site_id: SiteId,
        page: int,
        page_size: int,
        context_url: Optional[str] = None,
    ) -> tuple[list[Comment], int]:
        """Find one page of root comments for a site, newest first.

        Args:
            site_id: Site to list
            page: 1-based page number
            page_size: Rows per page
            context_url: When given, only roots posted from exactly this URL

        Returns:
            Tuple of (comments ordered by created_at descending, total root
            count for the same filter)
        """
        pass

    @abstractmethod
    async def count_replies(self, parent_ids: list[CommentId]) -> dict[CommentId, int]:
        """Count direct replies of each parent.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Mapping of parent ID to reply count; parents without replies
            may be absent
        """
        pass

    @abstractmethod
    async def find_first_admin_replies(
        self, parent_ids: list[CommentId]
    ) -> dict[CommentId, Comment]:
        """Find the earliest admin reply (by created_at) of each parent.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Mapping of parent ID to its earliest admin reply
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        before_id: Optional[CommentId],
        limit: int,
    ) -> list[Comment]:
        """Find direct replies of a parent, newest-inserted first.

        Args:
            parent_id: Parent comment ID
            before_id: Keyset cursor; only rows with ``id < before_id``
            limit: Maximum number of rows

        Returns:
            Replies ordered by id descending
        """
        pass

    @abstractmethod
    async def find_author(self, comment_id: CommentId) -> Optional[CommentAuthor]:
        """Find the author contact details of a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Author email and name if the comment exists
        """
        pass

    @abstractmethod
    async def find_for_admin(
        self,
        email_hash: Optional[EmailHash],
        site_id: Optional[SiteId],
        limit: int,
    ) -> list[Comment]:
        """Find comments for moderation, newest first.

        Args:
            email_hash: Only comments whose identity hash matches
            site_id: Only comments of this site
            limit: Maximum number of rows

        Returns:
            Matching comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> list[SiteId]:
        """Delete a single comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            Site IDs of deleted rows (empty when nothing matched)
        """
        pass

    @abstractmethod
    async def delete_by_email_hash(self, email_hash: EmailHash) -> list[SiteId]:
        """Delete every comment with the given identity hash, on every site.

        Args:
            email_hash: Identity hash to match

        Returns:
            Site ID of each deleted row
        """
        pass

    @abstractmethod
    async def delete_by_ids(self, comment_ids: list[CommentId]) -> list[SiteId]:
        """Delete an explicit set of comments.

        Args:
            comment_ids: Comment IDs to delete

        Returns:
            Site ID of each deleted row
        """
        pass
