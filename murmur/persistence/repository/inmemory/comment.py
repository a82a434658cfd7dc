"""In-memory comment repository for testing."""

import time
from typing import Optional

from murmur.domain.model.comment import Comment, CommentAuthor, CommentDraft
from murmur.domain.repository.comment import CommentRepository
from murmur.domain.value import CommentId, EmailHash, SiteId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1
        self._last_created_at = 0

    def _now_ms(self) -> int:
        # Keep insert order and created_at order in agreement
        now = max(int(time.time() * 1000), self._last_created_at + 1)
        self._last_created_at = now
        return now

    @staticmethod
    def _newest_first(comments: list[Comment]) -> list[Comment]:
        return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    async def insert(self, draft: CommentDraft) -> Comment:
        """Insert a new comment."""
        comment = Comment(
            id=CommentId(self._next_id),
            site_id=draft.site_id,
            parent_id=draft.parent_id,
            content=draft.content,
            author_name=draft.author_name,
            email=draft.email,
            email_md5=draft.email_md5,
            avatar_id=str(draft.email_md5),
            ip_address=draft.ip_address,
            user_agent=draft.user_agent,
            context_url=draft.context_url,
            created_at=self._now_ms(),
            is_admin=draft.is_admin,
        )
        self._next_id += 1
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_root_page(
        self,
        site_id: SiteId,
        page: int,
        page_size: int,
        context_url: Optional[str] = None,
    ) -> tuple[list[Comment], int]:
        """Find one page of root comments, newest first."""
        roots = [
            c
            for c in self._comments.values()
            if c.site_id == site_id
            and c.parent_id is None
            and (context_url is None or c.context_url == context_url)
        ]
        roots = self._newest_first(roots)
        offset = (page - 1) * page_size
        return roots[offset : offset + page_size], len(roots)

    async def count_replies(self, parent_ids: list[CommentId]) -> dict[CommentId, int]:
        """Count direct replies of each parent."""
        wanted = set(parent_ids)
        counts: dict[CommentId, int] = {}
        for c in self._comments.values():
            if c.parent_id in wanted:
                counts[c.parent_id] = counts.get(c.parent_id, 0) + 1
        return counts

    async def find_first_admin_replies(
        self, parent_ids: list[CommentId]
    ) -> dict[CommentId, Comment]:
        """Find the earliest admin reply of each parent."""
        wanted = set(parent_ids)
        replies: dict[CommentId, Comment] = {}
        for c in sorted(self._comments.values(), key=lambda c: (c.created_at, c.id)):
            if c.is_admin and c.parent_id in wanted and c.parent_id not in replies:
                replies[c.parent_id] = c
        return replies

    async def find_replies(
        self,
        parent_id: CommentId,
        before_id: Optional[CommentId],
        limit: int,
    ) -> list[Comment]:
        """Find direct replies by descending id."""
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and (before_id is None or c.id < before_id)
        ]
        replies.sort(key=lambda c: c.id, reverse=True)
        return replies[:limit]

    async def find_author(self, comment_id: CommentId) -> Optional[CommentAuthor]:
        """Find the author contact details of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        return CommentAuthor(email=comment.email, author_name=comment.author_name)

    async def find_for_admin(
        self,
        email_hash: Optional[EmailHash],
        site_id: Optional[SiteId],
        limit: int,
    ) -> list[Comment]:
        """Find comments for moderation, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if (email_hash is None or c.email_md5 == email_hash)
            and (site_id is None or c.site_id == site_id)
        ]
        return self._newest_first(comments)[:limit]

    def _pop_where(self, predicate) -> list[SiteId]:
        doomed = [c for c in self._comments.values() if predicate(c)]
        for c in doomed:
            del self._comments[c.id]
        return [c.site_id for c in doomed]

    async def delete(self, comment_id: CommentId) -> list[SiteId]:
        """Delete a comment."""
        return self._pop_where(lambda c: c.id == comment_id)

    async def delete_by_email_hash(self, email_hash: EmailHash) -> list[SiteId]:
        """Delete every comment with the identity hash."""
        return self._pop_where(lambda c: c.email_md5 == email_hash)

    async def delete_by_ids(self, comment_ids: list[CommentId]) -> list[SiteId]:
        """Delete an explicit set of comments."""
        wanted = set(comment_ids)
        return self._pop_where(lambda c: c.id in wanted)
