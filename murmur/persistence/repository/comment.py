"""PostgreSQL implementation of Comment repository."""

import time
from typing import Optional

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from murmur.domain.model import Comment, CommentAuthor, CommentDraft
from murmur.domain.repository import CommentRepository
from murmur.domain.value import CommentId, EmailHash, SiteId
from murmur.persistence.mappers import draft_to_dict, row_to_author, row_to_comment
from murmur.persistence.tables import comments_table


def _now_ms() -> int:
    return int(time.time() * 1000)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, draft: CommentDraft) -> Comment:
        """Insert a new comment and return the stored row."""
        stmt = (
            comments_table.insert()
            .values(**draft_to_dict(draft, created_at=_now_ms()))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_root_page(
        self,
        site_id: SiteId,
        page: int,
        page_size: int,
        context_url: Optional[str] = None,
    ) -> tuple[list[Comment], int]:
        """Find one page of root comments, newest first, plus the root total."""
        conditions = [
            comments_table.c.site_id == site_id,
            comments_table.c.parent_id.is_(None),
        ]
        if context_url is not None:
            conditions.append(comments_table.c.context_url == context_url)

        stmt = (
            select(comments_table)
            .where(and_(*conditions))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(page_size)
            .offset((page - 1) * page_size)
        )
        result = await self.session.execute(stmt)
        comments = [row_to_comment(row._asdict()) for row in result.fetchall()]

        count_stmt = (
            select(func.count()).select_from(comments_table).where(and_(*conditions))
        )
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar() or 0

        return comments, total

    async def count_replies(self, parent_ids: list[CommentId]) -> dict[CommentId, int]:
        """Count direct replies of each parent in one grouped query."""
        if not parent_ids:
            return {}
        stmt = (
            select(comments_table.c.parent_id, func.count().label("count"))
            .where(comments_table.c.parent_id.in_(parent_ids))
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        return {CommentId(row.parent_id): row.count for row in result.fetchall()}

    async def find_first_admin_replies(
        self, parent_ids: list[CommentId]
    ) -> dict[CommentId, Comment]:
        """Find the earliest admin reply of each parent in one ranked query."""
        if not parent_ids:
            return {}
        rank = (
            func.row_number()
            .over(
                partition_by=comments_table.c.parent_id,
                order_by=(comments_table.c.created_at, comments_table.c.id),
            )
            .label("rank")
        )
        ranked = (
            select(comments_table, rank)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .where(comments_table.c.is_admin.is_(True))
            .subquery()
        )
        stmt = select(ranked).where(ranked.c.rank == 1)
        result = await self.session.execute(stmt)

        replies = {}
        for row in result.fetchall():
            comment = row_to_comment(row._asdict())
            replies[comment.parent_id] = comment
        return replies

    async def find_replies(
        self,
        parent_id: CommentId,
        before_id: Optional[CommentId],
        limit: int,
    ) -> list[Comment]:
        """Find direct replies by descending id, below an optional cursor."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)
        if before_id is not None:
            stmt = stmt.where(comments_table.c.id < before_id)
        stmt = stmt.order_by(desc(comments_table.c.id)).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_author(self, comment_id: CommentId) -> Optional[CommentAuthor]:
        """Find the author contact details of a comment."""
        stmt = select(
            comments_table.c.email, comments_table.c.author_name
        ).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_author(row._asdict()) if row else None

    async def find_for_admin(
        self,
        email_hash: Optional[EmailHash],
        site_id: Optional[SiteId],
        limit: int,
    ) -> list[Comment]:
        """Find comments for moderation, newest first."""
        stmt = select(comments_table)
        if email_hash is not None:
            stmt = stmt.where(comments_table.c.email_md5 == str(email_hash))
        if site_id is not None:
            stmt = stmt.where(comments_table.c.site_id == site_id)
        stmt = stmt.order_by(
            desc(comments_table.c.created_at), desc(comments_table.c.id)
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def _delete_where(self, condition) -> list[SiteId]:
        stmt = delete(comments_table).where(condition).returning(comments_table.c.site_id)
        result = await self.session.execute(stmt)
        site_ids = [SiteId(row.site_id) for row in result.fetchall()]
        await self.session.flush()
        return site_ids

    async def delete(self, comment_id: CommentId) -> list[SiteId]:
        """Delete a comment (hard delete)."""
        return await self._delete_where(comments_table.c.id == comment_id)

    async def delete_by_email_hash(self, email_hash: EmailHash) -> list[SiteId]:
        """Delete every comment with the identity hash, on every site."""
        return await self._delete_where(comments_table.c.email_md5 == str(email_hash))

    async def delete_by_ids(self, comment_ids: list[CommentId]) -> list[SiteId]:
        """Delete an explicit set of comments."""
        if not comment_ids:
            return []
        return await self._delete_where(comments_table.c.id.in_(comment_ids))
