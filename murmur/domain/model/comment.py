"""Comment entity and its read projections.

A comment is created once, never updated, and physically deleted. Threads
are surfaced two levels deep: root comments (no parent) and the direct
replies of each root. A reply to a reply keeps its true ``parent_id`` but
only shows up when that parent's replies are requested.
"""

from typing import Optional

from pydantic import Field

from murmur.domain.model.common import DomainModel
from murmur.domain.value import CommentId, EmailHash, SiteId


class CommentDraft(DomainModel):
    """Fields supplied for a new comment, before the store assigns id/time.

    Required fields may be missing here; the comment service rejects
    incomplete drafts before they reach the store.
    """

    site_id: Optional[SiteId] = None
    parent_id: Optional[CommentId] = None
    content: Optional[str] = None
    author_name: Optional[str] = None
    email: Optional[str] = None
    email_md5: Optional[EmailHash] = None
    ip_address: str = ""
    user_agent: str = ""
    context_url: Optional[str] = None
    is_admin: bool = False

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or blank."""
        required = {
            "site_id": self.site_id,
            "content": self.content,
            "author_name": self.author_name,
            "email_md5": self.email_md5,
        }
        return [
            name
            for name, value in required.items()
            if value is None or (isinstance(value, str) and not value.strip())
        ]


class Comment(DomainModel):
    """Persisted comment.

    ``email``, ``ip_address`` and ``user_agent`` are write-only from the
    public surface; public reads go through :class:`PublicComment`.
    """

    id: CommentId
    site_id: SiteId
    parent_id: Optional[CommentId] = None
    content: str
    author_name: str
    email: Optional[str] = None
    email_md5: EmailHash
    avatar_id: str  # Same value as email_md5, kept for API compatibility
    ip_address: str = ""
    user_agent: str = ""
    context_url: Optional[str] = None
    created_at: int = Field(ge=0)  # Epoch milliseconds
    is_admin: bool = False

    @property
    def is_root(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None

    def to_public(self) -> "PublicComment":
        """Project out the private fields."""
        return PublicComment(
            id=self.id,
            site_id=self.site_id,
            parent_id=self.parent_id,
            content=self.content,
            author_name=self.author_name,
            email_md5=self.email_md5,
            avatar_id=self.avatar_id,
            context_url=self.context_url,
            created_at=self.created_at,
            is_admin=self.is_admin,
        )


class PublicComment(DomainModel):
    """Comment as served to non-admin clients."""

    id: CommentId
    site_id: SiteId
    parent_id: Optional[CommentId] = None
    content: str
    author_name: str
    email_md5: EmailHash
    avatar_id: str
    context_url: Optional[str] = None
    created_at: int
    is_admin: bool = False


class ThreadedComment(PublicComment):
    """Root comment preview: reply count plus one promoted admin reply."""

    reply_count: int = Field(default=0, ge=0)
    admin_reply: Optional[PublicComment] = None


class RootPage(DomainModel):
    """One page of root comments for a site."""

    comments: list[ThreadedComment]
    total: int
    page: int
    page_size: int


class ReplyPage(DomainModel):
    """Keyset-paginated slice of a comment's direct replies."""

    replies: list[PublicComment]
    has_more: bool
    last_id: Optional[CommentId] = None


class CommentAuthor(DomainModel):
    """Contact details of a comment's author; internal use only."""

    email: Optional[str] = None
    author_name: str
