"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from murmur.domain.model import Comment, CommentAuthor, CommentDraft
from murmur.domain.value import CommentId, EmailHash, SiteId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        site_id=SiteId(row["site_id"]),
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        content=row["content"],
        author_name=row["author_name"],
        email=row.get("email"),
        email_md5=EmailHash(row["email_md5"]),
        avatar_id=row["avatar_id"],
        ip_address=row.get("ip_address") or "",
        user_agent=row.get("user_agent") or "",
        context_url=row.get("context_url"),
        created_at=int(row["created_at"]),
        is_admin=bool(row.get("is_admin", False)),
    )


def row_to_author(row: Dict[str, Any]) -> CommentAuthor:
    """Convert database row to CommentAuthor."""
    return CommentAuthor(email=row.get("email"), author_name=row["author_name"])


def draft_to_dict(draft: CommentDraft, created_at: int) -> Dict[str, Any]:
    """Convert a complete comment draft to a database dict for insertion.

    Args:
        draft: Validated comment draft
        created_at: Insert time in epoch milliseconds

    Returns:
        Dict suitable for database insertion
    """
    email_md5 = str(draft.email_md5)
    return {
        "site_id": draft.site_id,
        "parent_id": draft.parent_id,
        "content": draft.content,
        "author_name": draft.author_name,
        "email": draft.email,
        "email_md5": email_md5,
        "avatar_id": email_md5,
        "ip_address": draft.ip_address,
        "user_agent": draft.user_agent,
        "context_url": draft.context_url,
        "created_at": created_at,
        "is_admin": draft.is_admin,
    }
