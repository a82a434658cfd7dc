"""Domain model entities for the comment widget."""

from murmur.domain.model.comment import (
    Comment,
    CommentAuthor,
    CommentDraft,
    PublicComment,
    ReplyPage,
    RootPage,
    ThreadedComment,
)

__all__ = [
    "Comment",
    "CommentAuthor",
    "CommentDraft",
    "PublicComment",
    "ReplyPage",
    "RootPage",
    "ThreadedComment",
]
