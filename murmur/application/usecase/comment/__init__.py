"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .list_comments import (
    CommentPage,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)

__all__ = [
    "CommentPage",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
]
