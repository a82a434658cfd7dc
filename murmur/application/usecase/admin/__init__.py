"""Admin use cases."""

from .delete_comments import (
    BatchDeleteRequest,
    BatchDeleteUseCase,
    DeleteCommentsResponse,
    DeleteCommentUseCase,
)
from .list_comments import ListAdminCommentsRequest, ListAdminCommentsUseCase
from .refresh_avatar import (
    RefreshAvatarRequest,
    RefreshAvatarResponse,
    RefreshAvatarUseCase,
)

__all__ = [
    "BatchDeleteRequest",
    "BatchDeleteUseCase",
    "DeleteCommentUseCase",
    "DeleteCommentsResponse",
    "ListAdminCommentsRequest",
    "ListAdminCommentsUseCase",
    "RefreshAvatarRequest",
    "RefreshAvatarResponse",
    "RefreshAvatarUseCase",
]
