"""Admin moderation routes.

Every route requires an admin bearer token.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Header, HTTPException, status

from murmur.application.usecase.admin import (
    BatchDeleteRequest,
    BatchDeleteUseCase,
    DeleteCommentsResponse,
    DeleteCommentUseCase,
    ListAdminCommentsRequest,
    ListAdminCommentsUseCase,
    RefreshAvatarRequest,
    RefreshAvatarResponse,
    RefreshAvatarUseCase,
)
from murmur.domain.error import ValidationError
from murmur.domain.model import Comment
from murmur.domain.service import AdminTokenService
from murmur.interface.api.request_context import require_admin
from murmur.util.background import BackgroundTaskQueue

router = APIRouter(prefix="/api/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/comments", response_model=list[Comment])
async def list_comments(
    list_use_case: FromDishka[ListAdminCommentsUseCase],
    token_service: FromDishka[AdminTokenService],
    email: str | None = None,
    site_id: str | None = None,
    authorization: str | None = Header(default=None),
) -> list[Comment]:
    """List comments for moderation, newest first (at most 50).

    Args:
        list_use_case: Admin listing use case (injected)
        token_service: Admin token service (injected)
        email: Only comments whose identity hash matches this email
        site_id: Only comments of this site
        authorization: Admin bearer token

    Returns:
        Full comment rows, private fields included
    """
    require_admin(authorization, token_service)
    return await list_use_case.execute(
        ListAdminCommentsRequest(email=email, site_id=site_id)
    )


@router.delete("/comments/batch", response_model=DeleteCommentsResponse)
async def batch_delete(
    request: BatchDeleteRequest,
    background_tasks: BackgroundTasks,
    batch_delete_use_case: FromDishka[BatchDeleteUseCase],
    token_service: FromDishka[AdminTokenService],
    background: FromDishka[BackgroundTaskQueue],
    authorization: str | None = Header(default=None),
) -> DeleteCommentsResponse:
    """Delete every comment of an email (all sites) or an explicit id set.

    Raises:
        HTTPException: If neither ids nor email were supplied
    """
    require_admin(authorization, token_service)
    try:
        result = await batch_delete_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    background_tasks.add_task(background.run)
    return result


@router.delete("/comments/{comment_id}", response_model=DeleteCommentsResponse)
async def delete_comment(
    comment_id: int,
    background_tasks: BackgroundTasks,
    delete_use_case: FromDishka[DeleteCommentUseCase],
    token_service: FromDishka[AdminTokenService],
    background: FromDishka[BackgroundTaskQueue],
    authorization: str | None = Header(default=None),
) -> DeleteCommentsResponse:
    """Delete one comment."""
    require_admin(authorization, token_service)
    result = await delete_use_case.execute(comment_id)
    background_tasks.add_task(background.run)
    return result


@router.post("/refresh-avatar", response_model=RefreshAvatarResponse)
async def refresh_avatar(
    request: RefreshAvatarRequest,
    refresh_use_case: FromDishka[RefreshAvatarUseCase],
    token_service: FromDishka[AdminTokenService],
    authorization: str | None = Header(default=None),
) -> RefreshAvatarResponse:
    """Re-fetch an email's avatar, replacing any cached image.

    Raises:
        HTTPException: If no email was supplied
    """
    require_admin(authorization, token_service)
    try:
        return await refresh_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
