"""Public comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import (
    APIRouter,
    BackgroundTasks,
    Header,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from murmur.adapter.error import ProviderError
from murmur.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from murmur.config import Settings
from murmur.domain.error import (
    AccessDeniedError,
    AuthError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from murmur.domain.model import PublicComment
from murmur.domain.service import AdminTokenService
from murmur.interface.api.request_context import client_ip
from murmur.util.background import BackgroundTaskQueue
from murmur.util.error import ConfigurationError

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)

LISTING_CACHE_CONTROL = "public, no-cache"


@router.get("")
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    site_id: str | None = None,
    page: int = Query(default=1, ge=1),
    context_url: str | None = None,
    if_modified_since: str | None = Header(default=None),
) -> Response:
    """List root comments for a site with thread previews.

    Honors ``If-Modified-Since`` against the site's freshness token: an
    exact match is answered with 304 and no body.

    Args:
        list_comments_use_case: List comments use case (injected)
        site_id: Site to list
        page: 1-based page number
        context_url: Only roots posted from exactly this URL
        if_modified_since: Conditional request date

    Returns:
        Page of root comments, or an empty 304

    Raises:
        HTTPException: If site_id is missing
    """
    try:
        result = await list_comments_use_case.execute(
            ListCommentsRequest(
                site_id=site_id,
                page=page,
                context_url=context_url,
                if_modified_since=if_modified_since,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    headers = {
        "Cache-Control": LISTING_CACHE_CONTROL,
        "Last-Modified": result.last_modified,
    }
    if result.not_modified:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers=headers)

    return JSONResponse(
        content=result.page.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: int,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    last_id: int | None = None,
    limit: int = Query(default=10, ge=1, le=100),
) -> GetRepliesResponse:
    """List direct replies of a comment, newest-inserted first.

    Args:
        comment_id: Parent comment ID
        get_replies_use_case: Get replies use case (injected)
        last_id: Cursor from the previous page
        limit: Page size

    Returns:
        Replies with ``hasMore`` and the next ``lastId`` cursor
    """
    return await get_replies_use_case.execute(
        GetRepliesRequest(parent_id=comment_id, last_id=last_id, limit=limit)
    )


@router.get("/{comment_id}", response_model=PublicComment)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> PublicComment:
    """Get one comment (public fields only).

    Raises:
        HTTPException: If the comment does not exist
    """
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


class CreateCommentAPIRequest(BaseModel):
    """API request for posting a comment."""

    site_id: str | None = None
    parent_id: int | None = None
    content: str | None = None
    author_name: str | None = None
    email: str | None = None
    turnstile_token: str | None = None
    context_url: str | None = None


@router.post("", response_model=CreateCommentResponse)
async def create_comment(
    request: CreateCommentAPIRequest,
    http_request: Request,
    background_tasks: BackgroundTasks,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    token_service: FromDishka[AdminTokenService],
    background: FromDishka[BackgroundTaskQueue],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
    user_agent: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Post a root comment or a reply.

    Visitors must pass the bot-check and the per-IP rate limit. A valid
    admin bearer token marks the comment as an admin reply and skips both.

    Args:
        request: Comment fields
        http_request: Raw request (client IP)
        background_tasks: FastAPI background tasks
        create_comment_use_case: Create comment use case (injected)
        token_service: Admin token service (injected)
        background: Request job queue (injected)
        settings: Application settings (injected)
        authorization: Optional admin bearer token
        user_agent: Client user agent

    Returns:
        New comment id and avatar id

    Raises:
        HTTPException: On validation, bot-check, auth or rate limit failure
    """
    is_admin = False
    if authorization:
        try:
            token_service.authenticate(authorization)
            is_admin = True
        except AccessDeniedError as e:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
        except AuthError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)
            )

    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                **request.model_dump(),
                client_ip=client_ip(http_request, settings),
                user_agent=user_agent or "",
                is_admin=is_admin,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except RateLimitError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
            headers={"Retry-After": str(e.window_seconds)},
        )
    except ConfigurationError as e:
        logfire.error("Comment rejected: server misconfigured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error",
        )
    except ProviderError as e:
        logfire.error("Comment rejected: bot-check unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Bot-check service unavailable",
        )

    background_tasks.add_task(background.run)
    return result
