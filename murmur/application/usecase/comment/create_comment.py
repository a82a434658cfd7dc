"""Create comment use case."""

import logfire
from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.error import ValidationError
from murmur.domain.model import CommentDraft
from murmur.domain.repository import TransactionManager
from murmur.domain.service import (
    AvatarService,
    BotCheckService,
    CommentService,
    FreshnessService,
    NotificationService,
    RateLimitService,
)
from murmur.domain.value import CommentId, SiteId
from murmur.util.background import BackgroundTaskQueue


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    site_id: str | None = None
    parent_id: int | None = None
    content: str | None = None
    author_name: str | None = None
    email: str | None = None
    turnstile_token: str | None = None
    context_url: str | None = None
    client_ip: str
    user_agent: str = ""
    is_admin: bool = False  # Set by the router from a verified admin token


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    success: bool = True
    id: int
    avatar_id: str


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for posting a root comment or a reply.

    Visitors pass the bot-check and the per-IP rate limit; verified admins
    skip both. Once the insert is committed, the site's freshness token,
    the commenter's avatar and the email notifications are handled in the
    background.
    """

    def __init__(
        self,
        comment_service: CommentService,
        bot_check_service: BotCheckService,
        rate_limit_service: RateLimitService,
        avatar_service: AvatarService,
        freshness_service: FreshnessService,
        notification_service: NotificationService,
        transaction_manager: TransactionManager,
        background: BackgroundTaskQueue,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            bot_check_service: Bot-check domain service
            rate_limit_service: Rate limit domain service
            avatar_service: Avatar domain service
            freshness_service: Freshness token domain service
            notification_service: Notification domain service
            transaction_manager: Commits the insert
            background: Post-response job queue
        """
        self.comment_service = comment_service
        self.bot_check_service = bot_check_service
        self.rate_limit_service = rate_limit_service
        self.avatar_service = avatar_service
        self.freshness_service = freshness_service
        self.notification_service = notification_service
        self.transaction_manager = transaction_manager
        self.background = background

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Check required fields
        2. Bot-check and rate limit (visitors only)
        3. Insert and commit
        4. Schedule freshness invalidation, avatar fetch and notifications

        Raises:
            ValidationError: If a required field is missing
            BotCheckFailedError: If the bot-check rejected the token
            RateLimitError: If the client exceeded the submission limit
            ConfigurationError: If the bot-check is not configured
        """
        required = [request.site_id, request.content, request.author_name, request.email]
        if not request.is_admin:
            required.append(request.turnstile_token)
        if not all(value and value.strip() for value in required):
            raise ValidationError("Missing required fields")

        with logfire.span(
            "create_comment.execute",
            site_id=request.site_id,
            parent_id=request.parent_id,
            is_admin=request.is_admin,
        ):
            if not request.is_admin:
                await self.bot_check_service.require_human(
                    request.turnstile_token, request.client_ip
                )
                await self.rate_limit_service.hit(request.client_ip)

            email = request.email.strip()
            draft = CommentDraft(
                site_id=SiteId(request.site_id),
                parent_id=(
                    CommentId(request.parent_id)
                    if request.parent_id is not None
                    else None
                ),
                content=request.content,
                author_name=request.author_name,
                email=email,
                email_md5=self.avatar_service.avatar_id(email),
                ip_address=request.client_ip,
                user_agent=request.user_agent,
                context_url=request.context_url or None,
                is_admin=request.is_admin,
            )
            comment = await self.comment_service.create_comment(draft)
            await self.transaction_manager.commit()

            parent_author = None
            if comment.parent_id is not None:
                parent_author = await self.comment_service.get_author(comment.parent_id)

            self.background.schedule(
                "invalidate_freshness",
                self.freshness_service.invalidate,
                comment.site_id,
            )
            self.background.schedule("refresh_avatar", self.avatar_service.refresh, email)
            self.background.schedule(
                "notify_new_comment",
                self.notification_service.notify_new_comment,
                comment,
                parent_author,
            )

            return CreateCommentResponse(id=comment.id, avatar_id=comment.avatar_id)
