"""Application layer DI providers."""

from dishka import Scope, provide

from murmur.application.usecase.admin import (
    BatchDeleteUseCase,
    DeleteCommentUseCase,
    ListAdminCommentsUseCase,
    RefreshAvatarUseCase,
)
from murmur.application.usecase.auth import SendCodeUseCase, VerifyCodeUseCase
from murmur.application.usecase.avatar import GetAvatarUseCase
from murmur.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    ListCommentsUseCase,
)
from murmur.config import Settings
from murmur.domain.repository import TransactionManager
from murmur.domain.service import (
    AuthService,
    AvatarService,
    BotCheckService,
    CommentService,
    FreshnessService,
    NotificationService,
    RateLimitService,
    ThreadService,
)
from murmur.util.background import BackgroundTaskQueue
from murmur.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        bot_check_service: BotCheckService,
        rate_limit_service: RateLimitService,
        avatar_service: AvatarService,
        freshness_service: FreshnessService,
        notification_service: NotificationService,
        transaction_manager: TransactionManager,
        background: BackgroundTaskQueue,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            bot_check_service=bot_check_service,
            rate_limit_service=rate_limit_service,
            avatar_service=avatar_service,
            freshness_service=freshness_service,
            notification_service=notification_service,
            transaction_manager=transaction_manager,
            background=background,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        thread_service: ThreadService,
        freshness_service: FreshnessService,
        settings: Settings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            thread_service=thread_service,
            freshness_service=freshness_service,
            page_size=settings.comments.page_size,
        )

    @provide(scope=Scope.REQUEST)
    def get_replies_use_case(self, comment_service: CommentService) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_use_case(self, comment_service: CommentService) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    # Avatar use cases
    @provide(scope=Scope.REQUEST)
    def get_avatar_use_case(self, avatar_service: AvatarService) -> GetAvatarUseCase:
        """Provide get avatar use case."""
        return GetAvatarUseCase(avatar_service=avatar_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_send_code_use_case(
        self, bot_check_service: BotCheckService, auth_service: AuthService
    ) -> SendCodeUseCase:
        """Provide send login code use case."""
        return SendCodeUseCase(
            bot_check_service=bot_check_service, auth_service=auth_service
        )

    @provide(scope=Scope.REQUEST)
    def get_verify_code_use_case(self, auth_service: AuthService) -> VerifyCodeUseCase:
        """Provide verify login code use case."""
        return VerifyCodeUseCase(auth_service=auth_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_admin_comments_use_case(
        self, comment_service: CommentService, settings: Settings
    ) -> ListAdminCommentsUseCase:
        """Provide admin comment listing use case."""
        return ListAdminCommentsUseCase(
            comment_service=comment_service,
            limit=settings.comments.admin_list_limit,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        freshness_service: FreshnessService,
        transaction_manager: TransactionManager,
        background: BackgroundTaskQueue,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            freshness_service=freshness_service,
            transaction_manager=transaction_manager,
            background=background,
        )

    @provide(scope=Scope.REQUEST)
    def get_batch_delete_use_case(
        self,
        comment_service: CommentService,
        freshness_service: FreshnessService,
        transaction_manager: TransactionManager,
        background: BackgroundTaskQueue,
    ) -> BatchDeleteUseCase:
        """Provide batch delete use case."""
        return BatchDeleteUseCase(
            comment_service=comment_service,
            freshness_service=freshness_service,
            transaction_manager=transaction_manager,
            background=background,
        )

    @provide(scope=Scope.REQUEST)
    def get_refresh_avatar_use_case(
        self, avatar_service: AvatarService
    ) -> RefreshAvatarUseCase:
        """Provide refresh avatar use case."""
        return RefreshAvatarUseCase(avatar_service=avatar_service)
