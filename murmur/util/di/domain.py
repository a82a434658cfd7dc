"""Domain layer DI providers."""

from dishka import Scope, provide

from murmur.config import AdminEmailMap, AuthSettings, Settings
from murmur.domain.repository import CommentRepository, KeyValueStore
from murmur.domain.service import (
    AdminTokenService,
    AuthService,
    AvatarProvider,
    AvatarService,
    BotCheckService,
    BotVerifier,
    CommentService,
    EmailSender,
    FreshnessService,
    NotificationService,
    RateLimitService,
    ThreadService,
)
from murmur.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_admin_token_service(
        self, auth_settings: AuthSettings, admin_emails: AdminEmailMap
    ) -> AdminTokenService:
        """Provide admin token domain service.

        Built once at startup with the signing secret and allow-list.
        """
        return AdminTokenService(auth_settings=auth_settings, admin_emails=admin_emails)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_thread_service(self, comment_repository: CommentRepository) -> ThreadService:
        """Provide thread assembly domain service."""
        return ThreadService(comment_repository=comment_repository)

    @provide
    def get_freshness_service(self, kv_store: KeyValueStore) -> FreshnessService:
        """Provide freshness token domain service."""
        return FreshnessService(kv_store=kv_store)

    @provide
    def get_rate_limit_service(
        self, kv_store: KeyValueStore, settings: Settings
    ) -> RateLimitService:
        """Provide rate limit domain service."""
        return RateLimitService(
            kv_store=kv_store,
            max_requests=settings.rate_limit.max_requests,
            window_seconds=settings.rate_limit.window_seconds,
        )

    @provide
    def get_bot_check_service(self, verifier: BotVerifier) -> BotCheckService:
        """Provide bot-check domain service."""
        return BotCheckService(verifier=verifier)

    @provide
    def get_avatar_service(
        self,
        kv_store: KeyValueStore,
        providers: list[AvatarProvider],
        settings: Settings,
    ) -> AvatarService:
        """Provide avatar domain service."""
        return AvatarService(
            kv_store=kv_store,
            providers=providers,
            cache_ttl_seconds=settings.avatar.cache_ttl_seconds,
        )

    @provide
    def get_notification_service(
        self,
        email_sender: EmailSender,
        admin_emails: AdminEmailMap,
        settings: Settings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            email_sender=email_sender,
            admin_emails=admin_emails,
            sender_name=settings.email.sender_name,
        )

    @provide
    def get_auth_service(
        self,
        kv_store: KeyValueStore,
        notification_service: NotificationService,
        token_service: AdminTokenService,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide login code domain service."""
        return AuthService(
            kv_store=kv_store,
            notification_service=notification_service,
            token_service=token_service,
            attempt_limiter=RateLimitService(
                kv_store=kv_store,
                max_requests=auth_settings.max_verify_attempts,
                window_seconds=auth_settings.login_code_ttl_seconds,
                key_prefix="auth_verify:",
            ),
            code_ttl_seconds=auth_settings.login_code_ttl_seconds,
        )
