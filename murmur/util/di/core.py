"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from murmur.config import AdminEmailMap, AuthSettings, Settings
from murmur.util.background import BackgroundTaskQueue
from murmur.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_admin_emails(self, settings: Settings) -> AdminEmailMap:
        """Provide the parsed admin email map."""
        return settings.admin_email

    @provide(scope=Scope.REQUEST)
    def provide_background_queue(self) -> BackgroundTaskQueue:
        """Provide the request's post-response job queue."""
        return BackgroundTaskQueue()
