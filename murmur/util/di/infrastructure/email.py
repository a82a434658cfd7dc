"""Email infrastructure providers."""

from dishka import Scope, provide

from murmur.adapter.email import HttpEmailSender
from murmur.config import Settings
from murmur.domain.service import EmailSender
from murmur.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: Settings) -> EmailSender:
        """Provide HTTP email sender."""
        return HttpEmailSender(
            api_url=settings.email.api_url,
            api_key=settings.email.api_key,
            timeout=settings.email.timeout,
        )

