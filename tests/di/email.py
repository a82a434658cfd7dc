"""Mock email providers for testing."""

from dishka import Scope, provide

from murmur.adapter.email import MockEmailSender
from murmur.domain.service import EmailSender
from murmur.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording outgoing messages."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        """Provide mock email sender."""
        return MockEmailSender()
