"""HTTP email delivery client.

Delivers mail through an external JSON API authenticated with an
``x-api-key`` header.
"""

import httpx
import logfire

from murmur.domain.service.notification_service import EmailMessage, EmailSender


class HttpEmailSender(EmailSender):
    """Email sender backed by an HTTP delivery API."""

    def __init__(self, api_url: str | None, api_key: str | None, timeout: float) -> None:
        """Initialize HTTP email sender.

        Args:
            api_url: Delivery API endpoint
            api_key: API key sent as ``x-api-key``
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    async def send(self, message: EmailMessage) -> bool:
        """Deliver a message.

        Failures are logged and reported as False rather than raised.
        """
        if not self.api_url or not self.api_key:
            logfire.error("Email API configuration missing")
            return False

        payload = {
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
            "headers": message.headers,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"x-api-key": self.api_key},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Email API HTTP error", error=str(e))
            return False

        if not response.is_success:
            logfire.error(
                "Email API rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            return False

        logfire.info("Email sent", subject=message.subject)
        return True


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Records every message; ``fail`` makes every delivery report failure.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> bool:
        """Record the message."""
        if self.fail:
            return False
        self.sent.append(message)
        return True
