"""Bot-check domain service."""

import logfire

from murmur.domain.error import BotCheckFailedError, ValidationError

from .base import Service


class BotVerifier:
    """Generic bot-check (CAPTCHA) verification interface."""

    async def verify(self, token: str, remote_ip: str) -> bool:
        """Verify a challenge token.

        Args:
            token: Token produced by the client-side widget
            remote_ip: Client IP address

        Returns:
            True if the challenge was solved

        Raises:
            ConfigurationError: If the verifier is not configured
        """
        raise NotImplementedError


class BotCheckService(Service):
    """Guards public write endpoints with the bot-check."""

    def __init__(self, verifier: BotVerifier) -> None:
        """Initialize bot-check service.

        Args:
            verifier: Bot-check verifier implementation
        """
        self.verifier = verifier

    async def require_human(self, token: str | None, remote_ip: str) -> None:
        """Reject the request unless the bot-check passes.

        Raises:
            ValidationError: If no token was supplied
            BotCheckFailedError: If the token was rejected
        """
        if not token:
            raise ValidationError("Turnstile token required")

        if not await self.verifier.verify(token, remote_ip):
            logfire.warn("Bot-check rejected", client_ip=remote_ip)
            raise BotCheckFailedError()
