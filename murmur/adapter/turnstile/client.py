"""Cloudflare Turnstile verification client."""

import httpx
import logfire

from murmur.adapter.error import ProviderError
from murmur.domain.service.bot_check_service import BotVerifier
from murmur.util.error import ConfigurationError


class TurnstileVerifier(BotVerifier):
    """Verifies Turnstile widget tokens against the siteverify endpoint."""

    def __init__(self, secret: str | None, verify_url: str, timeout: float) -> None:
        """Initialize Turnstile verifier.

        Args:
            secret: Turnstile secret key; verification fails without it
            verify_url: siteverify endpoint
            timeout: Request timeout in seconds
        """
        self.secret = secret
        self.verify_url = verify_url
        self.timeout = timeout

    async def verify(self, token: str, remote_ip: str) -> bool:
        """Verify a widget token.

        Raises:
            ConfigurationError: If no secret is configured
            ProviderError: If the siteverify endpoint could not be reached
        """
        if not self.secret:
            logfire.error("Turnstile secret not configured")
            raise ConfigurationError("Turnstile secret is not configured")

        data = {
            "secret": self.secret,
            "response": token,
            "remoteip": remote_ip,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.verify_url,
                    data=data,
                    timeout=self.timeout,
                )
                outcome = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logfire.error("Turnstile siteverify request failed", error=str(e))
            raise ProviderError("turnstile", f"siteverify failed: {e}") from e

        success = bool(outcome.get("success"))
        if not success:
            logfire.warn(
                "Turnstile validation failed",
                error_codes=outcome.get("error-codes", []),
            )
        return success


class MockBotVerifier(BotVerifier):
    """Mock bot-check verifier for testing.

    Accepts every token except ``rejected_token``.
    """

    def __init__(self, rejected_token: str = "invalid-token") -> None:
        self.rejected_token = rejected_token
        self.calls: list[tuple[str, str]] = []

    async def verify(self, token: str, remote_ip: str) -> bool:
        """Record the call and accept any non-rejected token."""
        self.calls.append((token, remote_ip))
        return token != self.rejected_token
