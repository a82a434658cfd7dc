"""Bot-check infrastructure providers."""

from dishka import Scope, provide

from murmur.adapter.turnstile import TurnstileVerifier
from murmur.config import Settings
from murmur.domain.service import BotVerifier
from murmur.util.di.base import ProviderBase


class TurnstileProvider(ProviderBase):
    """Turnstile component base."""

    __mock_component__ = "turnstile"


class ProdTurnstileProvider(TurnstileProvider):
    """Production Turnstile provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_bot_verifier(self, settings: Settings) -> BotVerifier:
        """Provide Turnstile verifier.

        A missing secret is reported per request as a configuration error,
        so read-only endpoints keep working.
        """
        return TurnstileVerifier(
            secret=settings.turnstile.secret,
            verify_url=settings.turnstile.verify_url,
            timeout=settings.turnstile.timeout,
        )

