"""Unit tests for BotCheckService."""

import pytest

from murmur.adapter.turnstile import MockBotVerifier
from murmur.domain.error import BotCheckFailedError, ValidationError
from murmur.domain.service import BotCheckService


class TestRequireHuman:
    """Tests for require_human method."""

    @pytest.mark.asyncio
    async def test_accepted_token(self):
        verifier = MockBotVerifier()

        await BotCheckService(verifier).require_human("ok-token", "203.0.113.9")

        assert verifier.calls == [("ok-token", "203.0.113.9")]

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        with pytest.raises(BotCheckFailedError, match="Turnstile validation failed"):
            await BotCheckService(MockBotVerifier()).require_human(
                "invalid-token", "203.0.113.9"
            )

    @pytest.mark.asyncio
    async def test_missing_token_skips_verifier(self):
        verifier = MockBotVerifier()

        with pytest.raises(ValidationError):
            await BotCheckService(verifier).require_human(None, "203.0.113.9")

        assert verifier.calls == []
