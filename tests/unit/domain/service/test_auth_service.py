"""Unit tests for AuthService."""

import pytest

from murmur.adapter.email import MockEmailSender
from murmur.config import AdminEmailMap, AuthSettings
from murmur.domain.error import AccessDeniedError, RateLimitError, ValidationError
from murmur.domain.service import (
    AdminTokenService,
    AuthService,
    EmailDeliveryError,
    NotificationService,
    RateLimitService,
)
from murmur.persistence.repository.inmemory import InMemoryKeyValueStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sender():
    return MockEmailSender()


@pytest.fixture
def token_service():
    return AdminTokenService(
        AuthSettings(admin_secret="unit-secret"),
        AdminEmailMap.parse("root@example.com"),
    )


@pytest.fixture
def auth_service(clock, sender, token_service):
    admins = AdminEmailMap.parse("root@example.com")
    kv_store = InMemoryKeyValueStore(clock=clock)
    return AuthService(
        kv_store=kv_store,
        notification_service=NotificationService(sender, admins, "Comments"),
        token_service=token_service,
        attempt_limiter=RateLimitService(
            kv_store, max_requests=5, window_seconds=600, key_prefix="auth_verify:"
        ),
        code_ttl_seconds=600,
    )


def sent_code(sender: MockEmailSender) -> str:
    return sender.sent[-1].text.rsplit(" ", 1)[-1]


class TestGenerateCode:
    def test_six_digits(self):
        for _ in range(50):
            code = AuthService.generate_code()
            assert len(code) == 6
            assert code.isdigit()
            assert code[0] != "0"


class TestSendCode:
    """Tests for send_code method."""

    @pytest.mark.asyncio
    async def test_emails_code(self, auth_service, sender):
        await auth_service.send_code("root@example.com")

        assert sender.sent[0].to == "root@example.com"
        assert len(sent_code(sender)) == 6

    @pytest.mark.asyncio
    async def test_non_admin_still_gets_code(self, auth_service, sender):
        """Sending never reveals whether the address is an admin."""
        await auth_service.send_code("stranger@example.com")

        assert sender.sent[0].to == "stranger@example.com"

    @pytest.mark.asyncio
    async def test_missing_email(self, auth_service):
        with pytest.raises(ValidationError, match="Email required"):
            await auth_service.send_code("  ")

    @pytest.mark.asyncio
    async def test_delivery_failure(self, auth_service, sender):
        sender.fail = True

        with pytest.raises(EmailDeliveryError):
            await auth_service.send_code("root@example.com")


class TestVerifyCode:
    """Tests for verify_code method."""

    @pytest.mark.asyncio
    async def test_valid_code_issues_token(self, auth_service, sender, token_service):
        await auth_service.send_code("Root@Example.com")

        token = await auth_service.verify_code("root@example.com", sent_code(sender))

        assert token_service.verify_token(token).email == "root@example.com"

    @pytest.mark.asyncio
    async def test_code_is_single_use(self, auth_service, sender):
        await auth_service.send_code("root@example.com")
        code = sent_code(sender)
        await auth_service.verify_code("root@example.com", code)

        with pytest.raises(AccessDeniedError, match="Invalid or expired code"):
            await auth_service.verify_code("root@example.com", code)

    @pytest.mark.asyncio
    async def test_expired_code(self, auth_service, sender, clock):
        await auth_service.send_code("root@example.com")
        clock.now += 600

        with pytest.raises(AccessDeniedError, match="Invalid or expired code"):
            await auth_service.verify_code("root@example.com", sent_code(sender))

    @pytest.mark.asyncio
    async def test_wrong_code(self, auth_service):
        await auth_service.send_code("root@example.com")

        with pytest.raises(AccessDeniedError):
            await auth_service.verify_code("root@example.com", "ünïcode")

    @pytest.mark.asyncio
    async def test_non_admin_denied_after_valid_code(self, auth_service, sender):
        await auth_service.send_code("stranger@example.com")

        with pytest.raises(AccessDeniedError, match="not authorized"):
            await auth_service.verify_code("stranger@example.com", sent_code(sender))

    @pytest.mark.asyncio
    async def test_missing_fields(self, auth_service):
        with pytest.raises(ValidationError):
            await auth_service.verify_code("root@example.com", "")


class TestVerifyAttempts:
    """Verification attempts are capped per email."""

    @pytest.mark.asyncio
    async def test_sixth_attempt_rejected_even_with_right_code(
        self, auth_service, sender
    ):
        # Arrange
        await auth_service.send_code("root@example.com")
        code = sent_code(sender)
        for _ in range(5):
            with pytest.raises(AccessDeniedError):
                await auth_service.verify_code("root@example.com", "000000")

        # Act / Assert
        with pytest.raises(RateLimitError):
            await auth_service.verify_code(" ROOT@example.com", code)

    @pytest.mark.asyncio
    async def test_attempts_reset_after_code_lifetime(self, auth_service, sender, clock):
        for _ in range(5):
            with pytest.raises(AccessDeniedError):
                await auth_service.verify_code("root@example.com", "000000")

        clock.now += 600
        await auth_service.send_code("root@example.com")
        token = await auth_service.verify_code("root@example.com", sent_code(sender))

        assert token

    @pytest.mark.asyncio
    async def test_attempts_counted_per_email(self, auth_service, sender):
        for _ in range(5):
            with pytest.raises(AccessDeniedError):
                await auth_service.verify_code("stranger@example.com", "000000")

        await auth_service.send_code("root@example.com")

        assert await auth_service.verify_code("root@example.com", sent_code(sender))
