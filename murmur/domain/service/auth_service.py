"""One-time-code admin login domain service."""

import secrets

import logfire

from murmur.domain.error import AccessDeniedError, ValidationError
from murmur.domain.repository import KeyValueStore
from murmur.domain.value import EmailHash, normalize_email
from murmur.util.error import ConfigurationError

from .base import Service
from .notification_service import NotificationService
from .rate_limit_service import RateLimitService
from .token_service import AdminTokenService


class EmailDeliveryError(ConfigurationError):
    """The login code could not be delivered."""

    pass


class AuthService(Service):
    """Email-based one-time-code login for administrators."""

    KEY_PREFIX = "auth_otp:"

    def __init__(
        self,
        kv_store: KeyValueStore,
        notification_service: NotificationService,
        token_service: AdminTokenService,
        attempt_limiter: RateLimitService,
        code_ttl_seconds: int,
    ) -> None:
        """Initialize auth service.

        Args:
            kv_store: Key-value store holding pending codes
            notification_service: Sends the code by email
            token_service: Issues admin tokens
            attempt_limiter: Caps verification attempts per email
            code_ttl_seconds: Lifetime of a login code
        """
        self.kv_store = kv_store
        self.notification_service = notification_service
        self.token_service = token_service
        self.attempt_limiter = attempt_limiter
        self.code_ttl_seconds = code_ttl_seconds

    def _key(self, email: str) -> str:
        return f"{self.KEY_PREFIX}{normalize_email(email)}"

    @staticmethod
    def generate_code() -> str:
        """Random 6-digit numeric code."""
        return str(100000 + secrets.randbelow(900000))

    async def send_code(self, email: str) -> None:
        """Generate, store and email a login code.

        The outcome does not depend on whether the email is an admin, so
        callers cannot enumerate the allow-list.

        Raises:
            ValidationError: If no email was supplied
            EmailDeliveryError: If the code could not be delivered
        """
        if not email or not email.strip():
            raise ValidationError("Email required")

        email_md5 = str(EmailHash.from_email(email))
        with logfire.span("auth_service.send_code", email_md5=email_md5):
            code = self.generate_code()
            await self.kv_store.put(
                self._key(email), code, ttl_seconds=self.code_ttl_seconds
            )

            sent = await self.notification_service.send_login_code(
                email.strip(), code, ttl_minutes=self.code_ttl_seconds // 60
            )
            if not sent:
                logfire.error("Login code delivery failed", email_md5=email_md5)
                raise EmailDeliveryError(
                    "Failed to send verification email. Please contact support."
                )
            logfire.info("Login code sent", email_md5=email_md5)

    async def verify_code(self, email: str, code: str) -> str:
        """Consume a login code and issue an admin token.

        Every attempt, right or wrong, counts against a per-email window
        as long as the code lifetime.

        Raises:
            ValidationError: If email or code is missing
            AccessDeniedError: If the code is wrong/expired or the email is
                not an admin
            RateLimitError: If the email used up its verification attempts
        """
        if not email or not code:
            raise ValidationError("Email and code required")

        email_md5 = str(EmailHash.from_email(email))
        with logfire.span("auth_service.verify_code", email_md5=email_md5):
            await self.attempt_limiter.hit(normalize_email(email))
            key = self._key(email)
            stored = await self.kv_store.get(key)
            if stored is None or not secrets.compare_digest(
                stored.encode("utf-8"), code.strip().encode("utf-8")
            ):
                logfire.warn("Invalid or expired login code", email_md5=email_md5)
                raise AccessDeniedError("Invalid or expired code")

            await self.kv_store.delete(key)

            if not self.token_service.is_admin_email(email):
                logfire.warn("Login attempt by non-admin", email_md5=email_md5)
                raise AccessDeniedError(
                    "Access Denied: This email is not authorized as an administrator."
                )

            token = self.token_service.create_token(email)
            logfire.info("Admin logged in", email_md5=email_md5)
            return token
