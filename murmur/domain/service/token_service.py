"""Admin token domain service."""

import logfire

from murmur.config import AdminEmailMap, AuthSettings
from murmur.domain.error import AccessDeniedError, AuthError
from murmur.domain.value import normalize_email
from murmur.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class AdminTokenService(Service):
    """Issues and verifies signed admin bearer tokens.

    The signing secret and the admin allow-list are passed in at
    construction time.
    """

    def __init__(self, auth_settings: AuthSettings, admin_emails: AdminEmailMap) -> None:
        """Initialize admin token service.

        Args:
            auth_settings: Authentication settings (secret, algorithm, expiry)
            admin_emails: Admin allow-list
        """
        self.auth_settings = auth_settings
        self.admin_emails = admin_emails

    def is_admin_email(self, email: str) -> bool:
        """Whether an email is on the admin allow-list."""
        return normalize_email(email) in self.admin_emails.all_emails()

    def create_token(self, email: str) -> str:
        """Create an admin token for an email."""
        with logfire.span("token_service.create_token"):
            token = create_token(normalize_email(email), self.auth_settings)
            logfire.info("Admin token issued")
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an admin token.

        Returns:
            Token payload

        Raises:
            AuthError: If the token is malformed, badly signed or expired
            AccessDeniedError: If the email claim is not an admin
        """
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Admin token rejected", error=str(e))
            raise AuthError(str(e)) from e

        if not self.is_admin_email(payload.email):
            logfire.warn("Admin token for non-admin email")
            raise AccessDeniedError("Email is not authorized as an administrator")
        return payload

    def authenticate(self, authorization: str | None) -> TokenPayload:
        """Authenticate an ``Authorization: Bearer`` header value.

        Raises:
            AuthError: If the header is missing or the token is invalid
        """
        if not authorization or not authorization.startswith("Bearer "):
            raise AuthError("Unauthorized")
        token = authorization.removeprefix("Bearer ").strip()
        if not token:
            raise AuthError("Unauthorized")
        return self.verify_token(token)
