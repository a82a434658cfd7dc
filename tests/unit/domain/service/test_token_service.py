"""Unit tests for AdminTokenService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from murmur.config import AdminEmailMap, AuthSettings
from murmur.domain.error import AccessDeniedError, AuthError
from murmur.domain.service import AdminTokenService


@pytest.fixture
def auth_settings():
    return AuthSettings(admin_secret="unit-secret")


@pytest.fixture
def token_service(auth_settings):
    return AdminTokenService(auth_settings, AdminEmailMap.parse("root@example.com"))


class TestTokens:
    """Tests for token issue and verification."""

    def test_round_trip(self, token_service):
        token = token_service.create_token("Root@Example.com")

        payload = token_service.verify_token(token)

        assert payload.email == "root@example.com"
        assert payload.exp > datetime.now(timezone.utc) + timedelta(days=6)

    def test_wrong_secret_rejected(self, token_service):
        other = AdminTokenService(
            AuthSettings(admin_secret="other-secret"),
            AdminEmailMap.parse("root@example.com"),
        )
        token = other.create_token("root@example.com")

        with pytest.raises(AuthError):
            token_service.verify_token(token)

    def test_expired_rejected(self, token_service, auth_settings):
        token = jwt.encode(
            {
                "email": "root@example.com",
                "exp": datetime.now(timezone.utc) - timedelta(seconds=5),
            },
            auth_settings.admin_secret,
            algorithm="HS256",
        )

        with pytest.raises(AuthError, match="expired"):
            token_service.verify_token(token)

    def test_removed_admin_denied(self, auth_settings):
        """A valid token stops working once the email leaves the allow-list."""
        issuer = AdminTokenService(auth_settings, AdminEmailMap.parse("old@example.com"))
        token = issuer.create_token("old@example.com")
        current = AdminTokenService(auth_settings, AdminEmailMap.parse("new@example.com"))

        with pytest.raises(AccessDeniedError):
            current.verify_token(token)


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer ", "Bearer junk"])
    def test_bad_headers_unauthorized(self, token_service, header):
        with pytest.raises(AuthError):
            token_service.authenticate(header)

    def test_bearer_token_accepted(self, token_service):
        token = token_service.create_token("root@example.com")

        payload = token_service.authenticate(f"Bearer {token}")

        assert payload.email == "root@example.com"
