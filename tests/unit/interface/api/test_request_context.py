"""Unit tests for request helpers."""

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from murmur.config import AdminEmailMap, AuthSettings, Settings
from murmur.domain.service import AdminTokenService
from murmur.interface.api.request_context import client_ip, require_admin


def make_request(headers: dict[str, str], client: tuple[str, int] | None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        "client": client,
    }
    return Request(scope)


class TestClientIp:
    """Tests for client_ip."""

    def test_prefers_proxy_header(self):
        request = make_request({"CF-Connecting-IP": " 198.51.100.1 "}, ("10.0.0.1", 1))

        assert client_ip(request, Settings()) == "198.51.100.1"

    def test_falls_back_to_peer(self):
        request = make_request({}, ("10.0.0.1", 1))

        assert client_ip(request, Settings()) == "10.0.0.1"

    def test_default_when_unknown(self):
        request = make_request({}, None)

        assert client_ip(request, Settings()) == "127.0.0.1"


class TestRequireAdmin:
    """Tests for require_admin."""

    @pytest.fixture
    def token_service(self):
        return AdminTokenService(
            AuthSettings(admin_secret="s"), AdminEmailMap.parse("root@example.com")
        )

    def test_missing_header_is_401(self, token_service):
        with pytest.raises(HTTPException) as exc_info:
            require_admin(None, token_service)

        assert exc_info.value.status_code == 401

    def test_non_admin_token_is_403(self, token_service):
        other = AdminTokenService(
            AuthSettings(admin_secret="s"), AdminEmailMap.parse("gone@example.com")
        )
        token = other.create_token("gone@example.com")

        with pytest.raises(HTTPException) as exc_info:
            require_admin(f"Bearer {token}", token_service)

        assert exc_info.value.status_code == 403

    def test_valid_token(self, token_service):
        token = token_service.create_token("root@example.com")

        assert require_admin(f"Bearer {token}", token_service).email == "root@example.com"
