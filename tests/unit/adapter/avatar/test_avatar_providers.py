"""Unit tests for avatar providers."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from murmur.adapter.avatar import GravatarProvider, QQAvatarProvider
from murmur.domain.value import EmailHash


def mock_response(status_code: int, content: bytes = b"") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


class TestQQAvatarProvider:
    """Tests for QQAvatarProvider."""

    def test_url_for_numeric_qq_address(self):
        assert (
            QQAvatarProvider.avatar_url(" 12345@QQ.com")
            == "https://q1.qlogo.cn/g?b=qq&nk=12345&s=100"
        )

    @pytest.mark.parametrize("email", ["alice@qq.com", "12345@example.com"])
    def test_no_url_for_other_addresses(self, email):
        assert QQAvatarProvider.avatar_url(email) is None

    @pytest.mark.asyncio
    async def test_skips_non_qq_without_request(self):
        provider = QQAvatarProvider(timeout=1.0)

        with patch("httpx.AsyncClient") as mock_client:
            result = await provider.fetch(
                "alice@example.com", EmailHash.from_email("alice@example.com")
            )

            assert result is None
            mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_fetches_image(self):
        provider = QQAvatarProvider(timeout=1.0)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=mock_response(200, b"qq-image")
            )

            result = await provider.fetch(
                "12345@qq.com", EmailHash.from_email("12345@qq.com")
            )

            assert result == b"qq-image"


class TestGravatarProvider:
    """Tests for GravatarProvider."""

    def test_url_asks_for_404_on_miss(self):
        email_hash = EmailHash.from_email("alice@example.com")

        assert GravatarProvider.avatar_url(email_hash) == (
            f"https://www.gravatar.com/avatar/{email_hash}?d=404"
        )

    @pytest.mark.asyncio
    async def test_only_200_counts(self):
        provider = GravatarProvider(timeout=1.0)
        email_hash = EmailHash.from_email("alice@example.com")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=mock_response(404, b"not found page")
            )

            assert await provider.fetch("alice@example.com", email_hash) is None

    @pytest.mark.asyncio
    async def test_transport_error_is_miss(self):
        provider = GravatarProvider(timeout=1.0)
        email_hash = EmailHash.from_email("alice@example.com")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectError("down")
            )

            assert await provider.fetch("alice@example.com", email_hash) is None
