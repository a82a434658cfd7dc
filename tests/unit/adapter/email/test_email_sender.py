"""Unit tests for the HTTP email sender."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from murmur.adapter.email import HttpEmailSender
from murmur.domain.service import EmailMessage

API_URL = "https://mail.example.com/send"


def make_message() -> EmailMessage:
    return EmailMessage(
        to="alice@example.com",
        subject="Hello",
        html="<p>Hi</p>",
        text="Hi",
        sender_name="Comment System",
        headers={"X-Entity-Ref-ID": "1"},
    )


class TestSend:
    """Tests for HttpEmailSender.send."""

    @pytest.mark.asyncio
    async def test_posts_json_with_api_key(self):
        mock_response = MagicMock()
        mock_response.is_success = True

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=mock_response)
            mock_client.return_value.__aenter__.return_value.post = post

            sender = HttpEmailSender(api_url=API_URL, api_key="k-123", timeout=3.0)
            result = await sender.send(make_message())

            assert result is True
            post.assert_called_once_with(
                API_URL,
                json={
                    "to": "alice@example.com",
                    "subject": "Hello",
                    "html": "<p>Hi</p>",
                    "text": "Hi",
                    "headers": {"X-Entity-Ref-ID": "1"},
                },
                headers={"x-api-key": "k-123"},
                timeout=3.0,
            )

    @pytest.mark.asyncio
    async def test_rejected_message(self):
        mock_response = MagicMock()
        mock_response.is_success = False
        mock_response.status_code = 401
        mock_response.text = "bad key"

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            sender = HttpEmailSender(api_url=API_URL, api_key="k-123", timeout=3.0)

            assert await sender.send(make_message()) is False

    @pytest.mark.asyncio
    async def test_transport_error_reported_as_failure(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ReadTimeout("slow")
            )

            sender = HttpEmailSender(api_url=API_URL, api_key="k-123", timeout=3.0)

            assert await sender.send(make_message()) is False

    @pytest.mark.asyncio
    async def test_unconfigured(self):
        sender = HttpEmailSender(api_url=None, api_key=None, timeout=3.0)

        assert await sender.send(make_message()) is False
