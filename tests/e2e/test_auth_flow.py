"""End-to-end tests for the admin login flow."""

from murmur.domain.service import EmailSender
from tests.harness import ADMIN_EMAIL, create_client_fixture, resolve

client = create_client_fixture()


def last_code(client) -> str:
    sender = resolve(client, EmailSender)
    return sender.sent[-1].text.rsplit(" ", 1)[-1]


class TestLoginFlow:
    """Send code, verify, use token."""

    def test_code_exchange_grants_admin_access(self, client):
        # Act
        sent = client.post(
            "/api/auth/send-code",
            json={"email": ADMIN_EMAIL, "turnstile_token": "ok-token"},
        )
        verified = client.post(
            "/api/auth/verify", json={"email": ADMIN_EMAIL, "code": last_code(client)}
        )
        token = verified.json()["token"]
        listing = client.get(
            "/api/admin/comments", headers={"Authorization": f"Bearer {token}"}
        )

        # Assert
        assert sent.status_code == 200
        assert sent.json() == {
            "success": True,
            "message": "Code sent (if email is valid)",
        }
        assert verified.status_code == 200
        assert verified.json()["success"] is True
        assert listing.status_code == 200

    def test_non_admin_gets_same_send_response_but_no_token(self, client):
        sent = client.post(
            "/api/auth/send-code",
            json={"email": "stranger@example.com", "turnstile_token": "ok-token"},
        )
        verified = client.post(
            "/api/auth/verify",
            json={"email": "stranger@example.com", "code": last_code(client)},
        )

        assert sent.status_code == 200
        assert verified.status_code == 403
        assert "not authorized" in verified.json()["detail"]

    def test_wrong_code(self, client):
        client.post(
            "/api/auth/send-code",
            json={"email": ADMIN_EMAIL, "turnstile_token": "ok-token"},
        )

        response = client.post(
            "/api/auth/verify", json={"email": ADMIN_EMAIL, "code": "000000"}
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid or expired code"

    def test_guessing_is_capped_per_email(self, client):
        client.post(
            "/api/auth/send-code",
            json={"email": ADMIN_EMAIL, "turnstile_token": "ok-token"},
        )
        guesses = [
            client.post(
                "/api/auth/verify", json={"email": ADMIN_EMAIL, "code": "000000"}
            )
            for _ in range(5)
        ]

        blocked = client.post(
            "/api/auth/verify", json={"email": ADMIN_EMAIL, "code": last_code(client)}
        )

        assert [r.status_code for r in guesses] == [403] * 5
        assert blocked.status_code == 429
        assert blocked.headers["Retry-After"] == "600"

    def test_bot_check_required(self, client):
        response = client.post(
            "/api/auth/send-code",
            json={"email": ADMIN_EMAIL, "turnstile_token": "invalid-token"},
        )

        assert response.status_code == 403

    def test_missing_email(self, client):
        response = client.post(
            "/api/auth/send-code", json={"turnstile_token": "ok-token"}
        )

        assert response.status_code == 400
