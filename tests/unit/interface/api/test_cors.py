"""Unit tests for the CORS allow-list."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from murmur.interface.api.cors import parse_allow_sites, setup_cors


class TestParseAllowSites:
    """Tests for parse_allow_sites."""

    def test_unset_or_wildcard_allows_all(self):
        assert parse_allow_sites(None) is None
        assert parse_allow_sites("  ") is None
        assert parse_allow_sites("*") is None

    def test_bare_domain_expands_to_both_schemes(self):
        assert parse_allow_sites("example.com") == [
            "http://example.com",
            "https://example.com",
        ]

    def test_exact_origins_kept(self):
        assert parse_allow_sites("https://blog.example.org/, example.com,") == [
            "https://blog.example.org",
            "http://example.com",
            "https://example.com",
        ]


def make_app(allow_sites: str | None) -> TestClient:
    app = FastAPI()
    setup_cors(app, allow_sites)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    return TestClient(app)


class TestSetupCors:
    """Tests for the installed middleware."""

    def test_listed_origin_allowed(self):
        client = make_app("example.com")

        response = client.get("/ping", headers={"Origin": "https://example.com"})

        assert response.headers["access-control-allow-origin"] == "https://example.com"

    def test_unlisted_origin_gets_no_header(self):
        client = make_app("example.com")

        response = client.get("/ping", headers={"Origin": "https://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    def test_permissive_fallback_echoes_origin(self):
        client = make_app(None)

        response = client.get("/ping", headers={"Origin": "https://anywhere.test"})

        assert (
            response.headers["access-control-allow-origin"] == "https://anywhere.test"
        )

    def test_preflight_lists_methods(self):
        client = make_app("example.com")

        response = client.options(
            "/ping",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "DELETE",
                "Access-Control-Request-Headers": "Authorization",
            },
        )

        assert response.status_code == 200
        assert "DELETE" in response.headers["access-control-allow-methods"]
