"""Test harness for unit, integration and API tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from murmur.domain.model import CommentDraft
from murmur.domain.value import CommentId, EmailHash, SiteId
from murmur.interface.api.app import create_app
from murmur.util.di import Component
from tests.di import build_test_container

# Matches the ADMIN_EMAIL environment set in conftest.py
ADMIN_EMAIL = "admin@example.com"
SITE_ADMIN_EMAIL = "blog-admin@example.com"


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real PostgreSQL and Redis
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_insert(integration_env):
            repo = await integration_env.get(CommentRepository)
            comment = await repo.insert(make_draft())
            assert comment.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def make_draft(
    site_id: str = "example.com",
    parent_id: int | None = None,
    content: str = "Hello",
    author_name: str = "Alice",
    email: str = "alice@example.com",
    context_url: str | None = None,
    is_admin: bool = False,
) -> CommentDraft:
    """Build a complete comment draft for tests."""
    return CommentDraft(
        site_id=SiteId(site_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        content=content,
        author_name=author_name,
        email=email,
        email_md5=EmailHash.from_email(email),
        ip_address="203.0.113.7",
        user_agent="pytest",
        context_url=context_url,
        is_admin=is_admin,
    )


def create_client_fixture():
    """Factory for API test client fixtures.

    Each test gets a fresh mocked container, so in-memory comments,
    counters and tokens never leak between tests.

    Usage:
        client = create_client_fixture()

        def test_health(client):
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        container = build_test_container()
        with TestClient(create_app(container)) as test_client:
            yield test_client

    return _client


def resolve(client: TestClient, dependency):
    """Resolve an APP-scoped dependency from the client's container."""
    container = client.app.state.dishka_container
    return client.portal.call(container.get, dependency)
