"""Integration tests for PostgresCommentRepository.

Run against a real PostgreSQL; skipped unless DATABASE__URL is set.
"""

import os
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from murmur.domain.repository import CommentRepository
from murmur.domain.value import EmailHash, SiteId
from murmur.persistence.tables import metadata
from tests.harness import create_env_fixture, make_draft

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def repo(integration_env):
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    return await integration_env.get(CommentRepository)


@pytest.fixture
def site_id():
    # Unique per test so runs never see each other's rows
    return f"it-{uuid4().hex[:12]}"


class TestPostgresCommentRepository:
    """Query behaviour against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_insert_assigns_id_time_and_avatar(self, repo, site_id):
        comment = await repo.insert(make_draft(site_id=site_id))

        assert comment.id > 0
        assert comment.created_at > 0
        assert comment.avatar_id == str(EmailHash.from_email("alice@example.com"))
        assert await repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_root_page_and_thread_aggregates(self, repo, site_id):
        # Arrange
        root = await repo.insert(make_draft(site_id=site_id, content="A"))
        reply = await repo.insert(make_draft(site_id=site_id, parent_id=root.id))
        await repo.insert(make_draft(site_id=site_id, parent_id=reply.id))
        admin = await repo.insert(
            make_draft(site_id=site_id, parent_id=root.id, is_admin=True)
        )
        await repo.insert(make_draft(site_id=site_id, parent_id=root.id, is_admin=True))

        # Act
        roots, total = await repo.find_root_page(SiteId(site_id), page=1, page_size=10)
        counts = await repo.count_replies([root.id])
        admin_replies = await repo.find_first_admin_replies([root.id])

        # Assert
        assert [c.id for c in roots] == [root.id]
        assert total == 1
        assert counts == {root.id: 3}
        assert admin_replies[root.id].id == admin.id

    @pytest.mark.asyncio
    async def test_replies_keyset(self, repo, site_id):
        root = await repo.insert(make_draft(site_id=site_id))
        ids = [
            (await repo.insert(make_draft(site_id=site_id, parent_id=root.id))).id
            for _ in range(3)
        ]

        page = await repo.find_replies(root.id, before_id=ids[2], limit=10)

        assert [c.id for c in page] == [ids[1], ids[0]]

    @pytest.mark.asyncio
    async def test_delete_by_email_hash_returns_sites(self, repo, site_id):
        email = f"{site_id}@example.com"
        other_site = f"{site_id}-b"
        await repo.insert(make_draft(site_id=site_id, email=email))
        await repo.insert(make_draft(site_id=other_site, email=email))

        deleted = await repo.delete_by_email_hash(EmailHash.from_email(email))

        assert sorted(deleted) == sorted([site_id, other_site])
