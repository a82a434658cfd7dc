"""Unit tests for ListCommentsUseCase and reply listing."""

import pytest

from murmur.application.usecase.comment import (
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from murmur.domain.error import NotFoundError, ValidationError
from murmur.domain.service import CommentService, FreshnessService
from murmur.domain.value import SiteId
from tests.harness import create_env_fixture, make_draft

unit_env = create_env_fixture()


class TestListComments:
    """Tests for the conditional root listing."""

    @pytest.mark.asyncio
    async def test_returns_page_and_token(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(ListCommentsUseCase)
        await comment_service.create_comment(make_draft())

        # Act
        result = await use_case.execute(ListCommentsRequest(site_id="example.com"))

        # Assert
        assert result.not_modified is False
        assert result.last_modified.endswith("GMT")
        assert result.page.total == 1
        assert result.page.page == 1
        dumped = result.page.model_dump(mode="json", by_alias=True)
        assert dumped["pageSize"] == 10
        assert "email" not in dumped["comments"][0]

    @pytest.mark.asyncio
    async def test_matching_date_is_not_modified(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        first = await use_case.execute(ListCommentsRequest(site_id="example.com"))

        result = await use_case.execute(
            ListCommentsRequest(
                site_id="example.com", if_modified_since=first.last_modified
            )
        )

        assert result.not_modified is True
        assert result.page is None
        assert result.last_modified == first.last_modified

    @pytest.mark.asyncio
    async def test_stale_date_gets_fresh_page(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        freshness = await unit_env.get(FreshnessService)
        first = await use_case.execute(ListCommentsRequest(site_id="example.com"))
        await freshness.invalidate(SiteId("example.com"))

        result = await use_case.execute(
            ListCommentsRequest(
                site_id="example.com", if_modified_since=first.last_modified
            )
        )

        assert result.not_modified is False
        assert result.last_modified != first.last_modified

    @pytest.mark.asyncio
    async def test_missing_site_id(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(ValidationError, match="Missing site_id"):
            await use_case.execute(ListCommentsRequest())


class TestGetReplies:
    """Tests for GetRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_wire_format(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(GetRepliesUseCase)
        root = await comment_service.create_comment(make_draft())
        reply = await comment_service.create_comment(make_draft(parent_id=root.id))

        result = await use_case.execute(GetRepliesRequest(parent_id=root.id))

        dumped = result.model_dump(mode="json", by_alias=True)
        assert dumped["hasMore"] is False
        assert dumped["lastId"] == reply.id
        assert [r["id"] for r in dumped["replies"]] == [reply.id]

    @pytest.mark.asyncio
    async def test_cursor_page_unchanged_by_new_reply(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(GetRepliesUseCase)
        root = await comment_service.create_comment(make_draft())
        ids = [
            (await comment_service.create_comment(make_draft(parent_id=root.id))).id
            for _ in range(4)
        ]
        first = await use_case.execute(GetRepliesRequest(parent_id=root.id, limit=2))
        cursor = first.last_id
        next_page = GetRepliesRequest(parent_id=root.id, last_id=cursor, limit=2)
        expected = await use_case.execute(next_page)

        # Act
        newer = await comment_service.create_comment(make_draft(parent_id=root.id))
        again = await use_case.execute(next_page)
        repeated = await use_case.execute(next_page)

        # Assert
        assert cursor == ids[2]
        assert [r.id for r in again.replies] == [ids[1], ids[0]]
        assert again == expected
        assert repeated == again
        assert all(r.id < cursor for r in again.replies)
        assert newer.id not in [r.id for r in again.replies]

    @pytest.mark.asyncio
    async def test_zero_cursor_is_an_empty_page(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(GetRepliesUseCase)
        root = await comment_service.create_comment(make_draft())
        await comment_service.create_comment(make_draft(parent_id=root.id))

        result = await use_case.execute(
            GetRepliesRequest(parent_id=root.id, last_id=0)
        )

        assert result.replies == []
        assert result.has_more is False
        assert result.last_id is None


class TestGetComment:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_public_projection(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(GetCommentUseCase)
        comment = await comment_service.create_comment(make_draft())

        result = await use_case.execute(GetCommentRequest(comment_id=comment.id))

        assert result.id == comment.id
        assert "email" not in result.model_dump()

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        use_case = await unit_env.get(GetCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id=12345))
