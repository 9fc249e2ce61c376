"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from inkwell.adapter.error import BackendError
from inkwell.domain.repository import CommentRepository, LikeRepository
from inkwell.domain.service import LikeService
from inkwell.domain.value import CommentId, PostId, VisitorId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikeService:
    """Tests for anonymous likes."""

    @pytest.mark.asyncio
    async def test_like_and_unlike(self, unit_env):
        service = await unit_env.get(LikeService)
        likes = await unit_env.get(LikeRepository)
        comment_id = CommentId(uuid4())
        visitor = VisitorId(uuid4())

        await service.like(comment_id, visitor)
        assert await service.get_liked_comment_ids(visitor, [comment_id]) == {comment_id}

        assert await service.unlike(comment_id, visitor) is True
        assert await service.get_liked_comment_ids(visitor, [comment_id]) == set()
        assert likes.count_for(comment_id) == 0

    @pytest.mark.asyncio
    async def test_unlike_without_like_reports_nothing_removed(self, unit_env):
        service = await unit_env.get(LikeService)

        assert await service.unlike(CommentId(uuid4()), VisitorId(uuid4())) is False

    @pytest.mark.asyncio
    async def test_sync_writes_displayed_count_with_floor(self, unit_env):
        service = await unit_env.get(LikeService)
        comments = await unit_env.get(CommentRepository)
        comment = await comments.save(make_comment(PostId(uuid4()), likes_count=5))

        assert await service.sync_likes_count(comment.id, 6) is True
        assert (await comments.find_by_id(comment.id)).likes_count == 6

        await service.sync_likes_count(comment.id, -1)
        assert (await comments.find_by_id(comment.id)).likes_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_like_rejected(self, unit_env):
        service = await unit_env.get(LikeService)
        visitor = VisitorId(uuid4())
        comment_id = CommentId(uuid4())
        await service.like(comment_id, visitor)

        with pytest.raises(BackendError) as exc_info:
            await service.like(comment_id, visitor)

        assert exc_info.value.is_conflict

    @pytest.mark.asyncio
    async def test_likes_are_per_visitor(self, unit_env):
        service = await unit_env.get(LikeService)
        likes = await unit_env.get(LikeRepository)
        comment_id = CommentId(uuid4())
        ada, bob = VisitorId(uuid4()), VisitorId(uuid4())
        await service.like(comment_id, ada)

        assert await service.get_liked_comment_ids(bob, [comment_id]) == set()
        assert likes.count_for(comment_id) == 1
