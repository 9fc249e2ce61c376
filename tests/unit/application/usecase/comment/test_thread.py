"""Unit tests for the reader comment thread use cases."""

import asyncio
from uuid import uuid4

import pytest

from inkwell.application.usecase.comment import (
    GetThreadRequest,
    GetThreadUseCase,
    StreamThreadUseCase,
    SubmitCommentRequest,
    SubmitCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import CommentRepository
from inkwell.domain.service import ChangeEvent, ChangeFeed
from inkwell.domain.value import ChangeType, PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetThread:
    @pytest.mark.asyncio
    async def test_show_all_and_expanded(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        comments = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        roots = [await comments.save(make_comment(post_id, minutes=i)) for i in range(3)]

        default = await use_case.execute(
            GetThreadRequest(post_id=str(post_id), visitor_id=str(uuid4()))
        )
        everything = await use_case.execute(
            GetThreadRequest(post_id=str(post_id), visitor_id=str(uuid4()), show_all=True)
        )

        assert default.shown_root_count == 2
        assert [c.id for c in everything.comments] == [str(r.id) for r in roots]


class TestSubmitAndLike:
    @pytest.mark.asyncio
    async def test_submit_then_like(self, unit_env):
        submit = await unit_env.get(SubmitCommentUseCase)
        toggle = await unit_env.get(ToggleLikeUseCase)
        post_id, visitor_id = str(uuid4()), str(uuid4())

        result = await submit.execute(
            SubmitCommentRequest(
                post_id=post_id,
                visitor_id=visitor_id,
                author_name="Ada",
                author_email="ada@example.com",
                content="Hello",
            )
        )
        liked = await toggle.execute(
            ToggleLikeRequest(
                post_id=post_id, comment_id=result.comment_id, visitor_id=visitor_id
            )
        )

        assert result.ok is True
        assert liked.liked is True
        assert liked.likes_count == 1

    @pytest.mark.asyncio
    async def test_like_comment_of_other_post(self, unit_env):
        toggle = await unit_env.get(ToggleLikeUseCase)
        comments = await unit_env.get(CommentRepository)
        comment = await comments.save(make_comment(PostId(uuid4())))

        with pytest.raises(NotFoundError):
            await toggle.execute(
                ToggleLikeRequest(
                    post_id=str(uuid4()),
                    comment_id=str(comment.id),
                    visitor_id=str(uuid4()),
                )
            )


class TestStreamThread:
    @pytest.mark.asyncio
    async def test_initial_view_then_update_on_change(self, unit_env):
        use_case = await unit_env.get(StreamThreadUseCase)
        feed = await unit_env.get(ChangeFeed)
        comments = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())

        stream = await use_case.execute(
            GetThreadRequest(post_id=str(post_id), visitor_id=str(uuid4()))
        )
        initial = await asyncio.wait_for(anext(stream), timeout=2)
        assert initial.total_count == 0
        assert feed.subscriber_count == 2

        comment = await comments.save(make_comment(post_id))
        await feed.publish(
            ChangeEvent(
                type=ChangeType.INSERT,
                table="comments",
                record={"id": str(comment.id), "post_id": str(post_id)},
            )
        )
        updated = await asyncio.wait_for(anext(stream), timeout=2)
        assert updated.total_count == 1

        await stream.aclose()
        assert feed.subscriber_count == 0
