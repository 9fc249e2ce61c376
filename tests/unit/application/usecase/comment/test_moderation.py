"""Unit tests for comment moderation use cases."""

from uuid import uuid4

import pytest
import pytest_asyncio

from inkwell.application.usecase.comment import (
    AdminReplyRequest,
    AdminReplyUseCase,
    ListModerationRequest,
    ListModerationUseCase,
)
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.value import CommentFilterType, PostId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def seeded(unit_env):
    posts = await unit_env.get(PostRepository)
    comments = await unit_env.get(CommentRepository)
    post = await posts.save(make_post(title="Hello"))
    first = await comments.save(make_comment(post.id, minutes=0, author_name="Ada"))
    reply = await comments.save(
        make_comment(post.id, parent=first, minutes=1, author_name="Bob", likes_count=2)
    )
    admin = await comments.save(
        make_comment(post.id, parent=first, minutes=2, author_name="Admin", is_admin_reply=True)
    )
    second = await comments.save(
        make_comment(post.id, minutes=3, author_name="Cy", content="Great read")
    )
    stray = await comments.save(make_comment(PostId(uuid4()), minutes=4, author_name="Dee"))
    return post, first, reply, admin, second, stray


class TestListModeration:
    """Tests for ListModerationUseCase."""

    @pytest.mark.asyncio
    async def test_unfiltered_is_threaded_newest_root_first(self, unit_env, seeded):
        post, first, reply, admin, second, stray = seeded
        use_case = await unit_env.get(ListModerationUseCase)

        response = await use_case.execute(ListModerationRequest())

        assert response.threaded is True
        assert [c.id for c in response.comments] == [str(stray.id), str(second.id), str(first.id)]
        assert [c.id for c in response.comments[2].replies] == [str(reply.id), str(admin.id)]
        assert response.comments[0].post_title == "Unknown Post"
        assert response.comments[1].post_title == "Hello"

    @pytest.mark.asyncio
    async def test_totals(self, unit_env, seeded):
        use_case = await unit_env.get(ListModerationUseCase)

        totals = (await use_case.execute(ListModerationRequest())).totals

        assert totals.total == 5
        assert totals.comments == 3
        assert totals.replies == 2
        assert totals.likes == 2

    @pytest.mark.asyncio
    async def test_search_gives_flat_list(self, unit_env, seeded):
        post, first, reply, admin, second, stray = seeded
        use_case = await unit_env.get(ListModerationUseCase)

        response = await use_case.execute(ListModerationRequest(search="GREAT"))

        assert response.threaded is False
        assert [c.id for c in response.comments] == [str(second.id)]

    @pytest.mark.asyncio
    async def test_search_matches_post_title(self, unit_env, seeded):
        use_case = await unit_env.get(ListModerationUseCase)

        response = await use_case.execute(ListModerationRequest(search="hello"))

        assert len(response.comments) == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "filter_type,names",
        [
            (CommentFilterType.COMMENTS, ["Dee", "Cy", "Ada"]),
            (CommentFilterType.REPLIES, ["Bob", "Admin"]),
            (CommentFilterType.ADMIN, ["Admin"]),
        ],
    )
    async def test_type_filters(self, unit_env, seeded, filter_type, names):
        use_case = await unit_env.get(ListModerationUseCase)

        response = await use_case.execute(ListModerationRequest(filter_type=filter_type))

        assert [c.author_name for c in response.comments] == names

    @pytest.mark.asyncio
    async def test_post_filter(self, unit_env, seeded):
        post = seeded[0]
        use_case = await unit_env.get(ListModerationUseCase)

        response = await use_case.execute(ListModerationRequest(post_id=str(post.id)))

        assert {c.post_id for c in response.comments} == {str(post.id)}
        assert len(response.comments) == 4


class TestAdminReply:
    @pytest.mark.asyncio
    async def test_reply_shows_up_under_parent(self, unit_env, seeded):
        first = seeded[1]
        reply_use_case = await unit_env.get(AdminReplyUseCase)
        list_use_case = await unit_env.get(ListModerationUseCase)

        card = await reply_use_case.execute(
            AdminReplyRequest(parent_id=str(first.id), content="Thanks!")
        )
        response = await list_use_case.execute(ListModerationRequest())

        assert card.is_admin_reply is True
        assert card.id in [r.id for r in response.comments[-1].replies]
