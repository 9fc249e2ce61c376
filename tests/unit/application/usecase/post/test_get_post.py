"""Unit tests for the reader post use cases."""

import pytest

from inkwell.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import PostRepository
from inkwell.domain.service import CategoryService
from inkwell.domain.value import PostCardVariant
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPost:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_view_is_counted_and_reported(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        posts = await unit_env.get(PostRepository)
        post = make_post(title="Hello World", view_count=4)
        await posts.save(post)

        # Act
        response = await use_case.execute(GetPostRequest(slug="hello-world.html"))

        # Assert
        assert response.id == str(post.id)
        assert response.view_count == 5
        assert (await posts.find_by_id(post.id)).view_count == 5

    @pytest.mark.asyncio
    async def test_categories_and_related(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        categories = await unit_env.get(CategoryService)
        posts = await unit_env.get(PostRepository)
        news = await categories.save_category("News")
        main = make_post(title="Main", days=1)
        sibling = make_post(title="Sibling", days=0)
        for post in (main, sibling):
            await posts.save(post)
            await categories.category_repository.set_post_categories(post.id, [news.id])

        response = await use_case.execute(GetPostRequest(slug="main"))

        assert response.categories == ["News"]
        assert [card.title for card in response.related] == ["Sibling"]
        assert response.related[0].url == "/posts/sibling.html"

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(slug="nothing-here.html"))


class TestListPosts:
    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        posts = await unit_env.get(PostRepository)
        for i in range(10):
            await posts.save(make_post(title=f"Post {i}", days=i))

        response = await use_case.execute(ListPostsRequest(page=2))

        assert response.total == 10
        assert response.total_pages == 2
        assert response.per_page == 9
        assert [p.title for p in response.posts] == ["Post 0"]

    @pytest.mark.asyncio
    async def test_compact_variant(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        posts = await unit_env.get(PostRepository)
        await posts.save(make_post())

        response = await use_case.execute(
            ListPostsRequest(variant=PostCardVariant.COMPACT, sort="oldest")
        )

        assert response.posts[0].variant == PostCardVariant.COMPACT
        assert not hasattr(response.posts[0], "excerpt")
