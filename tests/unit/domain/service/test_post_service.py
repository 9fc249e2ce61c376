"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import PostRepository
from inkwell.domain.service import CategoryService, PostService
from inkwell.domain.value import PostId, PostStatus
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_posts(repo: PostRepository, *posts):
    for post in posts:
        await repo.save(post)


class TestGetPublishedBySlug:
    """Tests for reader URL lookups."""

    @pytest.mark.asyncio
    async def test_html_suffix_resolves_same_post(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        post = make_post(title="Hello World")
        await repo.save(post)

        with_suffix = await service.get_published_by_slug("hello-world.html")
        without = await service.get_published_by_slug("hello-world")

        assert with_suffix.id == without.id == post.id

    @pytest.mark.asyncio
    async def test_draft_is_not_found(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        await repo.save(make_post(title="Secret", status=PostStatus.DRAFT))

        with pytest.raises(NotFoundError):
            await service.get_published_by_slug("secret")

    @pytest.mark.asyncio
    async def test_malformed_slug_is_not_found(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.get_published_by_slug(".html")


class TestListPublished:
    """Tests for the reader listing."""

    @pytest.mark.asyncio
    async def test_newest_first_and_paginated(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        posts = [make_post(title=f"Post {i}", days=i) for i in range(12)]
        await seed_posts(repo, *posts)

        page_one, total = await service.list_published(page=1)
        page_two, _ = await service.list_published(page=2)

        assert total == 12
        assert len(page_one) == 9
        assert page_one[0].title == "Post 11"
        assert [p.title for p in page_two] == ["Post 2", "Post 1", "Post 0"]

    @pytest.mark.asyncio
    async def test_oldest_first(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        await seed_posts(repo, make_post(title="Old", days=0), make_post(title="New", days=5))

        posts, _ = await service.list_published(ascending=True)

        assert [p.title for p in posts] == ["Old", "New"]

    @pytest.mark.asyncio
    async def test_search_matches_title_or_excerpt(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        await seed_posts(
            repo,
            make_post(title="Python tips"),
            make_post(title="Other", excerpt="all about PYTHON"),
            make_post(title="Unrelated"),
        )

        posts, total = await service.list_published(search="  python ")

        assert total == 2
        assert {p.title for p in posts} == {"Python tips", "Other"}

    @pytest.mark.asyncio
    async def test_category_filter_applies_before_pagination(self, unit_env):
        service = await unit_env.get(PostService)
        categories = await unit_env.get(CategoryService)
        repo = await unit_env.get(PostRepository)

        news = await categories.save_category("News")
        posts = [make_post(title=f"Post {i}", days=i) for i in range(20)]
        await seed_posts(repo, *posts)
        tagged = posts[:11]
        for post in tagged:
            await categories.category_repository.set_post_categories(post.id, [news.id])

        page_one, total = await service.list_published(category_slug="news", page=1)
        page_two, _ = await service.list_published(category_slug="news", page=2)

        assert total == 11
        assert len(page_one) == 9
        assert len(page_two) == 2
        assert {p.id for p in page_one + page_two} == {p.id for p in tagged}

    @pytest.mark.asyncio
    async def test_unknown_category_gives_empty_page(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        await repo.save(make_post())

        posts, total = await service.list_published(category_slug="missing")

        assert posts == []
        assert total == 0


class TestRelated:
    @pytest.mark.asyncio
    async def test_related_shares_category_and_excludes_self(self, unit_env):
        service = await unit_env.get(PostService)
        categories = await unit_env.get(CategoryService)
        repo = await unit_env.get(PostRepository)

        science = await categories.save_category("Science")
        posts = [make_post(title=f"Post {i}", days=i) for i in range(6)]
        await seed_posts(repo, *posts)
        for post in posts[:5]:
            await categories.category_repository.set_post_categories(post.id, [science.id])

        related = await service.related(posts[0])

        assert len(related) == 3
        assert posts[0].id not in {p.id for p in related}
        assert posts[5].id not in {p.id for p in related}

    @pytest.mark.asyncio
    async def test_uncategorized_post_gets_latest(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        posts = [make_post(title=f"Post {i}", days=i) for i in range(5)]
        await seed_posts(repo, *posts)

        related = await service.related(posts[4])

        assert [p.title for p in related] == ["Post 3", "Post 2", "Post 1"]


class TestSavePost:
    """Tests for the editor save path."""

    @pytest.mark.asyncio
    async def test_create_derives_slug_and_stamps_publish_time(self, unit_env):
        service = await unit_env.get(PostService)

        post = await service.save_post(
            title="  My First Post! ",
            content="<p>Hi</p>",
            status=PostStatus.PUBLISHED,
            excerpt="   ",
        )

        assert post.title == "My First Post!"
        assert str(post.slug) == "my-first-post"
        assert post.excerpt is None
        assert post.published_at is not None

    @pytest.mark.asyncio
    async def test_draft_has_no_publish_time(self, unit_env):
        service = await unit_env.get(PostService)

        post = await service.save_post(title="Draft", content="", status=PostStatus.DRAFT)

        assert post.published_at is None

    @pytest.mark.asyncio
    async def test_update_keeps_first_publish_time_and_views(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        original = make_post(title="Hello", view_count=7)
        await repo.save(original)

        updated = await service.save_post(
            post_id=original.id,
            title="Hello again",
            slug="hello.html",
            content="new",
            status=PostStatus.PUBLISHED,
        )

        assert updated.id == original.id
        assert str(updated.slug) == "hello"
        assert updated.published_at == original.published_at
        assert updated.view_count == 7

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError) as exc_info:
            await service.save_post(title="   ", content="", status=PostStatus.DRAFT)

        assert exc_info.value.field == "title"

    @pytest.mark.asyncio
    async def test_update_missing_post_fails(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.save_post(
                post_id=PostId(uuid4()),
                title="Ghost",
                content="",
                status=PostStatus.DRAFT,
            )

    @pytest.mark.asyncio
    async def test_record_view_increments(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        post = make_post(view_count=2)
        await repo.save(post)

        await service.record_view(post)

        assert (await repo.find_by_id(post.id)).view_count == 3
