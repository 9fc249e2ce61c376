"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId, Slug

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        return next((p for p in self._posts.values() if p.slug == slug), None)

    async def list_published(
        self,
        search: str | None = None,
        post_ids: list[PostId] | None = None,
        ascending: bool = False,
        limit: int = 9,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        posts = [p for p in self._posts.values() if p.is_published]

        if search:
            needle = search.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower() or needle in (p.excerpt or "").lower()
            ]
        if post_ids is not None:
            wanted = set(post_ids)
            posts = [p for p in posts if p.id in wanted]

        posts.sort(key=lambda p: p.published_at or _EPOCH, reverse=not ascending)
        return posts[offset : offset + limit], len(posts)

    async def list_published_slugs(self) -> list[Slug]:
        return [p.slug for p in self._posts.values() if p.is_published]

    async def list_all(self) -> list[Post]:
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        self._posts.pop(post_id, None)

    async def update_view_count(self, post_id: PostId, view_count: int) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update={"view_count": view_count})
