"""Post repository backed by the hosted record store."""

from typing import Optional

from inkwell.adapter.backend.client import RecordStoreClient
from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId, PostStatus, Slug
from inkwell.persistence.mappers import search_term, to_row

TABLE = "posts"


class RemotePostRepository(PostRepository):
    """Post repository over the ``posts`` collection."""

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        row = await self.client.table(TABLE).select().eq("id", str(post_id)).maybe_single()
        return Post.from_record(row) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        row = await self.client.table(TABLE).select().eq("slug", str(slug)).maybe_single()
        return Post.from_record(row) if row else None

    async def list_published(
        self,
        search: str | None = None,
        post_ids: list[PostId] | None = None,
        ascending: bool = False,
        limit: int = 9,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        if post_ids is not None and not post_ids:
            return [], 0

        query = self.client.table(TABLE).select().eq("status", PostStatus.PUBLISHED.value)
        if search:
            term = search_term(search)
            if term:
                query.or_(f"title.ilike.*{term}*", f"excerpt.ilike.*{term}*")
        if post_ids is not None:
            query.in_("id", [str(pid) for pid in post_ids])
        query.order("published_at", ascending=ascending).range(offset, offset + limit - 1)

        rows, total = await query.fetch_with_count()
        return [Post.from_record(row) for row in rows], total

    async def list_published_slugs(self) -> list[Slug]:
        rows = await (
            self.client.table(TABLE)
            .select("slug")
            .eq("status", PostStatus.PUBLISHED.value)
            .fetch()
        )
        return [Slug(row["slug"]) for row in rows]

    async def list_all(self) -> list[Post]:
        rows = await self.client.table(TABLE).select().order("created_at", ascending=False).fetch()
        return [Post.from_record(row) for row in rows]

    async def save(self, post: Post) -> Post:
        rows = await self.client.table(TABLE).upsert(to_row(post))
        return Post.from_record(rows[0]) if rows else post

    async def delete(self, post_id: PostId) -> None:
        await self.client.table(TABLE).eq("id", str(post_id)).delete()

    async def update_view_count(self, post_id: PostId, view_count: int) -> None:
        await self.client.table(TABLE).eq("id", str(post_id)).update({"view_count": view_count})
