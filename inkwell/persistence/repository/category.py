"""Category repository backed by the hosted record store."""

from typing import Optional

from inkwell.adapter.backend.client import RecordStoreClient
from inkwell.domain.model.category import Category, PostCategory
from inkwell.domain.repository.category import CategoryRepository
from inkwell.domain.value import CategoryId, PostId, Slug
from inkwell.persistence.mappers import to_row

TABLE = "categories"
JOIN_TABLE = "post_categories"


class RemoteCategoryRepository(CategoryRepository):
    """Category repository over ``categories`` and ``post_categories``."""

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def list_all(self) -> list[Category]:
        rows = await self.client.table(TABLE).select().order("name").fetch()
        return [Category.from_record(row) for row in rows]

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        row = await self.client.table(TABLE).select().eq("id", str(category_id)).maybe_single()
        return Category.from_record(row) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        row = await self.client.table(TABLE).select().eq("slug", str(slug)).maybe_single()
        return Category.from_record(row) if row else None

    async def find_by_name(self, name: str) -> Optional[Category]:
        row = await self.client.table(TABLE).select().eq("name", name).maybe_single()
        return Category.from_record(row) if row else None

    async def save(self, category: Category) -> Category:
        rows = await self.client.table(TABLE).upsert(to_row(category))
        return Category.from_record(rows[0]) if rows else category

    async def delete(self, category_id: CategoryId) -> None:
        await self.client.table(JOIN_TABLE).eq("category_id", str(category_id)).delete()
        await self.client.table(TABLE).eq("id", str(category_id)).delete()

    async def list_assignments(
        self,
        post_ids: list[PostId] | None = None,
        category_ids: list[CategoryId] | None = None,
    ) -> list[PostCategory]:
        if (post_ids is not None and not post_ids) or (
            category_ids is not None and not category_ids
        ):
            return []

        query = self.client.table(JOIN_TABLE).select("post_id,category_id")
        if post_ids is not None:
            query.in_("post_id", [str(pid) for pid in post_ids])
        if category_ids is not None:
            query.in_("category_id", [str(cid) for cid in category_ids])
        rows = await query.fetch()
        return [PostCategory.from_record(row) for row in rows]

    async def set_post_categories(
        self, post_id: PostId, category_ids: list[CategoryId]
    ) -> None:
        await self.client.table(JOIN_TABLE).eq("post_id", str(post_id)).delete()
        if category_ids:
            await self.client.table(JOIN_TABLE).insert(
                [{"post_id": str(post_id), "category_id": str(cid)} for cid in category_ids]
            )
