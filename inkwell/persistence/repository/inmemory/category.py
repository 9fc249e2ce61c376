"""In-memory category repository for testing."""

from typing import Optional

from inkwell.domain.model.category import Category, PostCategory
from inkwell.domain.repository.category import CategoryRepository
from inkwell.domain.value import CategoryId, PostId, Slug


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}
        self._assignments: list[PostCategory] = []

    async def list_all(self) -> list[Category]:
        return sorted(self._categories.values(), key=lambda c: c.name)

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._categories.get(category_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        return next((c for c in self._categories.values() if c.slug == slug), None)

    async def find_by_name(self, name: str) -> Optional[Category]:
        return next((c for c in self._categories.values() if c.name == name), None)

    async def save(self, category: Category) -> Category:
        self._categories[category.id] = category
        return category

    async def delete(self, category_id: CategoryId) -> None:
        self._categories.pop(category_id, None)
        self._assignments = [a for a in self._assignments if a.category_id != category_id]

    async def list_assignments(
        self,
        post_ids: list[PostId] | None = None,
        category_ids: list[CategoryId] | None = None,
    ) -> list[PostCategory]:
        result = self._assignments
        if post_ids is not None:
            wanted_posts = set(post_ids)
            result = [a for a in result if a.post_id in wanted_posts]
        if category_ids is not None:
            wanted_categories = set(category_ids)
            result = [a for a in result if a.category_id in wanted_categories]
        return list(result)

    async def set_post_categories(
        self, post_id: PostId, category_ids: list[CategoryId]
    ) -> None:
        self._assignments = [a for a in self._assignments if a.post_id != post_id]
        self._assignments.extend(
            PostCategory(post_id=post_id, category_id=cid) for cid in category_ids
        )
