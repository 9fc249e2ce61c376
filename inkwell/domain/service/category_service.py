"""Category domain service."""

from collections import Counter, defaultdict
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from inkwell.domain.model.category import Category
from inkwell.domain.repository import CategoryRepository
from inkwell.domain.value import CategoryId, PostId, Slug, slugify

from .base import Service


class CategoryService(Service):
    """Domain service for categories and post assignments."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def list_categories(self) -> list[Category]:
        """All categories ordered by name."""
        with logfire.span("category_service.list_categories"):
            return await self.category_repository.list_all()

    async def save_category(
        self, name: str, category_id: CategoryId | None = None
    ) -> Category:
        """Create a category or rename an existing one.

        The slug is always derived from the name.

        Args:
            name: Category name
            category_id: Category to rename, None to create

        Returns:
            Saved category

        Raises:
            ValidationError: If the name is blank or yields no slug
            BusinessRuleViolationError: If another category has that name
            NotFoundError: If ``category_id`` names no category
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required", field="name")
        try:
            slug = Slug(slugify(name))
        except PydanticValidationError:
            raise ValidationError("Category name must contain letters or digits", field="name")

        with logfire.span(
            "category_service.save_category",
            name=name,
            category_id=str(category_id) if category_id else None,
        ):
            if category_id and not await self.category_repository.find_by_id(category_id):
                raise NotFoundError("Category", str(category_id))

            duplicate = await self.category_repository.find_by_name(name)
            if duplicate and duplicate.id != category_id:
                logfire.warn("Duplicate category name", name=name)
                raise BusinessRuleViolationError("Category already exists")

            category = Category(
                id=category_id or CategoryId(uuid4()),
                name=name,
                slug=slug,
            )
            saved = await self.category_repository.save(category)
            logfire.info("Category saved", category_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def delete_category(self, category_id: CategoryId) -> None:
        with logfire.span("category_service.delete_category", category_id=str(category_id)):
            if not await self.category_repository.find_by_id(category_id):
                raise NotFoundError("Category", str(category_id))
            await self.category_repository.delete(category_id)
            logfire.info("Category deleted", category_id=str(category_id))

    async def names_by_post(self, post_ids: list[PostId]) -> dict[PostId, list[str]]:
        """Category names of each post, in category name order.

        Args:
            post_ids: Posts to look up

        Returns:
            Mapping with an entry (possibly empty) for every requested post
        """
        result: dict[PostId, list[str]] = {pid: [] for pid in post_ids}
        if not post_ids:
            return result

        categories = {c.id: c for c in await self.category_repository.list_all()}
        assignments = await self.category_repository.list_assignments(post_ids=post_ids)

        grouped: dict[PostId, list[Category]] = defaultdict(list)
        for assignment in assignments:
            category = categories.get(assignment.category_id)
            if category:
                grouped[assignment.post_id].append(category)

        for post_id, cats in grouped.items():
            result[post_id] = [c.name for c in sorted(cats, key=lambda c: c.name)]
        return result

    async def category_ids_for_post(self, post_id: PostId) -> list[CategoryId]:
        assignments = await self.category_repository.list_assignments(post_ids=[post_id])
        return [a.category_id for a in assignments]

    async def post_counts(self) -> list[tuple[Category, int]]:
        """Number of posts in each category, largest first."""
        with logfire.span("category_service.post_counts"):
            categories = await self.category_repository.list_all()
            assignments = await self.category_repository.list_assignments()
            counts = Counter(a.category_id for a in assignments)
            pairs = [(c, counts.get(c.id, 0)) for c in categories]
            pairs.sort(key=lambda pair: pair[1], reverse=True)
            return pairs
