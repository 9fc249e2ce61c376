"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.category import Category, PostCategory
from inkwell.domain.value import CategoryId, PostId, Slug


class CategoryRepository(ABC):
    """Repository for Category entity and its post assignments."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """List all categories ordered by name."""
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by exact name.

        Args:
            name: Category name

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category and its post assignments."""
        pass

    @abstractmethod
    async def list_assignments(
        self,
        post_ids: list[PostId] | None = None,
        category_ids: list[CategoryId] | None = None,
    ) -> list[PostCategory]:
        """List post/category assignments.

        Args:
            post_ids: Only assignments of these posts, when given
            category_ids: Only assignments to these categories, when given

        Returns:
            Matching assignment rows
        """
        pass

    @abstractmethod
    async def set_post_categories(
        self, post_id: PostId, category_ids: list[CategoryId]
    ) -> None:
        """Replace every assignment of a post with the given categories.

        Args:
            post_id: The post ID
            category_ids: Categories the post belongs to afterwards
        """
        pass
