"""Create or rename category use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.category.list_categories import CategoryResponse
from inkwell.domain.service import CategoryService
from inkwell.domain.value import CategoryId


class SaveCategoryRequest(BaseModel):
    name: str
    category_id: str | None = None  # None creates a new category


class SaveCategoryUseCase(BaseUseCase):
    """Create a category or rename an existing one.

    The slug is always derived from the name.
    """

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: SaveCategoryRequest) -> CategoryResponse:
        """Execute save category flow.

        Raises:
            ValidationError: If the name is blank
            BusinessRuleViolationError: If another category has that slug
            NotFoundError: If renaming a category that does not exist
        """
        category = await self.category_service.save_category(
            request.name,
            CategoryId(UUID(request.category_id)) if request.category_id else None,
        )
        return CategoryResponse.from_domain(category)
