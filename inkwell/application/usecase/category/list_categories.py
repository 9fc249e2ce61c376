"""List categories use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model.category import Category
from inkwell.domain.service import CategoryService


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(id=str(category.id), name=category.name, slug=str(category.slug))


class ListCategoriesResponse(BaseModel):
    categories: list[CategoryResponse]


class ListCategoriesUseCase(BaseUseCase):
    """All categories ordered by name."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: None = None) -> ListCategoriesResponse:
        categories = await self.category_service.list_categories()
        return ListCategoriesResponse(
            categories=[CategoryResponse.from_domain(c) for c in categories]
        )
