"""Delete category use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CategoryService
from inkwell.domain.value import CategoryId


class DeleteCategoryRequest(BaseModel):
    category_id: str


class DeleteCategoryUseCase(BaseUseCase):
    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: DeleteCategoryRequest) -> None:
        await self.category_service.delete_category(CategoryId(UUID(request.category_id)))
