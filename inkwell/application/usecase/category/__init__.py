"""Category use cases."""

from .delete_category import DeleteCategoryRequest, DeleteCategoryUseCase
from .list_categories import (
    CategoryResponse,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from .save_category import SaveCategoryRequest, SaveCategoryUseCase

__all__ = [
    "CategoryResponse",
    "DeleteCategoryRequest",
    "DeleteCategoryUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "SaveCategoryRequest",
    "SaveCategoryUseCase",
]
