"""Admin post and category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from inkwell.application.usecase.category import (
    CategoryResponse,
    DeleteCategoryRequest,
    DeleteCategoryUseCase,
    ListCategoriesResponse,
    ListCategoriesUseCase,
    SaveCategoryRequest,
    SaveCategoryUseCase,
)
from inkwell.application.usecase.post import (
    AdminPostResponse,
    DeletePostRequest,
    DeletePostUseCase,
    GetAdminPostRequest,
    GetAdminPostResponse,
    GetAdminPostUseCase,
    ListAdminPostsResponse,
    ListAdminPostsUseCase,
    SavePostRequest,
    SavePostUseCase,
)
from inkwell.domain.model.session import AdminSession
from inkwell.domain.value import PostStatus
from inkwell.interface.api.dependencies import require_admin

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    route_class=DishkaRoute,
    dependencies=[Depends(require_admin)],
)


class PostAPIRequest(BaseModel):
    """Post editor form."""

    title: str
    slug: str | None = None
    excerpt: str | None = None
    content: str = ""
    thumbnail_url: str | None = None
    status: PostStatus = PostStatus.DRAFT
    category_ids: list[str] = []


class CategoryAPIRequest(BaseModel):
    name: str


@router.get("/posts", response_model=ListAdminPostsResponse)
async def list_posts(
    list_admin_posts_use_case: FromDishka[ListAdminPostsUseCase],
) -> ListAdminPostsResponse:
    return await list_admin_posts_use_case.execute()


@router.get("/posts/{post_id}", response_model=GetAdminPostResponse)
async def get_post(
    post_id: str,
    get_admin_post_use_case: FromDishka[GetAdminPostUseCase],
) -> GetAdminPostResponse:
    """A post with its categories and comments, newest thread first."""
    return await get_admin_post_use_case.execute(GetAdminPostRequest(post_id=post_id))


@router.post("/posts", response_model=AdminPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    save_post_use_case: FromDishka[SavePostUseCase],
    session: AdminSession = Depends(require_admin),
) -> AdminPostResponse:
    """Create a post.

    The slug is derived from the title when left blank; publishing stamps
    the publication date.
    """
    return await save_post_use_case.execute(
        SavePostRequest(**request.model_dump(), author_id=str(session.user_id))
    )


@router.put("/posts/{post_id}", response_model=AdminPostResponse)
async def update_post(
    post_id: str,
    request: PostAPIRequest,
    save_post_use_case: FromDishka[SavePostUseCase],
) -> AdminPostResponse:
    return await save_post_use_case.execute(
        SavePostRequest(**request.model_dump(), post_id=post_id)
    )


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> None:
    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))


@router.get("/categories", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    return await list_categories_use_case.execute()


@router.post(
    "/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED
)
async def create_category(
    request: CategoryAPIRequest,
    save_category_use_case: FromDishka[SaveCategoryUseCase],
) -> CategoryResponse:
    """Create a category. 409 if one with that name exists."""
    return await save_category_use_case.execute(SaveCategoryRequest(name=request.name))


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def rename_category(
    category_id: str,
    request: CategoryAPIRequest,
    save_category_use_case: FromDishka[SaveCategoryUseCase],
) -> CategoryResponse:
    return await save_category_use_case.execute(
        SaveCategoryRequest(name=request.name, category_id=category_id)
    )


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    delete_category_use_case: FromDishka[DeleteCategoryUseCase],
) -> None:
    await delete_category_use_case.execute(DeleteCategoryRequest(category_id=category_id))
