"""Reader site routes: settings, home page and categories."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from inkwell.application.usecase.admin import GetSiteSettingsUseCase, SiteSettingsResponse
from inkwell.application.usecase.category import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from inkwell.application.usecase.post import (
    GetHomeRequest,
    GetHomeResponse,
    GetHomeUseCase,
)
from inkwell.domain.value import PostCardVariant

router = APIRouter(tags=["site"], route_class=DishkaRoute)


@router.get("/site/settings", response_model=SiteSettingsResponse)
async def get_site_settings(
    get_site_settings_use_case: FromDishka[GetSiteSettingsUseCase],
) -> SiteSettingsResponse:
    """Branding, SEO and social settings for the reader site."""
    return await get_site_settings_use_case.execute()


@router.get("/home", response_model=GetHomeResponse)
async def get_home(
    get_home_use_case: FromDishka[GetHomeUseCase],
    variant: PostCardVariant = PostCardVariant.FULL,
) -> GetHomeResponse:
    """Latest published posts and all categories.

    Args:
        get_home_use_case: Get home use case from DI
        variant: Post card variant (compact or full)
    """
    return await get_home_use_case.execute(GetHomeRequest(variant=variant))


@router.get("/categories", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    return await list_categories_use_case.execute()
