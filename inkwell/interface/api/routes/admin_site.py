"""Admin dashboard, analytics, settings and upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, UploadFile, status

from inkwell.application.usecase.admin import (
    AnalyticsResponse,
    DashboardResponse,
    GetAnalyticsUseCase,
    GetDashboardUseCase,
    GetSiteSettingsUseCase,
    SiteSettingsResponse,
    UpdateSiteSettingsRequest,
    UpdateSiteSettingsUseCase,
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)
from inkwell.domain.value import UploadKind
from inkwell.interface.api.dependencies import require_admin

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    route_class=DishkaRoute,
    dependencies=[Depends(require_admin)],
)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
) -> DashboardResponse:
    """Headline numbers and the five most recent posts."""
    return await get_dashboard_use_case.execute()


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(
    get_analytics_use_case: FromDishka[GetAnalyticsUseCase],
) -> AnalyticsResponse:
    return await get_analytics_use_case.execute()


@router.get("/settings", response_model=SiteSettingsResponse)
async def get_settings(
    get_site_settings_use_case: FromDishka[GetSiteSettingsUseCase],
) -> SiteSettingsResponse:
    return await get_site_settings_use_case.execute()


@router.put("/settings", response_model=SiteSettingsResponse)
async def update_settings(
    request: UpdateSiteSettingsRequest,
    update_site_settings_use_case: FromDishka[UpdateSiteSettingsUseCase],
) -> SiteSettingsResponse:
    """Change site settings. Omitted fields keep their current value."""
    return await update_site_settings_use_case.execute(request)


@router.post(
    "/uploads/{kind}",
    response_model=UploadImageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_image(
    kind: UploadKind,
    upload_image_use_case: FromDishka[UploadImageUseCase],
    file: UploadFile = File(...),
) -> UploadImageResponse:
    """Upload a post thumbnail (up to 5MB) or a branding image (up to 2MB).

    Args:
        kind: ``thumbnail`` or ``branding``
        upload_image_use_case: Upload use case from DI
        file: Image file

    Returns:
        Public URL of the stored image
    """
    data = await file.read()
    return await upload_image_use_case.execute(
        UploadImageRequest(
            kind=kind,
            filename=file.filename or "",
            content_type=file.content_type,
            data=data,
        )
    )
