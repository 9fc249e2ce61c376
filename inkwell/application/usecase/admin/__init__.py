"""Admin console use cases."""

from .dashboard import (
    AnalyticsResponse,
    CategoryCountResponse,
    DashboardResponse,
    GetAnalyticsUseCase,
    GetDashboardUseCase,
    MonthlyBucketResponse,
)
from .site_settings import (
    GetSiteSettingsUseCase,
    SiteSettingsResponse,
    UpdateSiteSettingsRequest,
    UpdateSiteSettingsUseCase,
)
from .upload_image import UploadImageRequest, UploadImageResponse, UploadImageUseCase

__all__ = [
    "AnalyticsResponse",
    "CategoryCountResponse",
    "DashboardResponse",
    "GetAnalyticsUseCase",
    "GetDashboardUseCase",
    "GetSiteSettingsUseCase",
    "MonthlyBucketResponse",
    "SiteSettingsResponse",
    "UpdateSiteSettingsRequest",
    "UpdateSiteSettingsUseCase",
    "UploadImageRequest",
    "UploadImageResponse",
    "UploadImageUseCase",
]
