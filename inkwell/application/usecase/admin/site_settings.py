"""Site settings use cases."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model.site_settings import SiteSettings
from inkwell.domain.service import SiteSettingsService


class SiteSettingsResponse(BaseModel):
    site_title: str
    site_description: str
    site_tagline: str
    favicon_url: str
    site_icon_url: str
    og_image_url: str
    meta_keywords: str
    meta_author: str
    google_analytics_id: str
    social_twitter: str
    social_facebook: str
    social_instagram: str
    social_linkedin: str

    @classmethod
    def from_domain(cls, settings: SiteSettings) -> "SiteSettingsResponse":
        return cls.model_validate(settings.model_dump(exclude={"id"}))


class GetSiteSettingsUseCase(BaseUseCase):
    """Current site settings, defaults filled in."""

    def __init__(self, site_settings_service: SiteSettingsService) -> None:
        self.site_settings_service = site_settings_service

    async def execute(self, request: None = None) -> SiteSettingsResponse:
        settings = await self.site_settings_service.get_settings()
        return SiteSettingsResponse.from_domain(settings)


class UpdateSiteSettingsRequest(BaseModel):
    """Fields left as None are not changed."""

    site_title: str | None = None
    site_description: str | None = None
    site_tagline: str | None = None
    favicon_url: str | None = None
    site_icon_url: str | None = None
    og_image_url: str | None = None
    meta_keywords: str | None = None
    meta_author: str | None = None
    google_analytics_id: str | None = None
    social_twitter: str | None = None
    social_facebook: str | None = None
    social_instagram: str | None = None
    social_linkedin: str | None = None


class UpdateSiteSettingsUseCase(BaseUseCase):
    def __init__(self, site_settings_service: SiteSettingsService) -> None:
        self.site_settings_service = site_settings_service

    async def execute(self, request: UpdateSiteSettingsRequest) -> SiteSettingsResponse:
        settings = await self.site_settings_service.update_settings(
            request.model_dump(exclude_none=True)
        )
        return SiteSettingsResponse.from_domain(settings)
