"""Site-wide settings."""

from typing import Optional

from inkwell.domain.model.common import DomainModel

DEFAULT_SITE_TITLE = "Inkwell"
DEFAULT_SITE_DESCRIPTION = "A modern blog platform"


class SiteSettings(DomainModel):
    """Branding, SEO and social settings for the reader site.

    A single row in the backend; any missing column falls back to the
    defaults declared here.
    """

    id: Optional[str] = None
    site_title: str = DEFAULT_SITE_TITLE
    site_description: str = DEFAULT_SITE_DESCRIPTION
    site_tagline: str = ""
    favicon_url: str = ""
    site_icon_url: str = ""
    og_image_url: str = ""
    meta_keywords: str = ""
    meta_author: str = ""
    google_analytics_id: str = ""
    social_twitter: str = ""
    social_facebook: str = ""
    social_instagram: str = ""
    social_linkedin: str = ""

    @classmethod
    def merged(cls, record: dict | None) -> "SiteSettings":
        """Overlay a backend row on the defaults, ignoring null columns."""
        values = {k: v for k, v in (record or {}).items() if v is not None}
        return cls.model_validate(values)
