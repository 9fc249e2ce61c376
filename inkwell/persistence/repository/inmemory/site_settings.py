"""In-memory site settings repository for testing."""

from typing import Any, Optional
from uuid import uuid4

from inkwell.domain.model.site_settings import SiteSettings
from inkwell.domain.repository.site_settings import SiteSettingsRepository


class InMemorySiteSettingsRepository(SiteSettingsRepository):
    """In-memory implementation of SiteSettingsRepository for testing."""

    def __init__(self) -> None:
        self._row: dict[str, Any] | None = None
        self.fetch_count = 0

    async def get(self) -> Optional[dict[str, Any]]:
        self.fetch_count += 1
        return dict(self._row) if self._row is not None else None

    async def save(self, settings: SiteSettings) -> SiteSettings:
        if not settings.id:
            settings = settings.model_copy(update={"id": str(uuid4())})
        self._row = settings.to_record()
        return settings
