"""Site settings repository backed by the hosted record store."""

from typing import Any, Optional

from inkwell.adapter.backend.client import RecordStoreClient
from inkwell.domain.model.site_settings import SiteSettings
from inkwell.domain.repository.site_settings import SiteSettingsRepository
from inkwell.persistence.mappers import to_row

TABLE = "site_settings"


class RemoteSiteSettingsRepository(SiteSettingsRepository):
    """Settings repository over the single-row ``site_settings`` collection."""

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def get(self) -> Optional[dict[str, Any]]:
        rows = await self.client.table(TABLE).select().limit(1).fetch()
        return rows[0] if rows else None

    async def save(self, settings: SiteSettings) -> SiteSettings:
        if settings.id:
            row = to_row(settings)
            row.pop("id")
            rows = await self.client.table(TABLE).eq("id", settings.id).update(row)
        else:
            rows = await self.client.table(TABLE).insert(to_row(settings, drop_none=("id",)))
        return SiteSettings.merged(rows[0]) if rows else settings
