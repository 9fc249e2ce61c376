"""Site settings domain service and shared settings cell."""

import asyncio
from typing import Any

import logfire

from inkwell.domain.model.site_settings import SiteSettings
from inkwell.domain.repository import SiteSettingsRepository

from .base import Service


class SiteSettingsCell:
    """Lazily loaded, process-wide copy of the site settings.

    The first ``get()`` fetches from the backend; concurrent first callers
    wait on the same fetch. ``invalidate()`` drops the cached value so the
    next ``get()`` fetches again; a fetch that was running when
    ``invalidate()`` was called is discarded and repeated. A failed fetch is
    not cached: callers get the defaults and the next ``get()`` retries.
    """

    def __init__(self, repository: SiteSettingsRepository) -> None:
        self.repository = repository
        self._value: SiteSettings | None = None
        self._lock = asyncio.Lock()
        self._generation = 0

    @property
    def loaded(self) -> bool:
        return self._value is not None

    async def get(self) -> SiteSettings:
        if self._value is not None:
            return self._value

        async with self._lock:
            while self._value is None:
                generation = self._generation
                try:
                    record = await self.repository.get()
                except Exception as e:
                    logfire.warn("Site settings fetch failed, using defaults", error=str(e))
                    return SiteSettings()
                if generation != self._generation:
                    logfire.debug("Site settings changed during fetch, fetching again")
                    continue
                self._value = SiteSettings.merged(record)
                logfire.info("Site settings loaded", from_backend=record is not None)
            return self._value

    def invalidate(self) -> None:
        self._generation += 1
        self._value = None

    async def refresh(self) -> SiteSettings:
        self.invalidate()
        return await self.get()


class SiteSettingsService(Service):
    """Domain service for reading and updating site settings."""

    def __init__(
        self, site_settings_repository: SiteSettingsRepository, cell: SiteSettingsCell
    ) -> None:
        """Initialize site settings service.

        Args:
            site_settings_repository: Site settings repository
            cell: Shared settings cell, invalidated on update
        """
        self.site_settings_repository = site_settings_repository
        self.cell = cell

    async def get_settings(self) -> SiteSettings:
        return await self.cell.get()

    async def update_settings(self, values: dict[str, Any]) -> SiteSettings:
        """Apply changes to the site settings.

        Args:
            values: Fields to change; unknown keys are ignored

        Returns:
            The stored settings
        """
        with logfire.span("site_settings_service.update_settings", fields=sorted(values)):
            current = SiteSettings.merged(await self.site_settings_repository.get())
            updated = current.model_copy(
                update={
                    k: (v if v is not None else "")
                    for k, v in values.items()
                    if k in SiteSettings.model_fields and k != "id"
                }
            )
            saved = await self.site_settings_repository.save(updated)
            self.cell.invalidate()
            logfire.info("Site settings updated")
            return saved
