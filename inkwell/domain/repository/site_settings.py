"""Site settings repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from inkwell.domain.model.site_settings import SiteSettings


class SiteSettingsRepository(ABC):
    """Repository for the single site settings row."""

    @abstractmethod
    async def get(self) -> Optional[dict[str, Any]]:
        """Fetch the raw settings row, None when it has never been saved."""
        pass

    @abstractmethod
    async def save(self, settings: SiteSettings) -> SiteSettings:
        """Create or update the settings row."""
        pass
