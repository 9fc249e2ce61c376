"""Realtime DI providers (non-mockable).

Everything here is process-wide: the change feed fans events out to every
open comment stream, and gate sessions outlive the request that opened them.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from inkwell.adapter.realtime import GateSessionStore, InProcessChangeFeed
from inkwell.config import LinkGateSettings
from inkwell.domain.repository import SiteSettingsRepository
from inkwell.domain.service import ChangeFeed, SiteSettingsCell
from inkwell.util.di.base import ProviderBase


class ProdRealtimeProvider(ProviderBase):
    """Change feed, gate sessions and the shared site settings cell."""

    scope = Scope.APP

    @provide
    def get_change_feed(self) -> ChangeFeed:
        """Provide the in-process change feed."""
        return InProcessChangeFeed()

    @provide
    async def get_gate_store(
        self, link_gate_settings: LinkGateSettings
    ) -> AsyncIterator[GateSessionStore]:
        """Provide the gate session store; open countdowns stop on shutdown."""
        store = GateSessionStore(ttl_minutes=link_gate_settings.session_ttl_minutes)
        yield store
        store.close_all()

    @provide
    def get_site_settings_cell(
        self, site_settings_repository: SiteSettingsRepository
    ) -> SiteSettingsCell:
        """Provide the lazily loaded site settings cell."""
        return SiteSettingsCell(site_settings_repository)
