"""Shortened link repository backed by the hosted record store."""

from typing import Optional

from inkwell.adapter.backend.client import RecordStoreClient, quote_value
from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.repository.link import LinkRepository
from inkwell.domain.value import LinkId
from inkwell.persistence.mappers import to_row

TABLE = "shortened_links"


class RemoteLinkRepository(LinkRepository):
    """Link repository over the ``shortened_links`` collection.

    A new link without an alias is inserted without a token so the
    backend's column default generates one.
    """

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def find_by_token(self, token: str) -> Optional[ShortenedLink]:
        value = quote_value(token)
        row = await (
            self.client.table(TABLE)
            .select()
            .or_(f"alias.eq.{value}", f"token.eq.{value}")
            .maybe_single()
        )
        return ShortenedLink.from_record(row) if row else None

    async def find_by_id(self, link_id: LinkId) -> Optional[ShortenedLink]:
        row = await self.client.table(TABLE).select().eq("id", str(link_id)).maybe_single()
        return ShortenedLink.from_record(row) if row else None

    async def list_all(self) -> list[ShortenedLink]:
        rows = await self.client.table(TABLE).select().order("created_at", ascending=False).fetch()
        return [ShortenedLink.from_record(row) for row in rows]

    async def save(self, link: ShortenedLink) -> ShortenedLink:
        rows = await self.client.table(TABLE).insert(to_row(link, drop_none=("token",)))
        return ShortenedLink.from_record(rows[0]) if rows else link

    async def update(
        self, link_id: LinkId, link_name: str, original_url: str
    ) -> Optional[ShortenedLink]:
        rows = await self.client.table(TABLE).eq("id", str(link_id)).update(
            {"link_name": link_name, "original_url": original_url}
        )
        return ShortenedLink.from_record(rows[0]) if rows else None

    async def delete(self, link_id: LinkId) -> None:
        await self.client.table(TABLE).eq("id", str(link_id)).delete()
