"""In-memory shortened link repository for testing."""

import secrets
from typing import Optional
from uuid import UUID

from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.repository.link import LinkRepository
from inkwell.domain.value import LinkId


class InMemoryLinkRepository(LinkRepository):
    """In-memory implementation of LinkRepository for testing.

    Generates a token for links saved without one, like the backend's
    column default.
    """

    def __init__(self) -> None:
        self._links: dict[LinkId, ShortenedLink] = {}

    async def find_by_token(self, token: str) -> Optional[ShortenedLink]:
        matches = [l for l in self._links.values() if token in (l.alias, l.token)]
        return matches[0] if len(matches) == 1 else None

    async def find_by_id(self, link_id: LinkId) -> Optional[ShortenedLink]:
        return self._links.get(link_id)

    async def list_all(self) -> list[ShortenedLink]:
        return sorted(self._links.values(), key=lambda l: l.created_at, reverse=True)

    async def save(self, link: ShortenedLink) -> ShortenedLink:
        if link.token is None:
            link = link.model_copy(update={"token": secrets.token_urlsafe(6)})
        self._links[link.id] = link
        return link

    async def update(
        self, link_id: LinkId, link_name: str, original_url: str
    ) -> Optional[ShortenedLink]:
        link = self._links.get(link_id)
        if not link:
            return None
        updated = link.model_copy(update={"link_name": link_name, "original_url": original_url})
        self._links[link_id] = updated
        return updated

    async def delete(self, link_id: LinkId) -> None:
        self._links.pop(link_id, None)

    async def increment_clicks(self, link_id: str | LinkId) -> None:
        key = LinkId(UUID(str(link_id)))
        link = self._links.get(key)
        if link:
            self._links[key] = link.model_copy(update={"clicks": link.clicks + 1})
