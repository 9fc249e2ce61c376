"""Shortened link repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.value import LinkId


class LinkRepository(ABC):
    """Repository for ShortenedLink entity."""

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[ShortenedLink]:
        """Resolve a URL token against either the alias or the token column.

        Args:
            token: Value of the ``token`` query parameter

        Returns:
            The link if exactly one matches, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, link_id: LinkId) -> Optional[ShortenedLink]:
        pass

    @abstractmethod
    async def list_all(self) -> list[ShortenedLink]:
        """List all links, newest first."""
        pass

    @abstractmethod
    async def save(self, link: ShortenedLink) -> ShortenedLink:
        """Insert a new link.

        When ``link.token`` is None the store generates one.

        Returns:
            The stored link with its token populated
        """
        pass

    @abstractmethod
    async def update(
        self, link_id: LinkId, link_name: str, original_url: str
    ) -> Optional[ShortenedLink]:
        """Rename or retarget a link.

        Returns:
            The updated link, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, link_id: LinkId) -> None:
        pass
