"""Shortened link domain service."""

import asyncio
import random
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from inkwell.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.repository import LinkRepository, PostRepository
from inkwell.domain.value import LinkId

from .base import Service
from .link_gate import LinkGate

INCREMENT_LINK_CLICK = "increment-link-click"


class FunctionInvoker(ABC):
    """Port for the backend's serverless functions."""

    @abstractmethod
    async def invoke(self, name: str, payload: dict[str, Any]) -> Any:
        """Invoke a function by name.

        Args:
            name: Function name
            payload: JSON body

        Returns:
            Decoded JSON response, or None for empty bodies
        """
        pass


class LinkService(Service):
    """Domain service for shortened links and their gates."""

    def __init__(
        self,
        link_repository: LinkRepository,
        post_repository: PostRepository,
        function_invoker: FunctionInvoker,
    ) -> None:
        """Initialize link service.

        Args:
            link_repository: Link repository
            post_repository: Post repository, to pick a host post
            function_invoker: Backend function invoker for click counting
        """
        self.link_repository = link_repository
        self.post_repository = post_repository
        self.function_invoker = function_invoker
        self._background: set[asyncio.Task] = set()

    async def resolve(self, token: str | None) -> ShortenedLink | None:
        """Look up the link a URL token points at.

        Args:
            token: ``token`` query parameter, may be missing

        Returns:
            The link whose alias or token equals ``token``, None otherwise
        """
        if not token or not token.strip():
            return None
        with logfire.span("link_service.resolve"):
            link = await self.link_repository.find_by_token(token.strip())
            if not link:
                logfire.info("Link token did not resolve")
            return link

    async def open_gate(self, token: str | None, countdown: int) -> LinkGate:
        """Build a gate for a token; absent when the token resolves to nothing."""
        link = await self.resolve(token)
        if link is None:
            return LinkGate.absent()
        return LinkGate(link, countdown=countdown, on_continue=self.record_click_later)

    async def record_click(self, link: ShortenedLink) -> None:
        """Increment a link's click counter. Failures are logged and dropped."""
        try:
            await self.function_invoker.invoke(
                INCREMENT_LINK_CLICK, {"link_id": str(link.id)}
            )
            logfire.info("Link click recorded", link_id=str(link.id))
        except Exception as e:
            logfire.warn("Link click increment failed", link_id=str(link.id), error=str(e))

    def record_click_later(self, link: ShortenedLink) -> None:
        """Schedule ``record_click`` without waiting for it."""
        task = asyncio.create_task(self.record_click(link))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def drain(self) -> None:
        """Wait for scheduled click increments to finish."""
        if self._background:
            await asyncio.gather(*self._background)

    async def list_links(self) -> list[ShortenedLink]:
        with logfire.span("link_service.list_links"):
            return await self.link_repository.list_all()

    async def get_link(self, link_id: LinkId) -> ShortenedLink:
        link = await self.link_repository.find_by_id(link_id)
        if not link:
            raise NotFoundError("Link", str(link_id))
        return link

    async def create_link(
        self,
        link_name: str,
        original_url: str,
        alias: str | None = None,
        password: str | None = None,
    ) -> ShortenedLink:
        """Create a link hosted on a random published post.

        Args:
            link_name: Display label
            original_url: Redirect target
            alias: Human-chosen token, optional
            password: Plaintext password, optional

        Returns:
            The stored link

        Raises:
            ValidationError: If name or URL is blank
            BusinessRuleViolationError: If there is no published post to host it
        """
        name = link_name.strip()
        url = original_url.strip()
        if not name:
            raise ValidationError("Link name is required", field="link_name")
        if not url:
            raise ValidationError("Original URL is required", field="original_url")

        alias = alias.strip() if alias and alias.strip() else None
        password = password.strip() if password and password.strip() else None

        with logfire.span("link_service.create_link", link_name=name, has_alias=bool(alias)):
            slugs = await self.post_repository.list_published_slugs()
            if not slugs:
                logfire.warn("No published posts to host link")
                raise BusinessRuleViolationError("No published posts found")
            post_slug = random.choice(slugs)

            link = ShortenedLink(
                id=LinkId(uuid4()),
                link_name=name,
                original_url=url,
                token=alias,
                alias=alias,
                password=password,
                post_slug=str(post_slug),
                clicks=0,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.link_repository.save(link)
            logfire.info("Link created", link_id=str(saved.id), post_slug=saved.post_slug)
            return saved

    async def update_link(
        self, link_id: LinkId, link_name: str, original_url: str
    ) -> ShortenedLink:
        """Rename or retarget a link.

        Raises:
            ValidationError: If name or URL is blank
            NotFoundError: If the link does not exist
        """
        name = link_name.strip()
        url = original_url.strip()
        if not name:
            raise ValidationError("Link name is required", field="link_name")
        if not url:
            raise ValidationError("Original URL is required", field="original_url")

        with logfire.span("link_service.update_link", link_id=str(link_id)):
            updated = await self.link_repository.update(link_id, name, url)
            if not updated:
                raise NotFoundError("Link", str(link_id))
            logfire.info("Link updated", link_id=str(link_id))
            return updated

    async def delete_link(self, link_id: LinkId) -> None:
        with logfire.span("link_service.delete_link", link_id=str(link_id)):
            await self.get_link(link_id)
            await self.link_repository.delete(link_id)
            logfire.info("Link deleted", link_id=str(link_id))

    @staticmethod
    def short_url(link: ShortenedLink, site_url: str) -> str:
        """Shareable URL of a link's gate."""
        return f"{site_url.rstrip('/')}/posts/{link.post_slug}.html?token={link.public_token}"
