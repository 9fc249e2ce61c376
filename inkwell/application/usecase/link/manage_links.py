"""Admin link shortener use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.config import Settings
from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.service import LinkService
from inkwell.domain.value import LinkId


class LinkResponse(BaseModel):
    id: str
    link_name: str
    original_url: str
    alias: str | None
    token: str | None
    password: str | None
    post_slug: str
    clicks: int
    created_at: datetime
    short_url: str

    @classmethod
    def from_domain(cls, link: ShortenedLink, site_url: str) -> "LinkResponse":
        return cls(
            id=str(link.id),
            link_name=link.link_name,
            original_url=link.original_url,
            alias=link.alias,
            token=link.token,
            password=link.password,
            post_slug=link.post_slug,
            clicks=link.clicks,
            created_at=link.created_at,
            short_url=LinkService.short_url(link, site_url),
        )


class ListLinksResponse(BaseModel):
    links: list[LinkResponse]
    total_clicks: int


class _LinkUseCase(BaseUseCase):
    def __init__(self, link_service: LinkService, settings: Settings) -> None:
        self.link_service = link_service
        self.settings = settings

    def _response(self, link: ShortenedLink) -> LinkResponse:
        return LinkResponse.from_domain(link, self.settings.site_url)


class ListLinksUseCase(_LinkUseCase):
    """All links, newest first, with their shareable URLs."""

    async def execute(self, request: None = None) -> ListLinksResponse:
        links = await self.link_service.list_links()
        return ListLinksResponse(
            links=[self._response(link) for link in links],
            total_clicks=sum(link.clicks for link in links),
        )


class CreateLinkRequest(BaseModel):
    link_name: str
    original_url: str
    alias: str | None = None
    password: str | None = None


class CreateLinkUseCase(_LinkUseCase):
    async def execute(self, request: CreateLinkRequest) -> LinkResponse:
        """Execute create link flow.

        Raises:
            ValidationError: If name or URL is blank
            BusinessRuleViolationError: If no published post can host the link
            BackendError: If the alias is already taken
        """
        link = await self.link_service.create_link(
            link_name=request.link_name,
            original_url=request.original_url,
            alias=request.alias,
            password=request.password,
        )
        return self._response(link)


class UpdateLinkRequest(BaseModel):
    link_id: str
    link_name: str
    original_url: str


class UpdateLinkUseCase(_LinkUseCase):
    async def execute(self, request: UpdateLinkRequest) -> LinkResponse:
        link = await self.link_service.update_link(
            LinkId(UUID(request.link_id)), request.link_name, request.original_url
        )
        return self._response(link)


class DeleteLinkRequest(BaseModel):
    link_id: str


class DeleteLinkUseCase(_LinkUseCase):
    async def execute(self, request: DeleteLinkRequest) -> None:
        await self.link_service.delete_link(LinkId(UUID(request.link_id)))
