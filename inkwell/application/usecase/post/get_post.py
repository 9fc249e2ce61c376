"""Get post use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.view import CompactPostCard, post_card
from inkwell.domain.service import CategoryService, PostService
from inkwell.domain.value import PostCardVariant


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str  # As requested, may end in .html


class GetPostResponse(BaseModel):
    """Get post response."""

    id: str
    title: str
    slug: str
    excerpt: str | None
    content: str
    thumbnail_url: str | None
    published_at: datetime | None
    view_count: int
    categories: list[str]
    related: list[CompactPostCard]


class GetPostUseCase(BaseUseCase):
    """Use case for the article page."""

    def __init__(self, post_service: PostService, category_service: CategoryService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            category_service: Category domain service
        """
        self.post_service = post_service
        self.category_service = category_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Steps:
        1. Resolve the published post by slug (``.html`` stripped)
        2. Count the view, best effort
        3. Attach category names and related posts

        Raises:
            NotFoundError: If no published post has that slug
        """
        post = await self.post_service.get_published_by_slug(request.slug)
        await self.post_service.record_view(post)

        related = await self.post_service.related(post)
        names = await self.category_service.names_by_post([post.id])

        return GetPostResponse(
            id=str(post.id),
            title=post.title,
            slug=str(post.slug),
            excerpt=post.excerpt,
            content=post.content,
            thumbnail_url=post.thumbnail_url,
            published_at=post.published_at,
            view_count=post.view_count + 1,
            categories=names.get(post.id, []),
            related=[post_card(PostCardVariant.COMPACT, p) for p in related],
        )
