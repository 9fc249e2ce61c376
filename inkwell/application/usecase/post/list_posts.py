"""List posts use case."""

from typing import Literal

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.view import CompactPostCard, FullPostCard, post_card
from inkwell.domain.service import CategoryService, PostService
from inkwell.domain.service.post_service import POSTS_PER_PAGE
from inkwell.domain.value import PostCardVariant


class ListPostsRequest(BaseModel):
    """List posts request."""

    search: str | None = None
    category: str | None = None  # Category slug
    sort: Literal["latest", "oldest"] = "latest"
    page: int = Field(default=1, ge=1)
    variant: PostCardVariant = PostCardVariant.FULL


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[FullPostCard | CompactPostCard]
    total: int
    page: int
    per_page: int
    total_pages: int


class ListPostsUseCase(BaseUseCase):
    """Use case for the reader's article listing.

    Supports search, a category filter, latest/oldest ordering and
    fixed-size pages.
    """

    def __init__(self, post_service: PostService, category_service: CategoryService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            category_service: Category domain service
        """
        self.post_service = post_service
        self.category_service = category_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts, total = await self.post_service.list_published(
            search=request.search,
            category_slug=request.category,
            ascending=request.sort == "oldest",
            page=request.page,
            per_page=POSTS_PER_PAGE,
        )
        names = await self.category_service.names_by_post([p.id for p in posts])

        return ListPostsResponse(
            posts=[post_card(request.variant, p, names.get(p.id)) for p in posts],
            total=total,
            page=request.page,
            per_page=POSTS_PER_PAGE,
            total_pages=(total + POSTS_PER_PAGE - 1) // POSTS_PER_PAGE,
        )
