"""Get home page use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.category.list_categories import CategoryResponse
from inkwell.application.view import CompactPostCard, FullPostCard, post_card
from inkwell.domain.service import CategoryService, PostService
from inkwell.domain.value import PostCardVariant

HOME_POSTS_LIMIT = 6


class GetHomeRequest(BaseModel):
    """Get home request."""

    variant: PostCardVariant = PostCardVariant.FULL


class GetHomeResponse(BaseModel):
    """Get home response."""

    posts: list[FullPostCard | CompactPostCard]
    categories: list[CategoryResponse]


class GetHomeUseCase(BaseUseCase):
    """Latest published posts and the category list for the home page."""

    def __init__(self, post_service: PostService, category_service: CategoryService) -> None:
        """Initialize get home use case.

        Args:
            post_service: Post domain service
            category_service: Category domain service
        """
        self.post_service = post_service
        self.category_service = category_service

    async def execute(self, request: GetHomeRequest) -> GetHomeResponse:
        posts = await self.post_service.latest(HOME_POSTS_LIMIT)
        names = await self.category_service.names_by_post([p.id for p in posts])
        categories = await self.category_service.list_categories()

        return GetHomeResponse(
            posts=[post_card(request.variant, p, names.get(p.id)) for p in posts],
            categories=[CategoryResponse.from_domain(c) for c in categories],
        )
