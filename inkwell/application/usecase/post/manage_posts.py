"""Admin post management use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.view import AdminCommentCard, admin_card
from inkwell.domain.model.post import Post
from inkwell.domain.service import (
    CategoryService,
    CommentService,
    PostService,
    build_comment_forest,
)
from inkwell.domain.value import CategoryId, PostId, PostStatus, UserId


class AdminPostResponse(BaseModel):
    """Post as shown in the admin console."""

    id: str
    title: str
    slug: str
    excerpt: str | None
    content: str
    thumbnail_url: str | None
    status: PostStatus
    view_count: int
    published_at: datetime | None
    created_at: datetime
    categories: list[str] = []
    category_ids: list[str] = []

    @classmethod
    def from_domain(
        cls,
        post: Post,
        categories: list[str] | None = None,
        category_ids: list[CategoryId] | None = None,
    ) -> "AdminPostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            slug=str(post.slug),
            excerpt=post.excerpt,
            content=post.content,
            thumbnail_url=post.thumbnail_url,
            status=post.status,
            view_count=post.view_count,
            published_at=post.published_at,
            created_at=post.created_at,
            categories=categories or [],
            category_ids=[str(c) for c in category_ids or []],
        )


class ListAdminPostsResponse(BaseModel):
    posts: list[AdminPostResponse]
    total: int


class ListAdminPostsUseCase(BaseUseCase):
    """All posts, drafts included, newest first."""

    def __init__(self, post_service: PostService, category_service: CategoryService) -> None:
        self.post_service = post_service
        self.category_service = category_service

    async def execute(self, request: None = None) -> ListAdminPostsResponse:
        posts = await self.post_service.list_all()
        names = await self.category_service.names_by_post([p.id for p in posts])
        return ListAdminPostsResponse(
            posts=[AdminPostResponse.from_domain(p, names.get(p.id)) for p in posts],
            total=len(posts),
        )


class GetAdminPostRequest(BaseModel):
    post_id: str


class GetAdminPostResponse(BaseModel):
    post: AdminPostResponse
    comments: list[AdminCommentCard]
    comment_count: int


class GetAdminPostUseCase(BaseUseCase):
    """A post with its categories and its comment thread, newest roots first."""

    def __init__(
        self,
        post_service: PostService,
        category_service: CategoryService,
        comment_service: CommentService,
    ) -> None:
        self.post_service = post_service
        self.category_service = category_service
        self.comment_service = comment_service

    async def execute(self, request: GetAdminPostRequest) -> GetAdminPostResponse:
        """Execute get admin post flow.

        Raises:
            NotFoundError: If the post does not exist
            ValueError: If the post ID is not a UUID
        """
        post = await self.post_service.get_post_by_id(PostId(UUID(request.post_id)))
        names = await self.category_service.names_by_post([post.id])
        category_ids = await self.category_service.category_ids_for_post(post.id)
        comments = await self.comment_service.get_comments_for_post(post.id)

        def to_card(node, depth: int) -> AdminCommentCard:
            return admin_card(
                node.comment,
                depth=depth,
                post_title=post.title,
                replies=[to_card(child, depth + 1) for child in node.children],
            )

        roots = list(reversed(build_comment_forest(comments)))
        return GetAdminPostResponse(
            post=AdminPostResponse.from_domain(post, names.get(post.id), category_ids),
            comments=[to_card(root, 0) for root in roots],
            comment_count=len(comments),
        )


class SavePostRequest(BaseModel):
    """Create or update post request."""

    post_id: str | None = None  # None creates a new post
    title: str
    slug: str | None = None
    excerpt: str | None = None
    content: str = ""
    thumbnail_url: str | None = None
    status: PostStatus = PostStatus.DRAFT
    category_ids: list[str] = []
    author_id: str | None = None  # From the admin session


class SavePostUseCase(BaseUseCase):
    """Create or update a post and replace its category assignments."""

    def __init__(self, post_service: PostService, category_service: CategoryService) -> None:
        self.post_service = post_service
        self.category_service = category_service

    async def execute(self, request: SavePostRequest) -> AdminPostResponse:
        """Execute save post flow.

        Raises:
            ValidationError: If title or slug is missing
            NotFoundError: If updating a post that does not exist
        """
        category_ids = [CategoryId(UUID(cid)) for cid in request.category_ids]
        post = await self.post_service.save_post(
            title=request.title,
            content=request.content,
            status=request.status,
            slug=request.slug,
            excerpt=request.excerpt,
            thumbnail_url=request.thumbnail_url,
            category_ids=category_ids,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
            post_id=PostId(UUID(request.post_id)) if request.post_id else None,
        )
        names = await self.category_service.names_by_post([post.id])
        return AdminPostResponse.from_domain(post, names.get(post.id), category_ids)


class DeletePostRequest(BaseModel):
    post_id: str


class DeletePostUseCase(BaseUseCase):
    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        await self.post_service.delete_post(PostId(UUID(request.post_id)))
