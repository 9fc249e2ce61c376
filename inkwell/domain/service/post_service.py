"""Post domain service."""

import random
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model.post import Post
from inkwell.domain.repository import CategoryRepository, PostRepository
from inkwell.domain.value import CategoryId, PostId, PostStatus, Slug, UserId, slugify

from .base import Service

POSTS_PER_PAGE = 9
RELATED_POSTS_LIMIT = 3


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, category_repository: CategoryRepository
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            category_repository: Category repository, for category filters
        """
        self.post_repository = post_repository
        self.category_repository = category_repository

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_published_by_slug(self, raw_slug: str) -> Post:
        """Get a published post by the slug segment of a reader URL.

        A trailing ``.html`` is stripped before lookup, so
        ``hello-world.html`` and ``hello-world`` resolve the same post.

        Args:
            raw_slug: Path segment as requested

        Returns:
            The published post

        Raises:
            NotFoundError: If no published post has that slug
        """
        with logfire.span("post_service.get_published_by_slug", slug=raw_slug):
            try:
                slug = Slug.from_path(raw_slug)
            except PydanticValidationError:
                raise NotFoundError("Post", raw_slug)

            post = await self.post_repository.find_by_slug(slug)
            if not post or not post.is_published:
                logfire.info("Published post not found", slug=str(slug))
                raise NotFoundError("Post", str(slug))
            return post

    async def record_view(self, post: Post) -> None:
        """Increment a post's view counter. Failures are logged and dropped."""
        try:
            await self.post_repository.update_view_count(post.id, post.view_count + 1)
        except Exception as e:
            logfire.warn("View count increment failed", post_id=str(post.id), error=str(e))

    async def list_published(
        self,
        search: str | None = None,
        category_slug: str | None = None,
        ascending: bool = False,
        page: int = 1,
        per_page: int = POSTS_PER_PAGE,
    ) -> tuple[list[Post], int]:
        """List published posts for the reader listing.

        The category filter is applied before pagination, so pages and
        totals count only posts in that category.

        Args:
            search: Case-insensitive match on title or excerpt
            category_slug: Only posts in this category
            ascending: Oldest first when True
            page: 1-based page number
            per_page: Page size

        Returns:
            Tuple of (posts on the page, total matching posts)
        """
        page = max(page, 1)
        search = search.strip() if search and search.strip() else None

        with logfire.span(
            "post_service.list_published",
            search=search,
            category=category_slug,
            page=page,
        ):
            post_ids: list[PostId] | None = None
            if category_slug:
                try:
                    category = await self.category_repository.find_by_slug(
                        Slug(category_slug)
                    )
                except PydanticValidationError:
                    category = None
                if not category:
                    logfire.info("Unknown category filter", category=category_slug)
                    return [], 0
                assignments = await self.category_repository.list_assignments(
                    category_ids=[category.id]
                )
                post_ids = [a.post_id for a in assignments]

            posts, total = await self.post_repository.list_published(
                search=search,
                post_ids=post_ids,
                ascending=ascending,
                limit=per_page,
                offset=(page - 1) * per_page,
            )
            logfire.info("Published posts listed", count=len(posts), total=total)
            return posts, total

    async def latest(self, limit: int) -> list[Post]:
        posts, _ = await self.post_repository.list_published(limit=limit, offset=0)
        return posts

    async def related(self, post: Post, limit: int = RELATED_POSTS_LIMIT) -> list[Post]:
        """Posts to suggest under an article.

        A random sample of published posts sharing a category with ``post``;
        the latest published posts when it has no categories. ``post`` is
        never included.
        """
        with logfire.span("post_service.related", post_id=str(post.id)):
            own = await self.category_repository.list_assignments(post_ids=[post.id])
            if not own:
                latest, _ = await self.post_repository.list_published(
                    limit=limit + 1, offset=0
                )
                return [p for p in latest if p.id != post.id][:limit]

            shared = await self.category_repository.list_assignments(
                category_ids=[a.category_id for a in own]
            )
            candidate_ids = list(
                dict.fromkeys(a.post_id for a in shared if a.post_id != post.id)
            )
            if not candidate_ids:
                return []

            candidates, _ = await self.post_repository.list_published(
                post_ids=candidate_ids, limit=len(candidate_ids), offset=0
            )
            return random.sample(candidates, min(limit, len(candidates)))

    async def list_all(self) -> list[Post]:
        """Every post, drafts included, newest first."""
        with logfire.span("post_service.list_all"):
            return await self.post_repository.list_all()

    async def save_post(
        self,
        title: str,
        content: str,
        status: PostStatus,
        slug: str | None = None,
        excerpt: str | None = None,
        thumbnail_url: str | None = None,
        category_ids: list[CategoryId] | None = None,
        author_id: UserId | None = None,
        post_id: PostId | None = None,
    ) -> Post:
        """Create or update a post from the editor.

        Args:
            title: Post title, required
            content: Rich-text body
            status: Draft or published
            slug: URL slug; derived from the title when blank
            excerpt: Summary; blank becomes None
            thumbnail_url: Image URL; blank becomes None
            category_ids: Replaces the post's category assignments when given
            author_id: Editing admin
            post_id: Existing post to update, None to create

        Returns:
            The saved post

        Raises:
            ValidationError: If title or slug is missing or malformed
            NotFoundError: If ``post_id`` names no post
        """
        title = title.strip()
        if not title:
            raise ValidationError("Title is required", field="title")

        slug_text = (slug or "").strip() or slugify(title)
        if not slug_text:
            raise ValidationError("Slug is required", field="slug")
        try:
            post_slug = Slug.from_path(slug_text)
        except PydanticValidationError:
            raise ValidationError("Slug is not valid", field="slug")

        with logfire.span(
            "post_service.save_post",
            post_id=str(post_id) if post_id else None,
            status=status.value,
        ):
            existing = await self.get_post_by_id(post_id) if post_id else None

            published_at = existing.published_at if existing else None
            if status == PostStatus.PUBLISHED and published_at is None:
                published_at = datetime.now(timezone.utc)

            post = Post(
                id=existing.id if existing else PostId(uuid4()),
                title=title,
                slug=post_slug,
                excerpt=(excerpt or "").strip() or None,
                content=content,
                thumbnail_url=(thumbnail_url or "").strip() or None,
                status=status,
                author_id=existing.author_id if existing and existing.author_id else author_id,
                view_count=existing.view_count if existing else 0,
                published_at=published_at,
                created_at=existing.created_at if existing else datetime.now(timezone.utc),
            )
            saved = await self.post_repository.save(post)

            if category_ids is not None:
                await self.category_repository.set_post_categories(
                    saved.id, list(dict.fromkeys(category_ids))
                )

            logfire.info(
                "Post saved",
                post_id=str(saved.id),
                status=saved.status.value,
                created=existing is None,
            )
            return saved

    async def delete_post(self, post_id: PostId) -> None:
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.get_post_by_id(post_id)
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
