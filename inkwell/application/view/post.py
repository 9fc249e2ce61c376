"""Post card view models.

Cards come in two variants selected by ``PostCardVariant``: compact cards
for sidebars and related-post strips, full cards for listings.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostCardVariant


class CompactPostCard(BaseModel):
    variant: Literal[PostCardVariant.COMPACT] = PostCardVariant.COMPACT
    id: str
    title: str
    slug: str
    url: str
    thumbnail_url: str | None
    published_at: datetime | None


class FullPostCard(BaseModel):
    variant: Literal[PostCardVariant.FULL] = PostCardVariant.FULL
    id: str
    title: str
    slug: str
    url: str
    excerpt: str | None
    thumbnail_url: str | None
    published_at: datetime | None
    view_count: int
    categories: list[str]


PostCard = Annotated[Union[CompactPostCard, FullPostCard], Field(discriminator="variant")]


def post_url(post: Post) -> str:
    return f"/posts/{post.slug}.html"


def _compact(post: Post, categories: list[str]) -> CompactPostCard:
    return CompactPostCard(
        id=str(post.id),
        title=post.title,
        slug=str(post.slug),
        url=post_url(post),
        thumbnail_url=post.thumbnail_url,
        published_at=post.published_at,
    )


def _full(post: Post, categories: list[str]) -> FullPostCard:
    return FullPostCard(
        id=str(post.id),
        title=post.title,
        slug=str(post.slug),
        url=post_url(post),
        excerpt=post.excerpt,
        thumbnail_url=post.thumbnail_url,
        published_at=post.published_at,
        view_count=post.view_count,
        categories=categories,
    )


_BUILDERS = {
    PostCardVariant.COMPACT: _compact,
    PostCardVariant.FULL: _full,
}


def post_card(
    variant: PostCardVariant, post: Post, categories: list[str] | None = None
) -> CompactPostCard | FullPostCard:
    """Build the card of the requested variant for a post."""
    return _BUILDERS[variant](post, categories or [])
