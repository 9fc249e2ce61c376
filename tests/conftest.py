"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from inkwell.domain.model.comment import Comment
from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.model.post import Post
from inkwell.domain.value import (
    CommentId,
    LinkId,
    PostId,
    PostStatus,
    Slug,
)

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_post(
    title: str = "Hello World",
    slug: str | None = None,
    status: PostStatus = PostStatus.PUBLISHED,
    days: int = 0,
    view_count: int = 0,
    excerpt: str | None = None,
) -> Post:
    """Helper to build a post ``days`` after the base time."""
    at = BASE_TIME + timedelta(days=days)
    return Post(
        id=PostId(uuid4()),
        title=title,
        slug=Slug(slug or title.lower().replace(" ", "-")),
        excerpt=excerpt,
        content="<p>Body</p>",
        status=status,
        view_count=view_count,
        published_at=at if status == PostStatus.PUBLISHED else None,
        created_at=at,
    )


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    minutes: int = 0,
    author_name: str = "Ada",
    content: str = "Nice post",
    likes_count: int = 0,
    is_admin_reply: bool = False,
) -> Comment:
    """Helper to build a comment ``minutes`` after the base time."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent_id=parent.id if parent else None,
        author_name=author_name,
        author_email="ada@example.com",
        content=content,
        is_admin_reply=is_admin_reply,
        likes_count=likes_count,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_link(
    alias: str | None = "promo",
    token: str | None = "tok123",
    password: str | None = None,
    post_slug: str = "hello-world",
) -> ShortenedLink:
    return ShortenedLink(
        id=LinkId(uuid4()),
        link_name="Promo",
        original_url="https://example.com/target",
        token=token,
        alias=alias,
        password=password,
        post_slug=post_slug,
        clicks=0,
        created_at=BASE_TIME,
    )
