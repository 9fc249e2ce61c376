"""Post entity.

Posts are the articles of the blog. Only published posts are visible on
the reader site; drafts exist only in the admin console.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import PostId, PostStatus, Slug, UserId


class Post(DomainModel):
    """Post entity.

    ``published_at`` is stamped the first time a post is published and
    is the sort key for reader listings. ``view_count`` is a best-effort
    counter incremented on every detail view.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    excerpt: Optional[str] = None
    content: str = ""
    thumbnail_url: Optional[str] = None
    status: PostStatus = PostStatus.DRAFT
    author_id: Optional[UserId] = None
    view_count: int = Field(default=0, ge=0)
    published_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED
