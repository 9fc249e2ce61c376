"""Comment entity.

Comments are anonymous: a reader supplies a display name and email with
each submission. Replies reference their parent through ``parent_id`` and
may nest without limit in storage.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Comment entity.

    Represents a reader comment on a post, a reply to another comment, or
    an operator reply written from the moderation console.

    ``likes_count`` is a denormalized cache of the like records for this
    comment; the like records themselves decide whether a visitor has
    liked it. ``author_email`` is never shown on the reader site.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    author_name: str = Field(min_length=1, max_length=100)
    author_email: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=2000)
    is_admin_reply: bool = False
    likes_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
