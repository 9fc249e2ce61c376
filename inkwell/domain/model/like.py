"""Comment like entity."""

from datetime import datetime, timezone

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, LikeId, VisitorId


class CommentLike(DomainModel):
    """A visitor's like on a comment.

    At most one record exists per (comment_id, visitor_id) pair. Records
    are created and deleted, never updated.
    """

    id: LikeId
    comment_id: CommentId
    visitor_id: VisitorId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
