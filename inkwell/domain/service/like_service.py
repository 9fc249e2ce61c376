"""Comment like domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from inkwell.domain.model.like import CommentLike
from inkwell.domain.repository import CommentRepository, LikeRepository
from inkwell.domain.value import CommentId, LikeId, VisitorId

from .base import Service


class LikeService(Service):
    """Domain service for anonymous comment likes.

    A like is two writes that are not atomic: the join record, then the
    comment's denormalized ``likes_count``. The join record is the truth;
    counter drift is corrected only by whoever writes the counter next.
    """

    def __init__(
        self, like_repository: LikeRepository, comment_repository: CommentRepository
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            comment_repository: Comment repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def get_liked_comment_ids(
        self, visitor_id: VisitorId, comment_ids: list[CommentId]
    ) -> set[CommentId]:
        """Which of the given comments the visitor has liked.

        Args:
            visitor_id: Visitor identity
            comment_ids: Comments to check

        Returns:
            Set of liked comment IDs
        """
        if not comment_ids:
            return set()

        # One batched query for the whole thread
        likes = await self.like_repository.find_by_visitor(visitor_id, comment_ids)
        return {like.comment_id for like in likes}

    async def like(self, comment_id: CommentId, visitor_id: VisitorId) -> CommentLike:
        """Insert the join record for a like.

        Raises:
            BackendError: If the backend rejects the insert
        """
        with logfire.span(
            "like_service.like", comment_id=str(comment_id), visitor_id=str(visitor_id)
        ):
            like = CommentLike(
                id=LikeId(uuid4()),
                comment_id=comment_id,
                visitor_id=visitor_id,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.like_repository.save(like)
            logfire.info("Comment liked", comment_id=str(comment_id))
            return saved

    async def unlike(self, comment_id: CommentId, visitor_id: VisitorId) -> bool:
        """Delete the join record for a like.

        Returns:
            True if a like was removed

        Raises:
            BackendError: If the backend rejects the delete
        """
        with logfire.span(
            "like_service.unlike", comment_id=str(comment_id), visitor_id=str(visitor_id)
        ):
            deleted = await self.like_repository.delete(comment_id, visitor_id)
            if deleted:
                logfire.info("Comment unliked", comment_id=str(comment_id))
            else:
                logfire.info("No like to remove", comment_id=str(comment_id))
            return deleted

    async def sync_likes_count(self, comment_id: CommentId, likes_count: int) -> bool:
        """Write the displayed like count back to the comment.

        Best effort: a failure is logged and reported as False, never
        raised.

        Returns:
            True if the counter was written
        """
        try:
            await self.comment_repository.update_likes_count(
                comment_id, max(0, likes_count)
            )
            return True
        except Exception as e:
            logfire.warn(
                "Like counter sync failed",
                comment_id=str(comment_id),
                likes_count=likes_count,
                error=str(e),
            )
            return False
