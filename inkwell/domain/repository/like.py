"""Comment like repository interface."""

from abc import ABC, abstractmethod

from inkwell.domain.model.like import CommentLike
from inkwell.domain.value import CommentId, VisitorId


class LikeRepository(ABC):
    """Repository for CommentLike join records."""

    @abstractmethod
    async def find_by_visitor(
        self, visitor_id: VisitorId, comment_ids: list[CommentId]
    ) -> list[CommentLike]:
        """Batch-fetch a visitor's likes among the given comments.

        Args:
            visitor_id: The visitor's browser identity
            comment_ids: Comments to check

        Returns:
            Likes the visitor holds on any of those comments
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Insert a like record.

        Raises:
            BackendError: If the (comment, visitor) pair already exists
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId, visitor_id: VisitorId) -> bool:
        """Delete a visitor's like on a comment.

        Returns:
            True if a record was removed
        """
        pass
