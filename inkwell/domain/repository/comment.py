"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Listings are ordered by ``created_at`` ascending. Ties keep the order
    the backend returned them in.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments ordered by ``created_at`` ascending
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Comment]:
        """Find every comment on every post, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_likes_count(self, comment_id: CommentId, likes_count: int) -> None:
        """Overwrite the denormalized like counter.

        Args:
            comment_id: The comment ID
            likes_count: New counter value
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment together with its whole reply subtree.

        Args:
            comment_id: The comment ID to delete
        """
        pass
