"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostId, Slug


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug, whatever its status.

        Args:
            slug: Normalized slug (no ``.html`` suffix)

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_published(
        self,
        search: str | None = None,
        post_ids: list[PostId] | None = None,
        ascending: bool = False,
        limit: int = 9,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List published posts ordered by ``published_at``.

        Args:
            search: Case-insensitive substring matched against title or excerpt
            post_ids: Restrict to these posts (an empty list matches nothing)
            ascending: Oldest first when True, newest first otherwise
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Tuple of (page of posts, total matching count)
        """
        pass

    @abstractmethod
    async def list_published_slugs(self) -> list[Slug]:
        """Slugs of every published post."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Post]:
        """List every post, drafts included, newest ``created_at`` first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post. Category assignments and comments go with it."""
        pass

    @abstractmethod
    async def update_view_count(self, post_id: PostId, view_count: int) -> None:
        """Overwrite the view counter.

        Args:
            post_id: The post ID
            view_count: New counter value
        """
        pass
