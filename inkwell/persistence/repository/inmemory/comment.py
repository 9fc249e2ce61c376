"""In-memory comment repository for testing."""

from typing import Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Deletes cascade to replies the way the backend's foreign key does.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        # Stable sort keeps insertion order for identical timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_all(self) -> list[Comment]:
        return sorted(self._comments.values(), key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def update_likes_count(self, comment_id: CommentId, likes_count: int) -> None:
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"likes_count": likes_count}
            )

    async def delete(self, comment_id: CommentId) -> None:
        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent = frontier.pop()
            for c in self._comments.values():
                if c.parent_id == parent and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)
        for cid in doomed:
            self._comments.pop(cid, None)
