"""In-memory comment like repository for testing."""

from inkwell.adapter.error import BackendError
from inkwell.domain.model.like import CommentLike
from inkwell.domain.repository.like import LikeRepository
from inkwell.domain.value import CommentId, VisitorId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Enforces the (comment, visitor) uniqueness the backend enforces.
    """

    def __init__(self) -> None:
        self._likes: dict[tuple[CommentId, VisitorId], CommentLike] = {}

    async def find_by_visitor(
        self, visitor_id: VisitorId, comment_ids: list[CommentId]
    ) -> list[CommentLike]:
        return [
            self._likes[(cid, visitor_id)]
            for cid in comment_ids
            if (cid, visitor_id) in self._likes
        ]

    async def save(self, like: CommentLike) -> CommentLike:
        key = (like.comment_id, like.visitor_id)
        if key in self._likes:
            raise BackendError("duplicate key value violates unique constraint", 409)
        self._likes[key] = like
        return like

    async def delete(self, comment_id: CommentId, visitor_id: VisitorId) -> bool:
        return self._likes.pop((comment_id, visitor_id), None) is not None

    def count_for(self, comment_id: CommentId) -> int:
        return sum(1 for cid, _ in self._likes if cid == comment_id)
