"""Comment like repository backed by the hosted record store."""

from inkwell.adapter.backend.client import RecordStoreClient
from inkwell.domain.model.like import CommentLike
from inkwell.domain.repository.like import LikeRepository
from inkwell.domain.value import CommentId, VisitorId
from inkwell.persistence.mappers import to_row

TABLE = "comment_likes"


class RemoteLikeRepository(LikeRepository):
    """Like repository over the ``comment_likes`` collection."""

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def find_by_visitor(
        self, visitor_id: VisitorId, comment_ids: list[CommentId]
    ) -> list[CommentLike]:
        if not comment_ids:
            return []
        rows = await (
            self.client.table(TABLE)
            .select()
            .eq("visitor_id", str(visitor_id))
            .in_("comment_id", [str(cid) for cid in comment_ids])
            .fetch()
        )
        return [CommentLike.from_record(row) for row in rows]

    async def save(self, like: CommentLike) -> CommentLike:
        rows = await self.client.table(TABLE).insert(to_row(like))
        return CommentLike.from_record(rows[0]) if rows else like

    async def delete(self, comment_id: CommentId, visitor_id: VisitorId) -> bool:
        rows = await (
            self.client.table(TABLE)
            .eq("comment_id", str(comment_id))
            .eq("visitor_id", str(visitor_id))
            .delete()
        )
        return bool(rows)
