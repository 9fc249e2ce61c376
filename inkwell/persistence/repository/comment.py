"""Comment repository backed by the hosted record store."""

from typing import Optional

from inkwell.adapter.backend.client import RecordStoreClient
from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, PostId
from inkwell.persistence.mappers import to_row

TABLE = "comments"


class RemoteCommentRepository(CommentRepository):
    """Comment repository over the ``comments`` collection.

    Deleting a comment relies on the backend's foreign key cascade to
    remove its replies.
    """

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        row = await self.client.table(TABLE).select().eq("id", str(comment_id)).maybe_single()
        return Comment.from_record(row) if row else None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        rows = await (
            self.client.table(TABLE)
            .select()
            .eq("post_id", str(post_id))
            .order("created_at", ascending=True)
            .fetch()
        )
        return [Comment.from_record(row) for row in rows]

    async def find_all(self) -> list[Comment]:
        rows = await self.client.table(TABLE).select().order("created_at", ascending=True).fetch()
        return [Comment.from_record(row) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        rows = await self.client.table(TABLE).insert(to_row(comment))
        return Comment.from_record(rows[0]) if rows else comment

    async def update_likes_count(self, comment_id: CommentId, likes_count: int) -> None:
        await self.client.table(TABLE).eq("id", str(comment_id)).update(
            {"likes_count": likes_count}
        )

    async def delete(self, comment_id: CommentId) -> None:
        await self.client.table(TABLE).eq("id", str(comment_id)).delete()
