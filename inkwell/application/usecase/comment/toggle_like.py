"""Toggle comment like use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.controller import LikeResult
from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotFoundError
from inkwell.domain.value import CommentId, PostId, VisitorId

from .thread_factory import CommentThreadFactory


class ToggleLikeRequest(BaseModel):
    post_id: str
    comment_id: str
    visitor_id: str


class ToggleLikeUseCase(BaseUseCase):
    """Like or unlike a comment for the visitor."""

    def __init__(self, thread_factory: CommentThreadFactory) -> None:
        self.thread_factory = thread_factory

    async def execute(self, request: ToggleLikeRequest) -> LikeResult:
        """Execute toggle like flow.

        Steps:
        1. Load the thread to learn the visitor's current like state
        2. Flip it, reverting if the like record write fails

        Raises:
            NotFoundError: If the comment is not on that post
        """
        controller = self.thread_factory.create(
            PostId(UUID(request.post_id)), VisitorId(UUID(request.visitor_id))
        )
        await controller.refresh()

        comment_id = CommentId(UUID(request.comment_id))
        if comment_id not in controller.likes_counts:
            raise NotFoundError("Comment", request.comment_id)
        return await controller.toggle_like(comment_id)
