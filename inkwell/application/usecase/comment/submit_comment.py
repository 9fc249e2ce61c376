"""Submit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.controller import CommentDraft, SubmitResult
from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.value import CommentId, PostId, VisitorId

from .thread_factory import CommentThreadFactory


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    post_id: str
    visitor_id: str
    author_name: str = ""
    author_email: str = ""
    content: str = ""
    parent_id: str | None = None  # None for top-level comments


class SubmitCommentUseCase(BaseUseCase):
    """Post a reader comment or reply through the thread controller.

    The result carries the draft to redisplay: unchanged on failure, with
    the body cleared on success.
    """

    def __init__(self, thread_factory: CommentThreadFactory) -> None:
        self.thread_factory = thread_factory

    async def execute(self, request: SubmitCommentRequest) -> SubmitResult:
        controller = self.thread_factory.create(
            PostId(UUID(request.post_id)), VisitorId(UUID(request.visitor_id))
        )
        draft = CommentDraft(
            author_name=request.author_name,
            author_email=request.author_email,
            content=request.content,
        )
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        return await controller.submit(draft, parent_id)
