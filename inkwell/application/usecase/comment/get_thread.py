"""Get comment thread use cases."""

from collections.abc import AsyncIterator
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.controller import ThreadView
from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.value import CommentId, PostId, VisitorId

from .thread_factory import CommentThreadFactory


class GetThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: str
    visitor_id: str
    show_all: bool = False
    expanded: list[str] = []  # Comment IDs whose deep replies are shown


class GetThreadUseCase(BaseUseCase):
    """Render one post's comment thread for a visitor."""

    def __init__(self, thread_factory: CommentThreadFactory) -> None:
        self.thread_factory = thread_factory

    async def execute(self, request: GetThreadRequest) -> ThreadView:
        controller = self.thread_factory.create(
            PostId(UUID(request.post_id)), VisitorId(UUID(request.visitor_id))
        )
        await controller.refresh()

        if request.show_all:
            controller.show_all_roots()
        for comment_id in request.expanded:
            controller.expand(CommentId(UUID(comment_id)))
        return controller.view()


class StreamThreadUseCase(BaseUseCase):
    """Live thread for a visitor: the initial view, then one per change."""

    def __init__(self, thread_factory: CommentThreadFactory) -> None:
        self.thread_factory = thread_factory

    async def execute(self, request: GetThreadRequest) -> AsyncIterator[ThreadView]:
        controller = self.thread_factory.create(
            PostId(UUID(request.post_id)), VisitorId(UUID(request.visitor_id))
        )
        if request.show_all:
            controller.show_all_roots()
        for comment_id in request.expanded:
            controller.expand(CommentId(UUID(comment_id)))

        async def stream() -> AsyncIterator[ThreadView]:
            updates = controller.updates()
            try:
                # mount() refreshes, which queues the initial view
                await controller.mount()
                async for view in updates:
                    yield view
            finally:
                controller.unmount()
                await updates.aclose()
                logfire.info("Comment stream closed", post_id=request.post_id)

        return stream()
