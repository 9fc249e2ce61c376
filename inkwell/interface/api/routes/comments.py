"""Reader comment routes.

Visitors are anonymous. A visitor cookie identifies whose likes are whose,
and the last name and email used are remembered in cookies to prefill the
compose form.
"""

from collections.abc import AsyncIterator

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from inkwell.application.controller import CommentDraft, LikeResult, SubmitResult, ThreadView
from inkwell.application.usecase.comment import (
    GetThreadRequest,
    GetThreadUseCase,
    StreamThreadUseCase,
    SubmitCommentRequest,
    SubmitCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from inkwell.interface.api.dependencies import (
    COMMENT_EMAIL_COOKIE,
    COMMENT_NAME_COOKIE,
    ONE_YEAR,
    visitor_id,
)

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CommentThreadResponse(ThreadView):
    """Thread view plus the visitor's remembered name and email."""

    draft: CommentDraft


class SubmitCommentAPIRequest(BaseModel):
    author_name: str = ""
    author_email: str = ""
    content: str = ""
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=CommentThreadResponse)
async def get_comments(
    post_id: str,
    request: Request,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    visitor: str = Depends(visitor_id),
    show_all: bool = False,
    expanded: list[str] = Query(default=[]),
) -> CommentThreadResponse:
    """Get a post's comment thread.

    Args:
        post_id: Post UUID
        request: Incoming request, for the remembered name and email
        get_thread_use_case: Get thread use case from DI
        visitor: Visitor ID from cookie
        show_all: Show every top-level comment, not just the latest ones
        expanded: Comment IDs whose deep replies should be shown

    Returns:
        Visible comments in reading order with window counts
    """
    view = await get_thread_use_case.execute(
        GetThreadRequest(
            post_id=post_id, visitor_id=visitor, show_all=show_all, expanded=expanded
        )
    )
    return CommentThreadResponse(
        **view.model_dump(),
        draft=CommentDraft(
            author_name=request.cookies.get(COMMENT_NAME_COOKIE, ""),
            author_email=request.cookies.get(COMMENT_EMAIL_COOKIE, ""),
        ),
    )


@router.post("/{post_id}/comments", response_model=SubmitResult)
async def submit_comment(
    post_id: str,
    body: SubmitCommentAPIRequest,
    response: Response,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
    visitor: str = Depends(visitor_id),
) -> SubmitResult:
    """Post a comment or reply.

    Invalid input gets a 400 with the offending field and the draft back,
    before anything is sent to the backend. On success the name and email
    are remembered for next time.
    """
    result = await submit_comment_use_case.execute(
        SubmitCommentRequest(
            post_id=post_id,
            visitor_id=visitor,
            author_name=body.author_name,
            author_email=body.author_email,
            content=body.content,
            parent_id=body.parent_id,
        )
    )

    if not result.ok:
        response.status_code = (
            status.HTTP_400_BAD_REQUEST if result.field else status.HTTP_502_BAD_GATEWAY
        )
        return result

    response.status_code = status.HTTP_201_CREATED
    response.set_cookie(
        COMMENT_NAME_COOKIE, result.draft.author_name.strip(), max_age=ONE_YEAR, samesite="lax"
    )
    response.set_cookie(
        COMMENT_EMAIL_COOKIE,
        result.draft.author_email.strip(),
        max_age=ONE_YEAR,
        samesite="lax",
    )
    return result


@router.post("/{post_id}/comments/{comment_id}/like", response_model=LikeResult)
async def toggle_like(
    post_id: str,
    comment_id: str,
    response: Response,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    visitor: str = Depends(visitor_id),
) -> LikeResult:
    """Like a comment, or unlike it if the visitor already did.

    A failed like comes back with ``ok`` false and the previous state.
    """
    result = await toggle_like_use_case.execute(
        ToggleLikeRequest(post_id=post_id, comment_id=comment_id, visitor_id=visitor)
    )
    if not result.ok:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    return result


@router.get("/{post_id}/comments/stream")
async def stream_comments(
    post_id: str,
    request: Request,
    stream_thread_use_case: FromDishka[StreamThreadUseCase],
    visitor: str = Depends(visitor_id),
    show_all: bool = False,
    expanded: list[str] = Query(default=[]),
) -> StreamingResponse:
    """Server-sent events: the thread view now and after every change.

    The stream ends, and its change subscriptions close, when the client
    disconnects.
    """
    views = await stream_thread_use_case.execute(
        GetThreadRequest(
            post_id=post_id, visitor_id=visitor, show_all=show_all, expanded=expanded
        )
    )

    async def events() -> AsyncIterator[str]:
        try:
            async for view in views:
                if await request.is_disconnected():
                    break
                yield f"event: thread\ndata: {view.model_dump_json()}\n\n"
        finally:
            await views.aclose()
            logfire.debug("Comment event stream finished", post_id=post_id)

    return StreamingResponse(
        events(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
