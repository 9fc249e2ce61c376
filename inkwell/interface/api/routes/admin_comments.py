"""Admin comment moderation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from inkwell.application.usecase.comment import (
    AdminReplyRequest,
    AdminReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListModerationRequest,
    ListModerationResponse,
    ListModerationUseCase,
)
from inkwell.application.view import AdminCommentCard
from inkwell.domain.value import CommentFilterType
from inkwell.interface.api.dependencies import require_admin

router = APIRouter(
    prefix="/admin/comments",
    tags=["admin"],
    route_class=DishkaRoute,
    dependencies=[Depends(require_admin)],
)


class ReplyAPIRequest(BaseModel):
    content: str


@router.get("", response_model=ListModerationResponse)
async def list_comments(
    list_moderation_use_case: FromDishka[ListModerationUseCase],
    q: str | None = None,
    post_id: str | None = None,
    type: CommentFilterType = CommentFilterType.ALL,
) -> ListModerationResponse:
    """All comments on the site.

    Args:
        list_moderation_use_case: Moderation use case from DI
        q: Search over author name, email, content and post title
        post_id: Only comments on this post
        type: ``all``, ``comments`` (top level), ``replies`` or ``admin``

    Returns:
        A threaded forest without filters, a flat list with any filter
    """
    return await list_moderation_use_case.execute(
        ListModerationRequest(search=q, post_id=post_id, filter_type=type)
    )


@router.post(
    "/{comment_id}/reply",
    response_model=AdminCommentCard,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: str,
    request: ReplyAPIRequest,
    admin_reply_use_case: FromDishka[AdminReplyUseCase],
) -> AdminCommentCard:
    """Reply as "Admin"."""
    return await admin_reply_use_case.execute(
        AdminReplyRequest(parent_id=comment_id, content=request.content)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete a comment together with all replies under it."""
    await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=comment_id))
