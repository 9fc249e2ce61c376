"""Comment card view models.

``public`` cards are what readers see: no email. ``admin`` cards belong to
the moderation console and carry the email and post title.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentCardVariant


class PublicCommentCard(BaseModel):
    """Reader-facing comment in a flattened, pre-ordered thread."""

    variant: Literal[CommentCardVariant.PUBLIC] = CommentCardVariant.PUBLIC
    id: str
    parent_id: str | None
    author_name: str
    content: str
    # First preview_length characters of content; equals content when not truncated
    excerpt: str
    truncated: bool
    is_admin_reply: bool
    likes_count: int
    liked: bool
    created_at: datetime
    depth: int
    can_reply: bool
    reply_count: int
    # Replies exist but are collapsed under this card
    replies_hidden: bool


class AdminCommentCard(BaseModel):
    """Moderation view of a comment with its replies nested."""

    variant: Literal[CommentCardVariant.ADMIN] = CommentCardVariant.ADMIN
    id: str
    post_id: str
    post_title: str | None
    parent_id: str | None
    author_name: str
    author_email: str
    content: str
    is_admin_reply: bool
    likes_count: int
    created_at: datetime
    depth: int
    replies: list["AdminCommentCard"] = []


CommentCard = Annotated[
    Union[PublicCommentCard, AdminCommentCard], Field(discriminator="variant")
]


def public_card(
    comment: Comment,
    *,
    depth: int,
    liked: bool,
    likes_count: int,
    can_reply: bool,
    reply_count: int,
    replies_hidden: bool,
    preview_length: int,
) -> PublicCommentCard:
    truncated = len(comment.content) > preview_length
    return PublicCommentCard(
        id=str(comment.id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        author_name=comment.author_name,
        content=comment.content,
        excerpt=comment.content[:preview_length] if truncated else comment.content,
        truncated=truncated,
        is_admin_reply=comment.is_admin_reply,
        likes_count=likes_count,
        liked=liked,
        created_at=comment.created_at,
        depth=depth,
        can_reply=can_reply,
        reply_count=reply_count,
        replies_hidden=replies_hidden,
    )


def admin_card(
    comment: Comment,
    *,
    depth: int,
    post_title: str | None,
    replies: list[AdminCommentCard] | None = None,
) -> AdminCommentCard:
    return AdminCommentCard(
        id=str(comment.id),
        post_id=str(comment.post_id),
        post_title=post_title,
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        author_name=comment.author_name,
        author_email=comment.author_email,
        content=comment.content,
        is_admin_reply=comment.is_admin_reply,
        likes_count=comment.likes_count,
        created_at=comment.created_at,
        depth=depth,
        replies=replies or [],
    )
