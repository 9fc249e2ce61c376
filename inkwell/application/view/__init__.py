"""View models returned to the front end."""

from .comment import (
    AdminCommentCard,
    CommentCard,
    PublicCommentCard,
    admin_card,
    public_card,
)
from .post import CompactPostCard, FullPostCard, PostCard, post_card, post_url

__all__ = [
    "AdminCommentCard",
    "CommentCard",
    "CompactPostCard",
    "FullPostCard",
    "PostCard",
    "PublicCommentCard",
    "admin_card",
    "post_card",
    "post_url",
    "public_card",
]
