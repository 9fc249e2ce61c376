"""Stateful controllers driving interactive views."""

from .comment_thread import (
    CommentDraft,
    CommentThreadController,
    LikeResult,
    SubmitResult,
    ThreadView,
)

__all__ = [
    "CommentDraft",
    "CommentThreadController",
    "LikeResult",
    "SubmitResult",
    "ThreadView",
]
