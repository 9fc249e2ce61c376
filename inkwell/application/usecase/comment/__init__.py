"""Comment use cases."""

from .get_thread import GetThreadRequest, GetThreadUseCase, StreamThreadUseCase
from .moderate_comments import (
    AdminReplyRequest,
    AdminReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListModerationRequest,
    ListModerationResponse,
    ListModerationUseCase,
    ModerationTotals,
)
from .submit_comment import SubmitCommentRequest, SubmitCommentUseCase
from .thread_factory import CommentThreadFactory
from .toggle_like import ToggleLikeRequest, ToggleLikeUseCase

__all__ = [
    "AdminReplyRequest",
    "AdminReplyUseCase",
    "CommentThreadFactory",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListModerationRequest",
    "ListModerationResponse",
    "ListModerationUseCase",
    "ModerationTotals",
    "StreamThreadUseCase",
    "SubmitCommentRequest",
    "SubmitCommentUseCase",
    "ToggleLikeRequest",
    "ToggleLikeUseCase",
]
