"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import (
    CategoryId,
    CommentId,
    LikeId,
    LinkId,
    PostId,
    UserId,
    VisitorId,
)
from inkwell.domain.value.types import (
    ChangeType,
    CommentCardVariant,
    CommentFilterType,
    Email,
    GatePhase,
    PostCardVariant,
    PostStatus,
    Role,
    Slug,
    UploadKind,
    is_valid_email,
    slugify,
)

__all__ = [
    # Identifiers
    "PostId",
    "CategoryId",
    "CommentId",
    "LikeId",
    "LinkId",
    "UserId",
    "VisitorId",
    # Types
    "ChangeType",
    "CommentCardVariant",
    "CommentFilterType",
    "Email",
    "GatePhase",
    "PostCardVariant",
    "PostStatus",
    "Role",
    "Slug",
    "UploadKind",
    "is_valid_email",
    "slugify",
]
