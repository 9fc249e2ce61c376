"""Repository implementations over the hosted record store."""

from .category import RemoteCategoryRepository
from .comment import RemoteCommentRepository
from .like import RemoteLikeRepository
from .link import RemoteLinkRepository
from .post import RemotePostRepository
from .role import RemoteRoleRepository
from .site_settings import RemoteSiteSettingsRepository

__all__ = [
    "RemoteCategoryRepository",
    "RemoteCommentRepository",
    "RemoteLikeRepository",
    "RemoteLinkRepository",
    "RemotePostRepository",
    "RemoteRoleRepository",
    "RemoteSiteSettingsRepository",
]
