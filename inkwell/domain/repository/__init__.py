"""Repository interfaces for Inkwell domain."""

from .category import CategoryRepository
from .comment import CommentRepository
from .like import LikeRepository
from .link import LinkRepository
from .post import PostRepository
from .role import RoleRepository
from .site_settings import SiteSettingsRepository

__all__ = [
    "CategoryRepository",
    "CommentRepository",
    "LikeRepository",
    "LinkRepository",
    "PostRepository",
    "RoleRepository",
    "SiteSettingsRepository",
]
