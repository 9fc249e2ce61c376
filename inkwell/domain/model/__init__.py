"""Domain models for Inkwell."""

from .category import Category, PostCategory
from .comment import Comment
from .common import DomainModel
from .like import CommentLike
from .link import ShortenedLink
from .post import Post
from .session import AdminSession
from .site_settings import SiteSettings

__all__ = [
    "AdminSession",
    "Category",
    "Comment",
    "CommentLike",
    "DomainModel",
    "Post",
    "PostCategory",
    "ShortenedLink",
    "SiteSettings",
]
