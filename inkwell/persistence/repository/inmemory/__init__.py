"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .link import InMemoryLinkRepository
from .post import InMemoryPostRepository
from .role import InMemoryRoleRepository
from .site_settings import InMemorySiteSettingsRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryLinkRepository",
    "InMemoryPostRepository",
    "InMemoryRoleRepository",
    "InMemorySiteSettingsRepository",
]
