"""Domain services."""

from .analytics_service import (
    AnalyticsService,
    DashboardSummary,
    MonthlyBucket,
    SiteAnalytics,
)
from .auth_service import AuthProvider, AuthService, AuthTokens, AuthUser
from .base import Service
from .category_service import CategoryService
from .change_feed import ChangeEvent, ChangeFeed, ChangeHandler, Subscription
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_forest, count_nodes, walk_forest
from .like_service import LikeService
from .link_gate import GateCountdown, LinkGate
from .link_service import FunctionInvoker, LinkService
from .post_service import PostService
from .site_settings_service import SiteSettingsCell, SiteSettingsService
from .upload_service import ObjectStorage, UploadService

__all__ = [
    "AnalyticsService",
    "AuthProvider",
    "AuthService",
    "AuthTokens",
    "AuthUser",
    "CategoryService",
    "ChangeEvent",
    "ChangeFeed",
    "ChangeHandler",
    "CommentNode",
    "CommentService",
    "DashboardSummary",
    "FunctionInvoker",
    "GateCountdown",
    "LikeService",
    "LinkGate",
    "LinkService",
    "MonthlyBucket",
    "ObjectStorage",
    "PostService",
    "Service",
    "SiteAnalytics",
    "SiteSettingsCell",
    "SiteSettingsService",
    "Subscription",
    "UploadService",
    "build_comment_forest",
    "count_nodes",
    "walk_forest",
]
