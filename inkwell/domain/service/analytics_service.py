"""Analytics domain service."""

from collections import OrderedDict
from dataclasses import dataclass, field

import logfire

from inkwell.domain.model.category import Category
from inkwell.domain.model.post import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostStatus

from .base import Service
from .category_service import CategoryService

TOP_POSTS_LIMIT = 10
RECENT_POSTS_LIMIT = 5


@dataclass
class MonthlyBucket:
    """Posts created and views gathered in one calendar month."""

    month: str
    published: int = 0
    draft: int = 0
    views: int = 0


@dataclass
class DashboardSummary:
    total_posts: int
    total_views: int
    total_categories: int
    recent_posts: list[Post]


@dataclass
class SiteAnalytics:
    total_views: int
    published_count: int
    draft_count: int
    average_views: float
    top_posts: list[Post]
    monthly: list[MonthlyBucket]
    category_counts: list[tuple[Category, int]] = field(default_factory=list)


class AnalyticsService(Service):
    """Aggregates post statistics for the admin console."""

    def __init__(
        self, post_repository: PostRepository, category_service: CategoryService
    ) -> None:
        """Initialize analytics service.

        Args:
            post_repository: Post repository
            category_service: Category domain service
        """
        self.post_repository = post_repository
        self.category_service = category_service

    async def dashboard(self) -> DashboardSummary:
        """Headline numbers and the most recently created posts."""
        with logfire.span("analytics_service.dashboard"):
            posts = await self.post_repository.list_all()
            categories = await self.category_service.list_categories()
            return DashboardSummary(
                total_posts=len(posts),
                total_views=sum(p.view_count for p in posts),
                total_categories=len(categories),
                recent_posts=posts[:RECENT_POSTS_LIMIT],
            )

    async def analytics(self) -> SiteAnalytics:
        """Full analytics report.

        Monthly buckets are keyed by ``created_at`` month (``YYYY-MM``) in
        chronological order. The average is over published posts only.
        """
        with logfire.span("analytics_service.analytics"):
            posts = await self.post_repository.list_all()
            published = [p for p in posts if p.status == PostStatus.PUBLISHED]
            drafts = [p for p in posts if p.status == PostStatus.DRAFT]

            total_views = sum(p.view_count for p in posts)
            published_views = sum(p.view_count for p in published)
            average = round(published_views / len(published), 1) if published else 0.0

            top_posts = sorted(posts, key=lambda p: p.view_count, reverse=True)[
                :TOP_POSTS_LIMIT
            ]

            buckets: OrderedDict[str, MonthlyBucket] = OrderedDict()
            for post in sorted(posts, key=lambda p: p.created_at):
                month = post.created_at.strftime("%Y-%m")
                bucket = buckets.setdefault(month, MonthlyBucket(month=month))
                if post.status == PostStatus.PUBLISHED:
                    bucket.published += 1
                else:
                    bucket.draft += 1
                bucket.views += post.view_count

            category_counts = await self.category_service.post_counts()

            logfire.info(
                "Analytics computed",
                posts=len(posts),
                total_views=total_views,
                months=len(buckets),
            )
            return SiteAnalytics(
                total_views=total_views,
                published_count=len(published),
                draft_count=len(drafts),
                average_views=average,
                top_posts=top_posts,
                monthly=list(buckets.values()),
                category_counts=category_counts,
            )
