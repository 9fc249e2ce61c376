"""Admin dashboard and analytics use cases."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.category.list_categories import CategoryResponse
from inkwell.application.usecase.post.manage_posts import AdminPostResponse
from inkwell.domain.service import AnalyticsService


class DashboardResponse(BaseModel):
    total_posts: int
    total_views: int
    total_categories: int
    recent_posts: list[AdminPostResponse]


class GetDashboardUseCase(BaseUseCase):
    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: None = None) -> DashboardResponse:
        summary = await self.analytics_service.dashboard()
        return DashboardResponse(
            total_posts=summary.total_posts,
            total_views=summary.total_views,
            total_categories=summary.total_categories,
            recent_posts=[AdminPostResponse.from_domain(p) for p in summary.recent_posts],
        )


class MonthlyBucketResponse(BaseModel):
    month: str  # YYYY-MM
    published: int
    draft: int
    views: int


class CategoryCountResponse(BaseModel):
    category: CategoryResponse
    post_count: int


class AnalyticsResponse(BaseModel):
    total_views: int
    published_count: int
    draft_count: int
    average_views: float
    top_posts: list[AdminPostResponse]
    monthly: list[MonthlyBucketResponse]
    categories: list[CategoryCountResponse]


class GetAnalyticsUseCase(BaseUseCase):
    """Site analytics report for the admin console."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: None = None) -> AnalyticsResponse:
        report = await self.analytics_service.analytics()
        return AnalyticsResponse(
            total_views=report.total_views,
            published_count=report.published_count,
            draft_count=report.draft_count,
            average_views=report.average_views,
            top_posts=[AdminPostResponse.from_domain(p) for p in report.top_posts],
            monthly=[
                MonthlyBucketResponse(
                    month=b.month, published=b.published, draft=b.draft, views=b.views
                )
                for b in report.monthly
            ],
            categories=[
                CategoryCountResponse(
                    category=CategoryResponse.from_domain(category), post_count=count
                )
                for category, count in report.category_counts
            ],
        )
