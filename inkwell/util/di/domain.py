"""Domain layer DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from inkwell.config import AuthSettings, CommentSettings, UploadSettings
from inkwell.domain.repository import (
    CategoryRepository,
    CommentRepository,
    LikeRepository,
    LinkRepository,
    PostRepository,
    RoleRepository,
    SiteSettingsRepository,
)
from inkwell.domain.service import (
    AnalyticsService,
    AuthProvider,
    AuthService,
    CategoryService,
    CommentService,
    FunctionInvoker,
    LikeService,
    LinkService,
    ObjectStorage,
    PostService,
    SiteSettingsCell,
    SiteSettingsService,
    UploadService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped. ``LinkService`` is the exception: it
    is APP-scoped because it owns the background click-count tasks, which
    must outlive the request that scheduled them.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, category_repository: CategoryRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, category_repository=category_repository
        )

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, settings=comment_settings
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, comment_repository: CommentRepository
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, comment_repository=comment_repository
        )

    @provide(scope=Scope.APP)
    async def get_link_service(
        self,
        link_repository: LinkRepository,
        post_repository: PostRepository,
        function_invoker: FunctionInvoker,
    ) -> AsyncIterator[LinkService]:
        """Provide link domain service; pending click counts finish on shutdown."""
        service = LinkService(
            link_repository=link_repository,
            post_repository=post_repository,
            function_invoker=function_invoker,
        )
        yield service
        await service.drain()

    @provide
    def get_site_settings_service(
        self,
        site_settings_repository: SiteSettingsRepository,
        cell: SiteSettingsCell,
    ) -> SiteSettingsService:
        """Provide site settings domain service."""
        return SiteSettingsService(
            site_settings_repository=site_settings_repository, cell=cell
        )

    @provide
    def get_analytics_service(
        self, post_repository: PostRepository, category_service: CategoryService
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            post_repository=post_repository, category_service=category_service
        )

    @provide
    def get_auth_service(
        self,
        auth_provider: AuthProvider,
        role_repository: RoleRepository,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide admin authentication domain service."""
        return AuthService(
            auth_provider=auth_provider,
            role_repository=role_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_upload_service(
        self, storage: ObjectStorage, upload_settings: UploadSettings
    ) -> UploadService:
        """Provide upload domain service."""
        return UploadService(storage=storage, settings=upload_settings)
