"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.adapter.realtime import GateSessionStore
from inkwell.application.usecase.admin import (
    GetAnalyticsUseCase,
    GetDashboardUseCase,
    GetSiteSettingsUseCase,
    UpdateSiteSettingsUseCase,
    UploadImageUseCase,
)
from inkwell.application.usecase.auth import (
    GetSessionUseCase,
    LoginUseCase,
    LogoutUseCase,
    UpdateEmailUseCase,
    UpdatePasswordUseCase,
)
from inkwell.application.usecase.category import (
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    SaveCategoryUseCase,
)
from inkwell.application.usecase.comment import (
    AdminReplyUseCase,
    CommentThreadFactory,
    DeleteCommentUseCase,
    GetThreadUseCase,
    ListModerationUseCase,
    StreamThreadUseCase,
    SubmitCommentUseCase,
    ToggleLikeUseCase,
)
from inkwell.application.usecase.link import (
    CloseGateUseCase,
    ContinueGateUseCase,
    CreateLinkUseCase,
    DeleteLinkUseCase,
    GetGateUseCase,
    ListLinksUseCase,
    OpenGateUseCase,
    SubmitGatePasswordUseCase,
    UpdateLinkUseCase,
)
from inkwell.application.usecase.post import (
    DeletePostUseCase,
    GetAdminPostUseCase,
    GetHomeUseCase,
    GetPostUseCase,
    ListAdminPostsUseCase,
    ListPostsUseCase,
    SavePostUseCase,
)
from inkwell.config import Settings
from inkwell.domain.service import (
    AnalyticsService,
    AuthService,
    CategoryService,
    ChangeFeed,
    CommentService,
    LikeService,
    LinkService,
    PostService,
    SiteSettingsService,
    UploadService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Reader site use cases
    @provide
    def get_home_use_case(
        self, post_service: PostService, category_service: CategoryService
    ) -> GetHomeUseCase:
        """Provide get home use case."""
        return GetHomeUseCase(post_service=post_service, category_service=category_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, category_service: CategoryService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, category_service=category_service
        )

    @provide
    def get_post_use_case(
        self, post_service: PostService, category_service: CategoryService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, category_service=category_service)

    @provide
    def get_site_settings_use_case(
        self, site_settings_service: SiteSettingsService
    ) -> GetSiteSettingsUseCase:
        return GetSiteSettingsUseCase(site_settings_service=site_settings_service)

    # Comment thread use cases
    @provide
    def get_thread_factory(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        change_feed: ChangeFeed,
        settings: Settings,
    ) -> CommentThreadFactory:
        """Provide comment thread controller factory."""
        return CommentThreadFactory(
            comment_service=comment_service,
            like_service=like_service,
            change_feed=change_feed,
            settings=settings,
        )

    @provide
    def get_thread_use_case(self, thread_factory: CommentThreadFactory) -> GetThreadUseCase:
        return GetThreadUseCase(thread_factory=thread_factory)

    @provide
    def get_stream_thread_use_case(
        self, thread_factory: CommentThreadFactory
    ) -> StreamThreadUseCase:
        return StreamThreadUseCase(thread_factory=thread_factory)

    @provide
    def get_submit_comment_use_case(
        self, thread_factory: CommentThreadFactory
    ) -> SubmitCommentUseCase:
        return SubmitCommentUseCase(thread_factory=thread_factory)

    @provide
    def get_toggle_like_use_case(
        self, thread_factory: CommentThreadFactory
    ) -> ToggleLikeUseCase:
        return ToggleLikeUseCase(thread_factory=thread_factory)

    # Link gate use cases
    @provide
    def get_open_gate_use_case(
        self, link_service: LinkService, gate_store: GateSessionStore, settings: Settings
    ) -> OpenGateUseCase:
        """Provide open gate use case."""
        return OpenGateUseCase(
            link_service=link_service, gate_store=gate_store, settings=settings
        )

    @provide
    def get_gate_use_case(
        self, gate_store: GateSessionStore, settings: Settings
    ) -> GetGateUseCase:
        return GetGateUseCase(gate_store=gate_store, settings=settings)

    @provide
    def get_continue_gate_use_case(
        self, gate_store: GateSessionStore, settings: Settings
    ) -> ContinueGateUseCase:
        return ContinueGateUseCase(gate_store=gate_store, settings=settings)

    @provide
    def get_submit_gate_password_use_case(
        self, gate_store: GateSessionStore, settings: Settings
    ) -> SubmitGatePasswordUseCase:
        return SubmitGatePasswordUseCase(gate_store=gate_store, settings=settings)

    @provide
    def get_close_gate_use_case(
        self, gate_store: GateSessionStore, settings: Settings
    ) -> CloseGateUseCase:
        return CloseGateUseCase(gate_store=gate_store, settings=settings)

    # Auth use cases
    @provide
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide
    def get_logout_use_case(self, auth_service: AuthService) -> LogoutUseCase:
        return LogoutUseCase(auth_service=auth_service)

    @provide
    def get_session_use_case(self, auth_service: AuthService) -> GetSessionUseCase:
        return GetSessionUseCase(auth_service=auth_service)

    @provide
    def get_update_email_use_case(self, auth_service: AuthService) -> UpdateEmailUseCase:
        return UpdateEmailUseCase(auth_service=auth_service)

    @provide
    def get_update_password_use_case(
        self, auth_service: AuthService
    ) -> UpdatePasswordUseCase:
        return UpdatePasswordUseCase(auth_service=auth_service)

    # Admin post and category use cases
    @provide
    def get_list_admin_posts_use_case(
        self, post_service: PostService, category_service: CategoryService
    ) -> ListAdminPostsUseCase:
        return ListAdminPostsUseCase(
            post_service=post_service, category_service=category_service
        )

    @provide
    def get_admin_post_use_case(
        self,
        post_service: PostService,
        category_service: CategoryService,
        comment_service: CommentService,
    ) -> GetAdminPostUseCase:
        """Provide admin post detail use case."""
        return GetAdminPostUseCase(
            post_service=post_service,
            category_service=category_service,
            comment_service=comment_service,
        )

    @provide
    def get_save_post_use_case(
        self, post_service: PostService, category_service: CategoryService
    ) -> SavePostUseCase:
        return SavePostUseCase(post_service=post_service, category_service=category_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(category_service=category_service)

    @provide
    def get_save_category_use_case(
        self, category_service: CategoryService
    ) -> SaveCategoryUseCase:
        return SaveCategoryUseCase(category_service=category_service)

    @provide
    def get_delete_category_use_case(
        self, category_service: CategoryService
    ) -> DeleteCategoryUseCase:
        return DeleteCategoryUseCase(category_service=category_service)

    # Admin comment use cases
    @provide
    def get_list_moderation_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> ListModerationUseCase:
        """Provide comment moderation list use case."""
        return ListModerationUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_admin_reply_use_case(self, comment_service: CommentService) -> AdminReplyUseCase:
        return AdminReplyUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    # Admin link shortener use cases
    @provide
    def get_list_links_use_case(
        self, link_service: LinkService, settings: Settings
    ) -> ListLinksUseCase:
        return ListLinksUseCase(link_service=link_service, settings=settings)

    @provide
    def get_create_link_use_case(
        self, link_service: LinkService, settings: Settings
    ) -> CreateLinkUseCase:
        return CreateLinkUseCase(link_service=link_service, settings=settings)

    @provide
    def get_update_link_use_case(
        self, link_service: LinkService, settings: Settings
    ) -> UpdateLinkUseCase:
        return UpdateLinkUseCase(link_service=link_service, settings=settings)

    @provide
    def get_delete_link_use_case(
        self, link_service: LinkService, settings: Settings
    ) -> DeleteLinkUseCase:
        return DeleteLinkUseCase(link_service=link_service, settings=settings)

    # Admin site use cases
    @provide
    def get_dashboard_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetDashboardUseCase:
        return GetDashboardUseCase(analytics_service=analytics_service)

    @provide
    def get_analytics_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetAnalyticsUseCase:
        return GetAnalyticsUseCase(analytics_service=analytics_service)

    @provide
    def get_update_site_settings_use_case(
        self, site_settings_service: SiteSettingsService
    ) -> UpdateSiteSettingsUseCase:
        return UpdateSiteSettingsUseCase(site_settings_service=site_settings_service)

    @provide
    def get_upload_image_use_case(self, upload_service: UploadService) -> UploadImageUseCase:
        return UploadImageUseCase(upload_service=upload_service)
