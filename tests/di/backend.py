"""Mock backend providers for testing."""

from dishka import Scope, provide

from inkwell.adapter.backend import (
    MockAuthProvider,
    MockFunctionInvoker,
    MockObjectStorage,
)
from inkwell.config import AuthSettings
from inkwell.domain.repository import (
    CategoryRepository,
    CommentRepository,
    LikeRepository,
    LinkRepository,
    PostRepository,
    RoleRepository,
    SiteSettingsRepository,
)
from inkwell.domain.service import AuthProvider, FunctionInvoker, ObjectStorage
from inkwell.persistence.repository.inmemory import (
    InMemoryCategoryRepository,
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryLinkRepository,
    InMemoryPostRepository,
    InMemoryRoleRepository,
    InMemorySiteSettingsRepository,
)
from inkwell.util.di.infrastructure.backend import BackendProvider


class MockBackendProvider(BackendProvider):
    """Mock backend provider using in-memory repositories and ports.

    Uses APP scope so state survives across requests within one container;
    every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_post_repository(self) -> PostRepository:
        return InMemoryPostRepository()

    @provide
    def get_category_repository(self) -> CategoryRepository:
        return InMemoryCategoryRepository()

    @provide
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide
    def get_like_repository(self) -> LikeRepository:
        return InMemoryLikeRepository()

    @provide
    def get_link_repository(self) -> LinkRepository:
        return InMemoryLinkRepository()

    @provide
    def get_site_settings_repository(self) -> SiteSettingsRepository:
        return InMemorySiteSettingsRepository()

    @provide
    def get_role_repository(self) -> RoleRepository:
        return InMemoryRoleRepository()

    @provide
    def get_auth_provider(self, auth_settings: AuthSettings) -> AuthProvider:
        """Provide mock auth provider that mints tokens with the configured secret."""
        return MockAuthProvider(auth_settings)

    @provide
    def get_object_storage(self) -> ObjectStorage:
        return MockObjectStorage()

    @provide
    def get_function_invoker(self, link_repository: LinkRepository) -> FunctionInvoker:
        """Provide mock function invoker wired to the in-memory link repository."""
        return MockFunctionInvoker(link_repository=link_repository)
