"""Hosted backend infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from inkwell.adapter.backend import (
    RealAuthProvider,
    RealFunctionInvoker,
    RealObjectStorage,
    RecordStoreClient,
)
from inkwell.config import Settings
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
from inkwell.persistence.repository import (
    RemoteCategoryRepository,
    RemoteCommentRepository,
    RemoteLikeRepository,
    RemoteLinkRepository,
    RemotePostRepository,
    RemoteRoleRepository,
    RemoteSiteSettingsRepository,
)
from inkwell.util.di.base import ProviderBase


class BackendProvider(ProviderBase):
    """Backend component base."""

    __mock_component__ = "backend"


class ProdBackendProvider(BackendProvider):
    """Production backend provider over the hosted record store's HTTP APIs.

    Everything is APP-scoped: the repositories hold no per-request state and
    share one connection pool.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_http_client(self, settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client, closed on shutdown."""
        client = httpx.AsyncClient(timeout=settings.backend.timeout_seconds)
        logfire.info("Backend HTTP client opened", backend_url=settings.backend.url)
        yield client
        await client.aclose()

    @provide
    def get_record_store(
        self, http: httpx.AsyncClient, settings: Settings
    ) -> RecordStoreClient:
        """Provide record store client."""
        return RecordStoreClient(
            http,
            rest_url=settings.backend.rest_url,
            api_key=settings.backend.anon_key,
            service_key=settings.backend.service_key,
        )

    @provide
    def get_post_repository(self, client: RecordStoreClient) -> PostRepository:
        """Provide Post repository."""
        return RemotePostRepository(client)

    @provide
    def get_category_repository(self, client: RecordStoreClient) -> CategoryRepository:
        """Provide Category repository."""
        return RemoteCategoryRepository(client)

    @provide
    def get_comment_repository(self, client: RecordStoreClient) -> CommentRepository:
        """Provide Comment repository."""
        return RemoteCommentRepository(client)

    @provide
    def get_like_repository(self, client: RecordStoreClient) -> LikeRepository:
        """Provide CommentLike repository."""
        return RemoteLikeRepository(client)

    @provide
    def get_link_repository(self, client: RecordStoreClient) -> LinkRepository:
        """Provide ShortenedLink repository."""
        return RemoteLinkRepository(client)

    @provide
    def get_site_settings_repository(
        self, client: RecordStoreClient
    ) -> SiteSettingsRepository:
        """Provide SiteSettings repository."""
        return RemoteSiteSettingsRepository(client)

    @provide
    def get_role_repository(self, client: RecordStoreClient) -> RoleRepository:
        """Provide role repository."""
        return RemoteRoleRepository(client)

    @provide
    def get_auth_provider(self, http: httpx.AsyncClient, settings: Settings) -> AuthProvider:
        """Provide hosted auth client."""
        return RealAuthProvider(
            http, auth_url=settings.backend.auth_url, api_key=settings.backend.anon_key
        )

    @provide
    def get_object_storage(
        self, http: httpx.AsyncClient, settings: Settings
    ) -> ObjectStorage:
        """Provide object storage client."""
        return RealObjectStorage(
            http,
            storage_url=settings.backend.storage_url,
            bucket=settings.backend.storage_bucket,
            api_key=settings.backend.service_key or settings.backend.anon_key,
        )

    @provide
    def get_function_invoker(
        self, http: httpx.AsyncClient, settings: Settings
    ) -> FunctionInvoker:
        """Provide backend function invoker."""
        return RealFunctionInvoker(
            http,
            functions_url=settings.backend.functions_url,
            api_key=settings.backend.anon_key,
        )
