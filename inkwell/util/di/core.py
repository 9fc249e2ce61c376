"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from inkwell.config import (
    AuthSettings,
    CommentSettings,
    LinkGateSettings,
    Settings,
    UploadSettings,
)
from inkwell.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_link_gate_settings(self, settings: Settings) -> LinkGateSettings:
        return settings.link_gate

    @provide(scope=Scope.APP)
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        return settings.uploads
