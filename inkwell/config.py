"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inkwell.util.error import ConfigurationError


class BackendSettings(BaseModel):
    """Hosted backend (record store, auth, storage, functions) configuration."""

    url: str = "http://localhost:54321"
    anon_key: str = "CHANGE_ME_IN_PRODUCTION"
    # Service key is only used for server-side writes that bypass row policies
    service_key: str | None = None
    timeout_seconds: float = 10.0
    storage_bucket: str = "public-assets"

    # Shared secret the backend's database webhooks send in X-Inkwell-Webhook-Secret
    webhook_secret: str = "CHANGE_ME_IN_PRODUCTION"

    @property
    def rest_url(self) -> str:
        return f"{self.url.rstrip('/')}/rest/v1"

    @property
    def auth_url(self) -> str:
        return f"{self.url.rstrip('/')}/auth/v1"

    @property
    def storage_url(self) -> str:
        return f"{self.url.rstrip('/')}/storage/v1"

    @property
    def functions_url(self) -> str:
        return f"{self.url.rstrip('/')}/functions/v1"


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # Access tokens issued by the auth provider are verified locally
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "authenticated"

    session_cookie: str = "inkwell_session"


class CommentSettings(BaseModel):
    """Comment thread presentation limits."""

    max_reply_depth: int = 4
    root_window: int = 2
    collapse_depth: int = 2
    # Longer comments show an excerpt with a "view full comment" toggle
    preview_length: int = 280

    max_name_length: int = 100
    max_email_length: int = 255
    max_body_length: int = 2000


class LinkGateSettings(BaseModel):
    """Link gate countdown configuration."""

    countdown: int = 15
    tick_seconds: float = 1.0

    # Idle gates are dropped from the session store after this long
    session_ttl_minutes: int = 30


class UploadSettings(BaseModel):
    """Client-enforced upload ceilings."""

    thumbnail_max_bytes: int = 5 * 1024 * 1024
    branding_max_bytes: int = 2 * 1024 * 1024


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    logfire_token: str | None = None

    # If None, sends when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested sections use ``__``:

    Development (default):
        ENVIRONMENT=development
        BACKEND__URL=http://localhost:54321
        SITE_URL=http://localhost:8000

    Production:
        ENVIRONMENT=production
        BACKEND__URL=https://<project>.supabase.co
        BACKEND__ANON_KEY=...
        AUTH__JWT_SECRET=...
        SITE_URL=https://inkwell.blog
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Public origin of the reader site, used to build shortened links
    site_url: str = "http://localhost:8000"

    backend: BackendSettings = BackendSettings()
    auth: AuthSettings = AuthSettings()
    comments: CommentSettings = CommentSettings()
    link_gate: LinkGateSettings = LinkGateSettings()
    uploads: UploadSettings = UploadSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def validate_production_secrets(self) -> "Settings":
        """Refuse to start in production with placeholder secrets."""
        if self.environment == "production":
            placeholders = {
                "BACKEND__ANON_KEY": self.backend.anon_key,
                "AUTH__JWT_SECRET": self.auth.jwt_secret,
                "BACKEND__WEBHOOK_SECRET": self.backend.webhook_secret,
            }
            missing = [
                name
                for name, value in placeholders.items()
                if value == "CHANGE_ME_IN_PRODUCTION"
            ]
            if missing:
                raise ConfigurationError(
                    f"Production settings still use placeholder values: {', '.join(missing)}"
                )

        self.site_url = self.site_url.rstrip("/")
        self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
