"""Admin authentication domain service."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.config import AuthSettings
from inkwell.domain.error import NotAuthorizedError, ValidationError
from inkwell.domain.model.session import AdminSession
from inkwell.domain.repository import RoleRepository
from inkwell.domain.value import Role, UserId, is_valid_email
from inkwell.util.jwt import JWTError, verify_access_token

from .base import Service

MIN_PASSWORD_LENGTH = 6


class AuthUser(BaseModel):
    """User as reported by the auth provider."""

    id: str
    email: str


class AuthTokens(BaseModel):
    """Result of a successful sign-in."""

    access_token: str
    user: AuthUser


class AuthProvider:
    """Port for the hosted auth API. Implementations live in adapters."""

    async def sign_in_with_password(self, email: str, password: str) -> AuthTokens:
        """Exchange credentials for an access token.

        Raises:
            AuthProviderError: If the credentials are rejected
        """
        raise NotImplementedError

    async def sign_out(self, access_token: str) -> None:
        raise NotImplementedError

    async def get_user(self, access_token: str) -> AuthUser | None:
        """User owning an access token, None if the token is not accepted."""
        raise NotImplementedError

    async def update_email(self, access_token: str, email: str) -> AuthUser:
        raise NotImplementedError

    async def update_password(self, access_token: str, password: str) -> AuthUser:
        raise NotImplementedError


class AuthService(Service):
    """Signs admins in and out and resolves console sessions.

    Only users holding the ``admin`` role get a session; anyone else who
    signs in successfully is signed out again at once.
    """

    def __init__(
        self,
        auth_provider: AuthProvider,
        role_repository: RoleRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            auth_provider: Hosted auth API
            role_repository: Role lookups
            auth_settings: JWT verification settings
        """
        self.auth_provider = auth_provider
        self.role_repository = role_repository
        self.auth_settings = auth_settings

    async def login(self, email: str, password: str) -> AdminSession:
        """Sign an admin in.

        Raises:
            ValidationError: If email or password is blank
            AuthProviderError: If the credentials are rejected
            NotAuthorizedError: If the user is not an admin
        """
        email = email.strip()
        if not email or not password:
            raise ValidationError("Email and password are required", field="email")

        with logfire.span("auth_service.login", email=email):
            tokens = await self.auth_provider.sign_in_with_password(email, password)
            user_id = UserId(UUID(tokens.user.id))

            if not await self.role_repository.has_role(user_id, Role.ADMIN):
                logfire.warn("Non-admin sign-in rejected", user_id=str(user_id))
                await self.auth_provider.sign_out(tokens.access_token)
                raise NotAuthorizedError("Access denied. Admin privileges required.")

            logfire.info("Admin signed in", user_id=str(user_id))
            return AdminSession(
                user_id=user_id,
                email=tokens.user.email,
                access_token=tokens.access_token,
                is_admin=True,
            )

    async def logout(self, access_token: str | None) -> None:
        """Sign out. Failures are logged; the caller clears its cookie anyway."""
        if not access_token:
            return
        try:
            await self.auth_provider.sign_out(access_token)
            logfire.info("Admin signed out")
        except Exception as e:
            logfire.warn("Sign-out failed", error=str(e))

    async def get_session(self, access_token: str | None) -> AdminSession | None:
        """Resolve a session cookie to an admin session.

        The token is verified locally first; only a valid token reaches the
        backend for the role check.

        Returns:
            The session, None when there is no valid admin token
        """
        if not access_token:
            return None

        try:
            claims = verify_access_token(access_token, self.auth_settings)
        except JWTError as e:
            logfire.debug("Session token rejected", error=str(e))
            return None

        try:
            user_id = UserId(UUID(claims.sub))
        except ValueError:
            return None

        if not await self.role_repository.has_role(user_id, Role.ADMIN):
            return None

        return AdminSession(
            user_id=user_id,
            email=claims.email or "",
            access_token=access_token,
            is_admin=True,
        )

    async def update_email(self, session: AdminSession, email: str) -> AuthUser:
        """Change the signed-in admin's email.

        Raises:
            ValidationError: If the email is blank or malformed
        """
        email = email.strip()
        if not email:
            raise ValidationError("Please enter an email address", field="email")
        if not is_valid_email(email):
            raise ValidationError("Please enter a valid email address", field="email")

        with logfire.span("auth_service.update_email", user_id=str(session.user_id)):
            user = await self.auth_provider.update_email(session.access_token, email)
            logfire.info("Admin email update requested", user_id=str(session.user_id))
            return user

    async def update_password(
        self, session: AdminSession, password: str, confirmation: str
    ) -> AuthUser:
        """Change the signed-in admin's password.

        Raises:
            ValidationError: If the passwords differ or are too short
        """
        if password != confirmation:
            raise ValidationError("Passwords do not match", field="confirm_password")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )

        with logfire.span("auth_service.update_password", user_id=str(session.user_id)):
            user = await self.auth_provider.update_password(session.access_token, password)
            logfire.info("Admin password updated", user_id=str(session.user_id))
            return user
