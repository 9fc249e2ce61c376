"""Admin login and logout use cases."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model.session import AdminSession
from inkwell.domain.service import AuthService


class SessionResponse(BaseModel):
    """Signed-in admin, as the console sees it."""

    user_id: str
    email: str
    is_admin: bool

    @classmethod
    def from_domain(cls, session: AdminSession) -> "SessionResponse":
        return cls(
            user_id=str(session.user_id), email=session.email, is_admin=session.is_admin
        )


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    session: SessionResponse
    access_token: str  # Set as the session cookie by the route


class LoginUseCase(BaseUseCase):
    """Sign an admin in with email and password."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            ValidationError: If email or password is blank
            AuthProviderError: If the credentials are rejected
            NotAuthorizedError: If the user does not hold the admin role
        """
        session = await self.auth_service.login(request.email, request.password)
        return LoginResponse(
            session=SessionResponse.from_domain(session),
            access_token=session.access_token,
        )


class LogoutRequest(BaseModel):
    access_token: str | None = None


class LogoutUseCase(BaseUseCase):
    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LogoutRequest) -> None:
        await self.auth_service.logout(request.access_token)
