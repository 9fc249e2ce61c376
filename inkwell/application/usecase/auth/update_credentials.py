"""Update admin credentials use cases."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model.session import AdminSession
from inkwell.domain.service import AuthService


class UpdateEmailRequest(BaseModel):
    email: str


class UpdatePasswordRequest(BaseModel):
    password: str
    confirm_password: str


class CredentialsResponse(BaseModel):
    email: str
    message: str


class UpdateEmailUseCase(BaseUseCase):
    """Request an email change for the signed-in admin.

    The auth provider sends a confirmation link; the address changes once
    it is followed.
    """

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(
        self, session: AdminSession, request: UpdateEmailRequest
    ) -> CredentialsResponse:
        user = await self.auth_service.update_email(session, request.email)
        return CredentialsResponse(
            email=user.email, message="Confirmation email sent to the new address"
        )


class UpdatePasswordUseCase(BaseUseCase):
    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(
        self, session: AdminSession, request: UpdatePasswordRequest
    ) -> CredentialsResponse:
        user = await self.auth_service.update_password(
            session, request.password, request.confirm_password
        )
        return CredentialsResponse(email=user.email, message="Password updated")
