"""Get admin session use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model.session import AdminSession
from inkwell.domain.service import AuthService


class GetSessionRequest(BaseModel):
    access_token: str | None = None


class GetSessionUseCase(BaseUseCase):
    """Resolve a session cookie. None when it is missing, invalid or not an admin's."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: GetSessionRequest) -> AdminSession | None:
        return await self.auth_service.get_session(request.access_token)
